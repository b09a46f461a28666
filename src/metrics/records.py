"""Shared data records for column statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DataSummary:
    """Mean and sample variance of one column."""

    mean: float
    variance: float
    column: str = ""
    count: int = 0

    @property
    def peak(self) -> float:
        """Larger of the two statistics, used to scale the chart axis."""
        return max(self.mean, self.variance)

"""Static configuration for summary chart layout and output."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np

# Default directory used by the Typer CLI; callers may override it.
DEFAULT_OUTPUT_DIR = Path("output")

SUPPORTED_FORMATS: Tuple[str, ...] = ("svg", "png")


@dataclass(frozen=True)
class ChartConfig:
    """Layout constants for the two-bar summary chart."""

    width: int = 800
    height: int = 600
    headroom: float = 1.2
    min_span: float = 1.0
    bar_width: float = 0.5
    mean_color: str = "red"
    variance_color: str = "blue"
    title_font_size: int = 40
    margin: int = 10
    label_area: int = 50

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Chart width and height must be strictly positive.")
        if not np.isfinite(self.headroom) or self.headroom < 1.0:
            raise ValueError("headroom must be a finite factor of at least 1.0.")
        if not np.isfinite(self.min_span) or self.min_span <= 0:
            raise ValueError("min_span must be a finite positive number.")
        if not 0 < self.bar_width < 1:
            raise ValueError("bar_width must fall within (0, 1).")
        if self.margin < 0 or self.label_area < 0:
            raise ValueError("Margins cannot be negative.")


__all__ = ["DEFAULT_OUTPUT_DIR", "SUPPORTED_FORMATS", "ChartConfig"]

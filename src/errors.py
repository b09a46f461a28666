"""Error taxonomy shared by the stats and chart components."""

from __future__ import annotations


class ColumnSummaryError(Exception):
    """Base class for every failure raised while summarizing a column."""


class IoError(ColumnSummaryError, OSError):
    """A source table or an output file could not be read or written."""


class SchemaError(ColumnSummaryError, ValueError):
    """The requested column is missing or holds values that are not numbers."""


class InsufficientDataError(ColumnSummaryError, ValueError):
    """Too few observations to compute a sample variance."""


class RenderError(ColumnSummaryError, RuntimeError):
    """The chart figure could not be finalized or encoded."""


__all__ = [
    "ColumnSummaryError",
    "InsufficientDataError",
    "IoError",
    "RenderError",
    "SchemaError",
]

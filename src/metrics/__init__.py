"""Descriptive statistics for a single table column."""

from .records import DataSummary
from .summary import process_data, summarize_values

__all__ = ["DataSummary", "process_data", "summarize_values"]

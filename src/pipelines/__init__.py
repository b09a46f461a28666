"""Pipeline helpers chaining column statistics into chart output."""

from .summary_chart import SummaryChartResult, run_summary_chart

__all__ = [
    "SummaryChartResult",
    "run_summary_chart",
]

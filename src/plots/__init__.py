"""Plotting utilities for column summaries."""

from .config import DEFAULT_OUTPUT_DIR, SUPPORTED_FORMATS, ChartConfig
from .save_config import ChartDestination, chart_path, chart_slug
from .summary_chart import axis_range, build_summary_figure, render_chart

__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "SUPPORTED_FORMATS",
    "ChartConfig",
    "ChartDestination",
    "axis_range",
    "build_summary_figure",
    "chart_path",
    "chart_slug",
    "render_chart",
]

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from src.datahub.loader import TableSource
from src.metrics.records import DataSummary
from src.metrics.summary import process_data
from src.plots.config import ChartConfig
from src.plots.save_config import ChartDestination
from src.plots.summary_chart import render_chart


@dataclass(frozen=True)
class SummaryChartResult:
    """Statistics plus the files written for one (table, column) run."""

    summary: DataSummary
    chart_path: Path
    html_path: Optional[Path] = None


def run_summary_chart(
    source: TableSource,
    column: str,
    destination: Optional[ChartDestination] = None,
    config: Optional[ChartConfig] = None,
) -> SummaryChartResult:
    """Summarize `column` of `source` and render its chart.

    The chart is only attempted once the statistics succeeded, so a stats
    failure never leaves an image behind.
    """
    dest = destination or ChartDestination()
    summary = process_data(source, column)
    chart_path = render_chart(summary, column, destination=dest, config=config)
    html_path = dest.html_path(column) if dest.save_html else None
    return SummaryChartResult(summary=summary, chart_path=chart_path, html_path=html_path)

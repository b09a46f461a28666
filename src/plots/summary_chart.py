"""Two-bar chart comparing a column's mean and sample variance."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import plotly.graph_objects as go

from src.errors import IoError, RenderError
from src.metrics.records import DataSummary
from .config import ChartConfig
from .save_config import ChartDestination

MEAN_POSITION = 1
VARIANCE_POSITION = 2
X_RANGE = (0, 3)


def axis_range(summary: DataSummary, config: Optional[ChartConfig] = None) -> Tuple[float, float]:
    """Vertical axis bounds for the chart.

    The upper bound is `headroom * max(mean, variance)`; when that is not
    positive (both statistics zero, or a non-positive mean with zero variance)
    it falls back to `min_span`. The lower bound stays at zero unless the
    mean is negative, in which case it is scaled by the same headroom.
    """
    cfg = config or ChartConfig()
    upper = cfg.headroom * summary.peak
    if not upper > 0:
        upper = cfg.min_span
    lower = min(0.0, cfg.headroom * summary.mean)
    return float(lower), float(upper)


def build_summary_figure(
    summary: DataSummary,
    column: str,
    config: Optional[ChartConfig] = None,
) -> go.Figure:
    """Build the Mean/Variance bar figure without writing it anywhere."""
    cfg = config or ChartConfig()
    cfg.validate()
    lower, upper = axis_range(summary, cfg)

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=[MEAN_POSITION],
            y=[summary.mean],
            base=0.0,
            width=[cfg.bar_width],
            name="Mean",
            marker=dict(color=cfg.mean_color, line=dict(width=0)),
        )
    )
    fig.add_trace(
        go.Bar(
            x=[VARIANCE_POSITION],
            y=[summary.variance],
            base=0.0,
            width=[cfg.bar_width],
            name="Variance",
            marker=dict(color=cfg.variance_color, line=dict(width=0)),
        )
    )

    axis_style = dict(showgrid=False, zeroline=False, showline=True, linecolor="black", ticks="outside")
    fig.update_layout(
        title=dict(
            text=f"Statistical Summary of '{column}'",
            font=dict(family="sans-serif", size=cfg.title_font_size),
            x=0.5,
        ),
        width=cfg.width,
        height=cfg.height,
        margin=dict(
            l=cfg.margin + cfg.label_area,
            r=cfg.margin,
            t=cfg.margin + cfg.title_font_size + cfg.label_area // 2,
            b=cfg.margin + cfg.label_area,
        ),
        barmode="overlay",
        paper_bgcolor="white",
        plot_bgcolor="white",
        showlegend=True,
        legend=dict(bordercolor="black", borderwidth=1, bgcolor="white"),
        xaxis=dict(
            title=dict(text="Statistic"),
            range=list(X_RANGE),
            tickmode="array",
            tickvals=[MEAN_POSITION, VARIANCE_POSITION],
            ticktext=["Mean", "Variance"],
            **axis_style,
        ),
        yaxis=dict(
            title=dict(text="Value"),
            range=[lower, upper],
            **axis_style,
        ),
    )
    return fig


def render_chart(
    summary: DataSummary,
    column: str,
    destination: Optional[ChartDestination] = None,
    config: Optional[ChartConfig] = None,
) -> Path:
    """Write the summary chart for `column` and return the static image path.

    The output directory must already exist. Every file is first written to a
    temporary sibling and only moved into place once all of them succeeded;
    if a later move fails, files already moved by this call are removed again.

    Raises:
        IoError: the output directory is missing or not writable.
        RenderError: plotly or kaleido failed to produce the image.
    """
    dest = destination or ChartDestination()
    cfg = config or ChartConfig()
    directory = Path(dest.directory)
    if not directory.is_dir():
        raise IoError(f"Output directory does not exist: {directory}")

    fig = build_summary_figure(summary, column, cfg)
    static_path = dest.static_path(column)

    writers: List[Tuple[Path, Callable[[str], None]]] = [
        (
            static_path,
            lambda tmp: fig.write_image(tmp, format=dest.fmt, width=cfg.width, height=cfg.height),
        )
    ]
    if dest.save_html:
        writers.append(
            (
                dest.html_path(column),
                lambda tmp: fig.write_html(tmp, include_plotlyjs="cdn", full_html=True),
            )
        )

    _write_all(writers)
    print(f"[plots] Chart saved to {static_path}")
    return static_path


def _write_all(writers: List[Tuple[Path, Callable[[str], None]]]) -> None:
    staged: List[Tuple[str, Path]] = []
    placed: List[Path] = []
    try:
        for target, writer in writers:
            tmp_name = _stage(target)
            staged.append((tmp_name, target))
            _run_writer(writer, tmp_name, target)
        mode = _default_file_mode()
        for tmp_name, _ in staged:
            os.chmod(tmp_name, mode)
        for tmp_name, target in staged:
            os.replace(tmp_name, target)
            placed.append(target)
    except OSError as exc:
        _discard(staged, placed)
        raise IoError(f"Could not write chart output: {exc}") from exc
    except BaseException:
        _discard(staged, placed)
        raise


def _default_file_mode() -> int:
    # mkstemp files start at 0600.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _stage(target: Path) -> str:
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.stem}-", suffix=target.suffix)
    os.close(fd)
    return tmp_name


def _run_writer(writer: Callable[[str], None], tmp_name: str, target: Path) -> None:
    try:
        writer(tmp_name)
    except OSError:
        raise
    except Exception as exc:
        raise RenderError(f"Failed to render chart {target}: {exc}") from exc
    if os.path.getsize(tmp_name) == 0:
        raise RenderError(f"Renderer produced an empty file for {target}.")


def _discard(staged: List[Tuple[str, Path]], placed: List[Path]) -> None:
    for tmp_name, _ in staged:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
    for target in placed:
        if target.exists():
            target.unlink()

"""Shared configuration for storing summary charts on disk."""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from pathlib import Path

from src.errors import IoError

from .config import DEFAULT_OUTPUT_DIR, SUPPORTED_FORMATS

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def chart_slug(column: str) -> str:
    """Turn a column name into a filename-safe stem component.

    Names that are already safe are used as-is. Any other name gets a short
    digest of the original appended, so `"a b"` and `"a/b"` stay distinct.
    """
    slug = _UNSAFE_CHARS.sub("_", column).lstrip(".")
    if slug and slug == column:
        return slug
    digest = hashlib.sha256(column.encode("utf-8")).hexdigest()[:8]
    return f"{slug or 'column'}-{digest}"


def chart_path(column: str, output_dir: Path = DEFAULT_OUTPUT_DIR, fmt: str = "svg") -> Path:
    """Deterministic chart location: `<output_dir>/<slug>_summary_chart.<fmt>`."""
    return Path(output_dir) / f"{chart_slug(column)}_summary_chart.{fmt}"


@dataclass(frozen=True)
class ChartDestination:
    """Resolved destinations for saving a column's summary chart."""

    directory: Path = DEFAULT_OUTPUT_DIR
    fmt: str = "svg"
    save_html: bool = False

    def __post_init__(self) -> None:
        if self.fmt not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported chart format '{self.fmt}'; expected one of {SUPPORTED_FORMATS}.")

    def ensure_dir(self) -> None:
        try:
            Path(self.directory).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise IoError(f"Could not create output directory {self.directory}: {exc}") from exc

    def static_path(self, column: str) -> Path:
        return chart_path(column, Path(self.directory), self.fmt)

    def html_path(self, column: str) -> Path:
        return chart_path(column, Path(self.directory), "html")


__all__ = ["ChartDestination", "chart_path", "chart_slug"]

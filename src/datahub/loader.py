from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd

from src.errors import IoError

TableSource = Union[str, Path, pd.DataFrame]


def load_table(path: Union[str, Path]) -> pd.DataFrame:
    """Read a comma-separated file with a header row into a DataFrame."""
    csv_path = Path(path)
    if not csv_path.is_file():
        raise IoError(f"CSV file not found: {csv_path}")
    try:
        return pd.read_csv(csv_path, header=0)
    except pd.errors.EmptyDataError as exc:
        raise IoError(f"CSV file {csv_path} is empty or has no header row") from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise IoError(f"Could not parse CSV file {csv_path}: {exc}") from exc
    except OSError as exc:
        raise IoError(f"Could not read CSV file {csv_path}: {exc}") from exc


def resolve_table(source: TableSource) -> pd.DataFrame:
    """Accept either a loaded DataFrame or a path to one."""
    if isinstance(source, pd.DataFrame):
        return source
    return load_table(source)

from __future__ import annotations

from typing import List

import numpy as np
import pandas as pd

from src.errors import SchemaError


def available_columns(table: pd.DataFrame) -> List[str]:
    """Return the header names as plain strings."""
    return [str(name) for name in table.columns]


def coerce_column(table: pd.DataFrame, column: str) -> np.ndarray:
    """Select `column` and convert every value to float64.

    Numeric and boolean columns are widened; text columns are parsed value by
    value. Empty cells and infinities count as unconvertible, so the result
    always has one finite entry per row.

    Raises:
        SchemaError: if the column is absent or any row cannot be represented
            as a number.
    """
    if column not in table.columns:
        raise SchemaError(
            f"Column '{column}' not found. Available columns: {available_columns(table)}"
        )

    series = table[column]
    if isinstance(series, pd.DataFrame):
        raise SchemaError(f"Column '{column}' is ambiguous: the header lists it more than once.")

    if pd.api.types.is_bool_dtype(series) or pd.api.types.is_numeric_dtype(series):
        values = series.to_numpy(dtype=np.float64, na_value=np.nan)
    else:
        values = np.empty(len(series), dtype=np.float64)
        for position, raw in enumerate(series.tolist()):
            values[position] = _to_float(raw, column, position)

    missing = np.flatnonzero(np.isnan(values))
    if missing.size:
        row = int(missing[0])
        raise SchemaError(f"Column '{column}' has an empty or NaN value at row {row}.")
    infinite = np.flatnonzero(np.isinf(values))
    if infinite.size:
        row = int(infinite[0])
        raise SchemaError(f"Column '{column}' has a non-finite value at row {row}.")
    return values


def _to_float(raw: object, column: str, row: int) -> float:
    if isinstance(raw, (bool, np.bool_)):
        return float(raw)
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        return float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise SchemaError(f"Column '{column}' has non-numeric value {raw!r} at row {row}.") from exc

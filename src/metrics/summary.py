"""Column mean and Bessel-corrected sample variance."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from src.datahub.helpers import coerce_column
from src.datahub.loader import TableSource, resolve_table
from src.errors import InsufficientDataError, SchemaError

from .records import DataSummary

MIN_OBSERVATIONS = 2


def summarize_values(values: Union[np.ndarray, Sequence[float]], column: str = "") -> DataSummary:
    """Compute the mean and sample variance (divisor n - 1) of `values`.

    Uses two passes over the data: the mean first, then the squared deviations
    from it, which avoids the cancellation of a running sum of squares. Values
    are scaled by a power of two and shifted by the first observation before
    summing, so large finite inputs cannot overflow the intermediate sums.

    Args:
        values: Numeric observations, already coerced to floats.
        column: Column name recorded on the summary for reporting.

    Returns:
        DataSummary with the mean, variance and observation count.
    """
    array = np.asarray(values, dtype=np.float64)
    if array.ndim != 1:
        raise ValueError("Column values must be a one-dimensional array.")

    count = int(array.shape[0])
    if count < MIN_OBSERVATIONS:
        label = f"Column '{column}'" if column else "Input"
        raise InsufficientDataError(
            f"{label} has {count} value(s); sample variance needs at least {MIN_OBSERVATIONS}."
        )

    _, exponent = np.frexp(np.max(np.abs(array)))
    exponent = int(exponent)
    scaled = np.ldexp(array, -exponent)
    shift = scaled[0]
    shifted = scaled - shift

    shifted_mean = np.sum(shifted) / count
    deviations = shifted - shifted_mean
    scaled_mean = shift + shifted_mean
    scaled_variance = np.sum(deviations * deviations) / (count - 1)

    with np.errstate(over="ignore"):
        mean = float(np.ldexp(scaled_mean, exponent))
        variance = float(np.ldexp(scaled_variance, 2 * exponent))
    if not (np.isfinite(mean) and np.isfinite(variance)):
        label = f"Column '{column}'" if column else "Input"
        raise SchemaError(f"{label} has values too large for a finite mean and variance.")
    return DataSummary(mean=mean, variance=variance, column=column, count=count)


def process_data(source: TableSource, column: str) -> DataSummary:
    """Load `source`, coerce `column` to floats and summarize it.

    Raises:
        IoError: the CSV file cannot be opened or parsed.
        SchemaError: the column is missing or holds non-numeric values.
        InsufficientDataError: fewer than two values remain.
    """
    table = resolve_table(source)
    values = coerce_column(table, column)
    summary = summarize_values(values, column=column)

    print(f"[stats] Mean of '{column}': {summary.mean}")
    print(f"[stats] Variance of '{column}': {summary.variance}")
    return summary

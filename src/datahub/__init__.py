from .helpers import available_columns, coerce_column
from .loader import TableSource, load_table, resolve_table

__all__ = [
    "TableSource",
    "available_columns",
    "coerce_column",
    "load_table",
    "resolve_table",
]

"""
rframe - Build a fixed data frame for hand-off to a statistical host
"""

__version__ = "0.1.0"

from .builder import TableBuilder, create_df, createDF
from .table import Column, ColumnType, RowIndexDescriptor, Table, TableKind, NA_INTEGER
from .converters import to_arrow_table, from_arrow_table, to_pandas
from .config import RFrameConfig, DEFAULT_CONFIG, get_config, set_config
from .rng import RandomSource, get_random_source, set_random_source
from .exceptions import (
    TableConstructionError,
    ColumnLengthError,
    DuplicateColumnError,
    ColumnTypeError,
    RandomSourceError,
)
from .utils import setup_logging

__all__ = [
    # Construction
    "TableBuilder",
    "create_df",
    "createDF",

    # Table model
    "Table",
    "Column",
    "ColumnType",
    "TableKind",
    "RowIndexDescriptor",
    "NA_INTEGER",

    # Host conversion
    "to_arrow_table",
    "from_arrow_table",
    "to_pandas",

    # Configuration
    "RFrameConfig",
    "DEFAULT_CONFIG",
    "get_config",
    "set_config",

    # Random source
    "RandomSource",
    "get_random_source",
    "set_random_source",

    # Errors
    "TableConstructionError",
    "ColumnLengthError",
    "DuplicateColumnError",
    "ColumnTypeError",
    "RandomSourceError",

    # Utilities
    "setup_logging",
]

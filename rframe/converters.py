"""
Conversion between rframe tables and host representations (pyarrow, pandas).

The kind tag and row-index descriptor travel with the data: as JSON under the
``rframe`` schema metadata key for Arrow, and in ``DataFrame.attrs`` for pandas.
"""
import json
import logging
from typing import Any, Dict, Optional

import pandas as pd
import pyarrow as pa

from .table import Column, ColumnType, RowIndexDescriptor, Table, TableKind
from .exceptions import TableConstructionError

logger = logging.getLogger(__name__)

# Schema metadata key holding the table attributes
METADATA_KEY = b"rframe"

_ARROW_TYPES = {
    ColumnType.NUMERIC: pa.float64(),
    ColumnType.CHARACTER: pa.string(),
}


def table_attributes(table: Table) -> Dict[str, Any]:
    """
    Host-facing attributes of a table.

    Args:
        table: rframe Table

    Returns:
        {"class": <kind tag>, "row.names": [first, second]} with NA as None
    """
    return {
        "class": table.kind.value,
        "row.names": table.row_index.to_host(),
    }


def to_arrow_table(table: Table) -> pa.Table:
    """
    Convert a Table to a pyarrow Table.

    Args:
        table: rframe Table

    Returns:
        Arrow table with columns in order and attributes in schema metadata
    """
    fields = []
    arrays = []
    for column in table.columns:
        arrow_type = _ARROW_TYPES[column.type]
        fields.append(pa.field(column.name, arrow_type, nullable=False))
        arrays.append(pa.array(column.to_list(), type=arrow_type))

    metadata = {METADATA_KEY: json.dumps(table_attributes(table)).encode("utf-8")}
    schema = pa.schema(fields, metadata=metadata)
    return pa.Table.from_arrays(arrays, schema=schema)


def _read_attributes(schema: pa.Schema) -> Optional[Dict[str, Any]]:
    if not schema.metadata or METADATA_KEY not in schema.metadata:
        return None
    try:
        attrs = json.loads(schema.metadata[METADATA_KEY].decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise TableConstructionError(f"Malformed {METADATA_KEY.decode()} schema metadata: {e}") from e
    if not isinstance(attrs, dict):
        raise TableConstructionError(f"{METADATA_KEY.decode()} schema metadata must be a JSON object")
    return attrs


def from_arrow_table(arrow_table: pa.Table) -> Table:
    """
    Convert a pyarrow Table back to a Table.

    Numeric Arrow columns become numeric columns; string columns become
    character columns. Attributes are restored from schema metadata when
    present.

    Args:
        arrow_table: Arrow table without nulls

    Returns:
        rframe Table
    """
    if not isinstance(arrow_table, pa.Table):
        raise TypeError("Must provide a PyArrow Table object")

    columns = []
    for name, chunked in zip(arrow_table.column_names, arrow_table.columns):
        arrow_type = chunked.type
        if chunked.null_count:
            raise TableConstructionError(f"Column '{name}' contains {chunked.null_count} missing values")
        if pa.types.is_floating(arrow_type) or pa.types.is_integer(arrow_type):
            try:
                values = chunked.cast(pa.float64()).to_pylist()
            except pa.ArrowInvalid as e:
                raise TableConstructionError(f"Column '{name}' cannot be stored as float64: {e}") from e
        elif pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type):
            values = chunked.to_pylist()
            if not values:
                raise TableConstructionError(f"Cannot infer the type of empty string column '{name}'")
        else:
            raise TableConstructionError(f"Unsupported Arrow type {arrow_type} for column '{name}'")
        columns.append(Column(name, values))

    attrs = _read_attributes(arrow_table.schema)
    kind = TableKind.DATA_FRAME
    row_index = None
    if attrs is not None:
        try:
            kind = TableKind(attrs.get("class", TableKind.DATA_FRAME.value))
        except (TypeError, ValueError):
            raise TableConstructionError(f"Unknown table class {attrs.get('class')!r}") from None
        if "row.names" in attrs:
            try:
                row_index = RowIndexDescriptor.from_host(attrs["row.names"])
            except TableConstructionError as e:
                raise TableConstructionError(f"Invalid row.names in {METADATA_KEY.decode()} schema metadata: {e}") from e
    else:
        logger.debug("No rframe metadata on Arrow table; using compact row index")

    return Table(columns, kind=kind, row_index=row_index)


def to_pandas(table: Table) -> pd.DataFrame:
    """
    Convert a Table to a pandas DataFrame.

    Args:
        table: rframe Table

    Returns:
        DataFrame with a default RangeIndex and attributes in ``DataFrame.attrs``
    """
    data = {}
    for column in table.columns:
        if column.type is ColumnType.NUMERIC:
            data[column.name] = pd.Series(column.values.copy(), dtype="float64")
        else:
            data[column.name] = pd.Series(column.to_list(), dtype="object")
    df = pd.DataFrame(data, index=pd.RangeIndex(table.n_rows), columns=table.column_names)
    df.attrs.update(table_attributes(table))
    return df

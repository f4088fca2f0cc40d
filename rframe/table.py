"""
Table model for rframe

A Table is an ordered set of named, equal-length, typed columns together with
two explicit metadata fields: the kind tag and the row-index descriptor.
"""
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple
import numbers

import numpy as np

from .exceptions import ColumnLengthError, ColumnTypeError, DuplicateColumnError, TableConstructionError


# Integer missing sentinel used by the statistical host (INT_MIN)
NA_INTEGER = -2 ** 31
INT32_MIN = NA_INTEGER
INT32_MAX = 2 ** 31 - 1


class TableKind(Enum):
    """Type tag telling consumers how to interpret a table"""
    DATA_FRAME = "data.frame"


class ColumnType(Enum):
    """Semantic type of a column, valued by the host's type name"""
    NUMERIC = "double"
    CHARACTER = "character"


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class RowIndexDescriptor:
    """
    Compact row-identity descriptor: an ordered pair of integers.

    Treated as an opaque compatibility field. Row counts are always taken from
    the columns, never decoded from the descriptor.
    """
    __slots__ = ("_first", "_second")

    def __init__(self, first: int, second: int):
        if not _is_int(first) or not _is_int(second):
            raise TableConstructionError(
                f"Row-index descriptor must be two integers, got ({first!r}, {second!r})"
            )
        for value in (first, second):
            if not INT32_MIN <= value <= INT32_MAX:
                raise TableConstructionError(f"Row-index descriptor entry {value} is outside the 32-bit integer range")
        self._first = int(first)
        self._second = int(second)

    @classmethod
    def compact(cls, n_rows: int) -> "RowIndexDescriptor":
        """Descriptor for a table of n_rows rows without explicit row labels"""
        return cls(NA_INTEGER, -n_rows)

    @property
    def first(self) -> int:
        return self._first

    @property
    def second(self) -> int:
        return self._second

    @property
    def first_is_missing(self) -> bool:
        return self._first == NA_INTEGER

    def as_tuple(self) -> Tuple[int, int]:
        return (self._first, self._second)

    def to_host(self) -> List[Optional[int]]:
        """Pair with the missing sentinel replaced by None"""
        return [None if v == NA_INTEGER else v for v in self.as_tuple()]

    @classmethod
    def from_host(cls, values: Sequence[Optional[int]]) -> "RowIndexDescriptor":
        """Inverse of to_host()"""
        if isinstance(values, (str, bytes)):
            raise TableConstructionError(f"Row-index descriptor must be a pair of integers, got {values!r}")
        try:
            values = list(values)
        except TypeError:
            raise TableConstructionError(f"Row-index descriptor must be a pair of integers, got {values!r}") from None
        if len(values) != 2:
            raise TableConstructionError(f"Row-index descriptor must have 2 entries, got {len(values)}")
        return cls(*(NA_INTEGER if v is None else v for v in values))

    def __iter__(self):
        return iter(self.as_tuple())

    def __len__(self):
        return 2

    def __getitem__(self, index):
        return self.as_tuple()[index]

    def __eq__(self, other):
        if isinstance(other, RowIndexDescriptor):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, tuple):
            return self.as_tuple() == other
        return NotImplemented

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        first = "NA" if self.first_is_missing else str(self._first)
        return f"RowIndexDescriptor({first}, {self._second})"


class Column:
    """
    A named, read-only sequence of values sharing one semantic type.
    """

    def __init__(self, name: str, values: Iterable[Any]):
        """
        Initialize a column.

        Args:
            name: Column name
            values: Numbers (stored as float64) or strings

        Raises:
            ColumnTypeError: If values mix types or hold unsupported types
        """
        if not isinstance(name, str) or not name:
            raise TableConstructionError(f"Column name must be a non-empty string, got {name!r}")
        self._name = name

        values = list(values)
        self._type = self._infer_type(name, values)
        if self._type is ColumnType.NUMERIC:
            data = np.array(values, dtype=np.float64)
        else:
            data = np.array(values, dtype=object)
        data.flags.writeable = False
        self._values = data

    @staticmethod
    def _infer_type(name: str, values: List[Any]) -> ColumnType:
        if values and all(isinstance(v, str) for v in values):
            return ColumnType.CHARACTER
        if all(isinstance(v, numbers.Real) and not isinstance(v, (bool, np.bool_)) for v in values):
            return ColumnType.NUMERIC
        kinds = sorted({type(v).__name__ for v in values})
        raise ColumnTypeError(f"Column '{name}' must hold only numbers or only strings, got {kinds}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> ColumnType:
        return self._type

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the column data"""
        return self._values

    def to_list(self) -> list:
        return self._values.tolist()

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values.tolist())

    def __eq__(self, other):
        if not isinstance(other, Column):
            return NotImplemented
        return (self.name == other.name and self.type is other.type
                and len(self) == len(other) and self.to_list() == other.to_list())

    __hash__ = None

    def __repr__(self):
        return f"Column({self.name!r}, {self.type.value}, {self.to_list()!r})"


class Table:
    """
    Ordered collection of equal-length columns with explicit metadata.

    Tables are immutable once constructed.
    """

    def __init__(self, columns: Sequence[Column], kind: TableKind = TableKind.DATA_FRAME,
                 row_index: Optional[RowIndexDescriptor] = None):
        """
        Initialize a table.

        Args:
            columns: Columns in display order
            kind: Type tag
            row_index: Row-index descriptor (compact descriptor for the row count if None)

        Raises:
            DuplicateColumnError: If two columns share a name
            ColumnLengthError: If columns differ in length
        """
        ordered: Dict[str, Column] = {}
        for column in columns:
            if not isinstance(column, Column):
                raise TableConstructionError(f"Expected Column, got {type(column).__name__}")
            if column.name in ordered:
                raise DuplicateColumnError(f"Duplicate column name '{column.name}'")
            ordered[column.name] = column

        lengths = {name: len(col) for name, col in ordered.items()}
        if len(set(lengths.values())) > 1:
            raise ColumnLengthError(f"Columns must all have the same length, got {lengths}")

        if not isinstance(kind, TableKind):
            raise TableConstructionError(f"kind must be a TableKind, got {kind!r}")

        self._columns = ordered
        self._n_rows = next(iter(lengths.values()), 0)
        self._kind = kind
        if row_index is None:
            row_index = RowIndexDescriptor.compact(self._n_rows)
        elif not isinstance(row_index, RowIndexDescriptor):
            row_index = RowIndexDescriptor(*row_index)
        self._row_index = row_index

    @property
    def kind(self) -> TableKind:
        return self._kind

    @property
    def row_index(self) -> RowIndexDescriptor:
        return self._row_index

    @property
    def column_names(self) -> List[str]:
        return list(self._columns)

    @property
    def columns(self) -> List[Column]:
        return list(self._columns.values())

    @property
    def n_rows(self) -> int:
        return self._n_rows

    @property
    def n_cols(self) -> int:
        return len(self._columns)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._n_rows, len(self._columns))

    def column(self, name: str) -> Column:
        try:
            return self._columns[name]
        except KeyError:
            raise KeyError(f"No column named '{name}'") from None

    def __getitem__(self, name: str) -> Column:
        return self.column(name)

    def __contains__(self, name) -> bool:
        return name in self._columns

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def to_dict(self) -> Dict[str, list]:
        """Column name to plain Python values, in column order"""
        return {name: col.to_list() for name, col in self._columns.items()}

    def to_arrow(self):
        from .converters import to_arrow_table
        return to_arrow_table(self)

    def to_pandas(self):
        from .converters import to_pandas
        return to_pandas(self)

    def __eq__(self, other):
        if not isinstance(other, Table):
            return NotImplemented
        return (self._kind is other._kind and self._row_index == other._row_index
                and self.columns == other.columns)

    __hash__ = None

    def __repr__(self):
        cols = ", ".join(f"{c.name}: {c.type.value}" for c in self._columns.values())
        return f"Table({self._kind.value}, {self._n_rows} rows, [{cols}], row_index={self._row_index!r})"

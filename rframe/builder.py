"""
Table builder for rframe

Assembles the fixed demonstration data frame handed to a statistical host:
a numeric column, a character column and a column of standard-normal draws.
"""
import logging
from typing import Any, Dict, Iterable, Optional

from .rng import RandomSource, get_random_source
from .table import Column, RowIndexDescriptor, Table, TableKind, NA_INTEGER
from .exceptions import DuplicateColumnError, TableConstructionError

logger = logging.getLogger(__name__)

# Fixed column contents
NUMERIC_VALUES = (1.0, 2.0, 4.0)
CHARACTER_VALUES = ("alpha", "beta", "gamma")
NORMAL_MEAN = 0.0
NORMAL_SD = 1.0
N_ROWS = 3

# Row-index descriptor attached to every built table
ROW_INDEX = (NA_INTEGER, -N_ROWS)


class TableBuilder:
    """
    Single-use assembler producing one Table
    """

    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        Initialize the builder

        Args:
            random_source: Source for sampled columns (process default if None)
        """
        self._random_source = random_source
        self._columns: Dict[str, Column] = {}
        self._finished = False

    @property
    def random_source(self) -> RandomSource:
        if self._random_source is None:
            self._random_source = get_random_source()
        return self._random_source

    def _check_open(self):
        if self._finished:
            raise TableConstructionError("Builder already produced its table")

    def add_column(self, name: str, values: Iterable[Any]) -> "TableBuilder":
        """
        Append a column

        Args:
            name: Column name, unique within the table
            values: Numbers or strings

        Returns:
            The builder, for chaining
        """
        self._check_open()
        if name in self._columns:
            raise DuplicateColumnError(f"Duplicate column name '{name}'")
        self._columns[name] = Column(name, values)
        logger.debug(f"Added column '{name}' ({self._columns[name].type.value}, {len(self._columns[name])} values)")
        return self

    def add_normal_column(self, name: str, size: int, mean: float = NORMAL_MEAN,
                          sd: float = NORMAL_SD) -> "TableBuilder":
        """
        Append a column of independent normal draws

        Args:
            name: Column name
            size: Number of draws
            mean: Distribution mean
            sd: Distribution standard deviation

        Returns:
            The builder, for chaining
        """
        self._check_open()
        samples = self.random_source.normal(size, mean, sd)
        return self.add_column(name, samples)

    def finish(self, kind: TableKind = TableKind.DATA_FRAME,
               row_index: Optional[RowIndexDescriptor] = None) -> Table:
        """
        Freeze the collected columns into a Table

        Args:
            kind: Type tag
            row_index: Row-index descriptor (compact descriptor for the row count if None)

        Returns:
            The assembled Table
        """
        self._check_open()
        table = Table(list(self._columns.values()), kind=kind, row_index=row_index)
        self._finished = True
        logger.debug(f"Built {table!r}")
        return table

    def build(self) -> Table:
        """
        Assemble the fixed data frame

        Columns a and b hold literals; column c holds fresh standard-normal draws.

        Returns:
            Table tagged as a data frame with row index (NA, -3)
        """
        self._check_open()
        if self._columns:
            raise TableConstructionError(
                f"build() needs a fresh builder, columns already added: {list(self._columns)}"
            )
        return (
            self.add_column("a", NUMERIC_VALUES)
            .add_column("b", CHARACTER_VALUES)
            .add_normal_column("c", N_ROWS, NORMAL_MEAN, NORMAL_SD)
            .finish(TableKind.DATA_FRAME, RowIndexDescriptor(*ROW_INDEX))
        )


def create_df(random_source: Optional[RandomSource] = None) -> Table:
    """
    Build the fixed data frame.

    Args:
        random_source: Source for column c (process default if None)

    Returns:
        A fresh Table on every call
    """
    return TableBuilder(random_source).build()


# Name the function is exported under to the host
createDF = create_df

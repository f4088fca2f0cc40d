"""
Exceptions raised while constructing rframe tables.
"""


class TableConstructionError(Exception):
    """Base class for failures while assembling a table."""
    pass


class ColumnLengthError(TableConstructionError, ValueError):
    """Columns of one table do not share a length."""
    pass


class DuplicateColumnError(TableConstructionError, ValueError):
    """Two columns were given the same name."""
    pass


class ColumnTypeError(TableConstructionError, TypeError):
    """A column holds values of more than one semantic type, or an unsupported one."""
    pass


class RandomSourceError(TableConstructionError, RuntimeError):
    """The random number source could not produce usable samples."""
    pass

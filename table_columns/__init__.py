from .builder import Edit, T, column, editable_column
from .data_model import ColumnDefinition, TableModel
from .dates import format_date, parse_date
from .engine import DecoratorKind, StrategyKind, handle
from .errors import ColumnError, InvalidArgument
from .filters import truncate

__all__ = [
    "ColumnDefinition",
    "ColumnError",
    "DecoratorKind",
    "Edit",
    "InvalidArgument",
    "StrategyKind",
    "T",
    "TableModel",
    "column",
    "editable_column",
    "format_date",
    "handle",
    "parse_date",
    "truncate",
]

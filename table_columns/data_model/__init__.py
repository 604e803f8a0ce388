from .base import ColumnDefinition, TableModel

__all__ = [
    "ColumnDefinition",
    "TableModel",
]

from __future__ import annotations


class ColumnError(Exception):
    """Base class for column builder failures."""


class InvalidArgument(ColumnError, ValueError):
    """An extra property value cannot be applied to the cell being rendered."""

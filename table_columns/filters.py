"""Display helpers shared by cell hooks."""
from __future__ import annotations

import numbers
from typing import Any

import pandas as pd

from .constants import TRUNCATE_LENGTH, TRUNCATE_SUFFIX


def is_blank(value: Any) -> bool:
    """True for values a cell treats as empty: None, "", False, 0, NaN/NaT."""
    if isinstance(value, (str, bool)) or value is None:
        return not value
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return True
    try:
        return not value
    except ValueError:
        # arrays and frames have no single truth value
        return False


def _is_zero(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool) and value == 0


def truncate(value: Any, length: int = TRUNCATE_LENGTH, suffix: str = TRUNCATE_SUFFIX) -> str:
    """Cut ``value`` to ``length`` characters and append ``suffix``.

    Numeric zero is kept and shown as text; other empty values give ``""``.
    Non-string input is converted with ``str`` and truncated with the default
    suffix.
    """
    if is_blank(value) and not _is_zero(value):
        return ""
    if not isinstance(value, str):
        return truncate(str(value), length)
    length = max(0, int(length))
    if len(value) <= length:
        return value
    return value[:length] + suffix

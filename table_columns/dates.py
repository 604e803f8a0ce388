"""Date parsing and moment-style pattern formatting for date columns.

Patterns use the tokens table frontends already know (``YYYY-MM-DD``,
``HH:mm:ss``, ``Do MMM YYYY``...). Text inside square brackets is copied
through as-is, so ``[Week of] MMM D`` keeps its label.
"""
from __future__ import annotations

import datetime
import numbers
import re
from typing import Any, Callable, Dict

import numpy as np
import pandas as pd

from .constants import DEFAULT_DATE_PATTERN, ERROR_PREFIX
from .errors import InvalidArgument

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
# Sunday first, matching the numeric ``d`` token.
WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

# Words pandas resolves against the clock; a cell holding them is not a date.
RELATIVE_DATE_WORDS = frozenset({"now", "today", "yesterday", "tomorrow"})

TOKEN_PATTERN = re.compile(
    r"\[[^\]]*\]|YYYY|YY|Q|MMMM|MMM|MM|M|Do|DD|D|dddd|ddd|d|HH|H|hh|h|kk|k|mm|m|ss|s|SSS|A|a|X|x|ZZ|Z"
)


def _invalid_date(value: Any) -> InvalidArgument:
    return InvalidArgument(f"{ERROR_PREFIX} Invalid date: {value!r}")


def parse_date(value: Any) -> pd.Timestamp:
    """Coerce a cell value to a ``Timestamp``.

    Numbers are epoch milliseconds. ``None``, blank strings, booleans,
    relative words such as ``"now"`` and anything pandas cannot read raise
    ``InvalidArgument``.
    """
    if value is None or pd.api.types.is_bool(value):
        raise _invalid_date(value)
    try:
        if isinstance(value, numbers.Real):
            parsed = pd.to_datetime(value, unit="ms")
        elif isinstance(value, (datetime.date, np.datetime64)):
            parsed = pd.Timestamp(value)
        elif isinstance(value, str):
            if not value.strip() or value.strip().lower() in RELATIVE_DATE_WORDS:
                raise _invalid_date(value)
            parsed = pd.to_datetime(value.strip())
        else:
            raise _invalid_date(value)
    except (ValueError, TypeError, OverflowError) as exc:
        if isinstance(exc, InvalidArgument):
            raise
        raise _invalid_date(value) from exc
    if pd.isna(parsed):
        raise _invalid_date(value)
    return parsed


def _ordinal(day: int) -> str:
    if 10 <= day % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def _offset(ts: pd.Timestamp, sep: str) -> str:
    delta = ts.utcoffset() or datetime.timedelta(0)
    minutes = int(delta.total_seconds() // 60)
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{sep}{minutes:02d}"


def _moment_weekday(ts: pd.Timestamp) -> int:
    return (ts.weekday() + 1) % 7


TOKENS: Dict[str, Callable[[pd.Timestamp], str]] = {
    "YYYY": lambda ts: f"{ts.year:04d}",
    "YY": lambda ts: f"{ts.year % 100:02d}",
    "Q": lambda ts: str(ts.quarter),
    "MMMM": lambda ts: MONTH_NAMES[ts.month - 1],
    "MMM": lambda ts: MONTH_NAMES[ts.month - 1][:3],
    "MM": lambda ts: f"{ts.month:02d}",
    "M": lambda ts: str(ts.month),
    "Do": lambda ts: _ordinal(ts.day),
    "DD": lambda ts: f"{ts.day:02d}",
    "D": lambda ts: str(ts.day),
    "dddd": lambda ts: WEEKDAY_NAMES[_moment_weekday(ts)],
    "ddd": lambda ts: WEEKDAY_NAMES[_moment_weekday(ts)][:3],
    "d": lambda ts: str(_moment_weekday(ts)),
    "HH": lambda ts: f"{ts.hour:02d}",
    "H": lambda ts: str(ts.hour),
    "hh": lambda ts: f"{ts.hour % 12 or 12:02d}",
    "h": lambda ts: str(ts.hour % 12 or 12),
    "kk": lambda ts: f"{ts.hour or 24:02d}",
    "k": lambda ts: str(ts.hour or 24),
    "mm": lambda ts: f"{ts.minute:02d}",
    "m": lambda ts: str(ts.minute),
    "ss": lambda ts: f"{ts.second:02d}",
    "s": lambda ts: str(ts.second),
    "SSS": lambda ts: f"{ts.microsecond // 1000:03d}",
    "A": lambda ts: "PM" if ts.hour >= 12 else "AM",
    "a": lambda ts: "pm" if ts.hour >= 12 else "am",
    "X": lambda ts: str(int(ts.timestamp())),
    "x": lambda ts: str(int(ts.timestamp() * 1000)),
    "ZZ": lambda ts: _offset(ts, ""),
    "Z": lambda ts: _offset(ts, ":"),
}


def format_timestamp(ts: pd.Timestamp, pattern: str | None = None) -> str:
    pattern = pattern or DEFAULT_DATE_PATTERN

    def _replace(match: re.Match) -> str:
        token = match.group(0)
        if token.startswith("["):
            return token[1:-1]
        return TOKENS[token](ts)

    return TOKEN_PATTERN.sub(_replace, str(pattern))


def format_date(value: Any, pattern: str | None = None) -> str:
    """Parse ``value`` and render it with a moment-style ``pattern``."""
    return format_timestamp(parse_date(value), pattern)

"""Extra column properties applied as an ordered decorator chain.

Each recognized key in a column mapping adds one decorator. Decorators run in
the order their keys were declared, every one of them writing after the ones
declared before it, so a later key can replace a hook an earlier key set.
Only ``default`` refuses to replace an existing ``customRender``.
"""
from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Callable, Dict, List

import pandas as pd

from ..constants import (
    DEFAULT_PROPERTY,
    ELLIPSES_PROPERTY,
    ELLIPSIS_STYLE,
    ERROR_PREFIX,
    FORMAT_PROPERTY,
    REQUIRED_HEADER_CLASS,
    REQUIRED_HEADER_PROPERTY,
)
from ..dates import format_date
from ..errors import InvalidArgument
from ..filters import is_blank, truncate

logger = logging.getLogger(__name__)


class DecoratorKind(Enum):
    DEFAULT = DEFAULT_PROPERTY
    REQUIRED_HEADER = REQUIRED_HEADER_PROPERTY
    ELLIPSES = ELLIPSES_PROPERTY
    DATE_FORMAT = FORMAT_PROPERTY


PROPERTY_DECORATORS: Dict[str, DecoratorKind] = {kind.value: kind for kind in DecoratorKind}


def resolve_decorators(column: Dict[str, Any]) -> List[DecoratorKind]:
    """Decorators for the recognized keys of ``column``, in declaration order."""
    return [PROPERTY_DECORATORS[key] for key in column if key in PROPERTY_DECORATORS]


def _apply_default(column: Dict[str, Any]) -> None:
    if column.get("customRender"):
        return
    fallback = column.get(DEFAULT_PROPERTY)

    def render(text: Any, record: Any = None, index: Any = None) -> Any:
        return fallback if is_blank(text) else text

    column["customRender"] = render


def _apply_required_header(column: Dict[str, Any]) -> None:
    required = column.get(REQUIRED_HEADER_PROPERTY)
    title = column.get("title")
    css_class = REQUIRED_HEADER_CLASS if required else ""

    def header_cell(columns: Any = None) -> Dict[str, Any]:
        return {"domProps": {"innerHTML": f'<span class="{css_class}">{title}</span>'}}

    column["customHeaderCell"] = header_cell


def ellipsis_length(value: Any) -> int:
    """Truncation length for a non-boolean ``ellipses`` value.

    Accepts numbers and numeric strings; anything else, including
    non-finite numbers, raises ``InvalidArgument``.
    """
    try:
        if isinstance(value, str) and "_" in value:
            # digit grouping is not a numeric string to the table frontend
            raise ValueError(value)
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        number = math.nan
    if not math.isfinite(number):
        logger.debug("rejecting ellipses value %r", value)
        raise InvalidArgument(
            f"{ERROR_PREFIX} ellipses value must be a boolean or legal number or numeric string, got {value!r}"
        )
    return int(number)


def _apply_ellipses(column: Dict[str, Any]) -> None:
    value = column.get(ELLIPSES_PROPERTY)
    fallback = column.get(DEFAULT_PROPERTY)
    data_index = column.get("dataIndex")

    def cell(record: Dict[str, Any], row_index: Any = None) -> Dict[str, Any]:
        rendered: Dict[str, Any] = {}
        if pd.api.types.is_bool(value):
            if value:
                rendered["style"] = dict(ELLIPSIS_STYLE)
                rendered["attrs"] = {"title": record.get(data_index)}
            return rendered
        length = ellipsis_length(value)
        cell_value = record.get(data_index)
        if is_blank(cell_value):
            cell_value = fallback
        record[data_index] = cell_value
        rendered["attrs"] = {"title": cell_value}
        rendered["domProps"] = {"innerHTML": truncate(cell_value, length)}
        return rendered

    column["customCell"] = cell


def _apply_date_format(column: Dict[str, Any]) -> None:
    pattern = column.get(FORMAT_PROPERTY)

    def render(text: Any, record: Any = None, index: Any = None) -> str:
        return format_date(text, pattern)

    column["customRender"] = render


DECORATORS: Dict[DecoratorKind, Callable[[Dict[str, Any]], None]] = {
    DecoratorKind.DEFAULT: _apply_default,
    DecoratorKind.REQUIRED_HEADER: _apply_required_header,
    DecoratorKind.ELLIPSES: _apply_ellipses,
    DecoratorKind.DATE_FORMAT: _apply_date_format,
}


def handle(column: Dict[str, Any]) -> Dict[str, Any]:
    """Apply the extra properties declared on ``column`` and strip them.

    The mapping is modified in place and returned. Unrecognized keys stay as
    plain column fields.
    """
    chain = resolve_decorators(column)
    if not chain:
        return column
    logger.debug(
        "column %r extra properties: %s",
        column.get("dataIndex"),
        ", ".join(kind.value for kind in chain),
    )
    for kind in chain:
        DECORATORS[kind](column)
    for kind in chain:
        column.pop(kind.value, None)
    return column

# engine/strategy.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict

from ..constants import ACTION_KEY, ALIGN_LEFT, INDEX_KEY

logger = logging.getLogger(__name__)


class StrategyKind(Enum):
    INDEX = "index"
    ACTION = "action"
    NULL = "null"


def resolve_strategy(data_index: Any, scope: bool | None) -> StrategyKind:
    """Pick the built-in behavior for a field key.

    Reserved keys only apply when the caller left ``scope`` unset; an explicit
    ``True``/``False`` always falls through to the null strategy.
    """
    if scope is None:
        if data_index == INDEX_KEY:
            return StrategyKind.INDEX
        if data_index == ACTION_KEY:
            return StrategyKind.ACTION
    return StrategyKind.NULL


def is_terminal(kind: StrategyKind) -> bool:
    return kind is not StrategyKind.NULL


def _row_number(text: Any, record: Any = None, index: int = 0) -> int:
    return index + 1


def apply_strategy(kind: StrategyKind, descriptor: Dict[str, Any]) -> Dict[str, Any]:
    if kind is StrategyKind.INDEX:
        descriptor["customRender"] = _row_number
    elif kind is StrategyKind.ACTION:
        descriptor["align"] = ALIGN_LEFT
        descriptor["scopedSlots"] = {"customRender": descriptor["dataIndex"]}
    else:
        if descriptor.get("scope"):
            descriptor["scopedSlots"] = {"customRender": descriptor["dataIndex"]}
        descriptor.pop("scope", None)
    logger.debug("column %r uses %s strategy", descriptor.get("dataIndex"), kind.value)
    return descriptor

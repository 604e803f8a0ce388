"""Column descriptor entry points.

``T`` builds a display column: reserved field keys (``index``, ``action``)
get their fixed behavior, every other field goes through the extra property
chain. ``Edit`` builds an editable column that is always rendered through
the field's own slot.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

from .constants import ALIGN_CENTER
from .engine.extra import handle
from .engine.strategy import apply_strategy, is_terminal, resolve_strategy


def column(
    title: str,
    col: str,
    scope: bool | None = None,
    extra: Mapping[str, Any] | None = None,
) -> Dict[str, Any]:
    descriptor: Dict[str, Any] = {
        "title": title,
        "align": ALIGN_CENTER,
        "dataIndex": col,
        "key": col,
        "scope": scope,
    }
    kind = resolve_strategy(col, scope)
    apply_strategy(kind, descriptor)
    if is_terminal(kind):
        descriptor.pop("scope", None)
        return descriptor
    descriptor.update(extra or {})
    # scope is a builder argument, never a column field
    descriptor.pop("scope", None)
    return handle(descriptor)


def editable_column(title: str, col: str, extra: Mapping[str, Any] | None = None) -> Dict[str, Any]:
    descriptor: Dict[str, Any] = {
        "title": title,
        "dataIndex": col,
        "align": ALIGN_CENTER,
        "scopedSlots": {"customRender": col},
    }
    descriptor.update(extra or {})
    return handle(descriptor)


T = column
Edit = editable_column

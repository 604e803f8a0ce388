from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..builder import column, editable_column
from ..errors import ColumnError


@dataclass
class ColumnDefinition:
    """Compact column spec; ``build()`` turns it into a descriptor."""

    title: str
    col: str
    scope: bool | None = None
    extra: Dict[str, Any] = field(default_factory=dict)
    editable: bool = False

    def build(self) -> Dict[str, Any]:
        if self.editable:
            return editable_column(self.title, self.col, self.extra)
        return column(self.title, self.col, self.scope, self.extra)


@dataclass
class TableModel:
    """Container for a table's column specs."""

    name: str
    columns_spec: List[ColumnDefinition]

    def columns(self) -> List[Dict[str, Any]]:
        descriptors: List[Dict[str, Any]] = []
        seen: set[str] = set()
        for spec in self.columns_spec:
            if spec.col in seen:
                raise ColumnError(f"Table '{self.name}' declares column '{spec.col}' more than once.")
            seen.add(spec.col)
            descriptors.append(spec.build())
        return descriptors

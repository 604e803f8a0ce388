from .extra import DecoratorKind, ellipsis_length, handle, resolve_decorators
from .strategy import StrategyKind, apply_strategy, is_terminal, resolve_strategy

__all__ = [
    "DecoratorKind",
    "StrategyKind",
    "apply_strategy",
    "ellipsis_length",
    "handle",
    "is_terminal",
    "resolve_decorators",
    "resolve_strategy",
]

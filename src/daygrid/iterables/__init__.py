"""Lazy-sequence toolkit: a clear-aware FIFO queue and single-pass combinators."""

from .combinators import (
    CursorView,
    EnumerateItem,
    build,
    concat,
    count,
    enumerate_items,
    first_and_rest,
    group,
    group_by_first_element,
    group_by_last_element,
    numeric_range,
    once,
    take_first,
    take_last,
    unwrap,
    wrap,
)
from .errors import EmptyError, LimitExceededError, SequenceError, UnderflowError
from .queue import NO_VALUE, Queue

__all__ = [
    "NO_VALUE",
    "CursorView",
    "EmptyError",
    "EnumerateItem",
    "LimitExceededError",
    "Queue",
    "SequenceError",
    "UnderflowError",
    "build",
    "concat",
    "count",
    "enumerate_items",
    "first_and_rest",
    "group",
    "group_by_first_element",
    "group_by_last_element",
    "numeric_range",
    "once",
    "take_first",
    "take_last",
    "unwrap",
    "wrap",
]

"""Singly-linked FIFO queue with clear-aware iteration.

The queue keeps a dummy head node so that ``push`` and ``shift`` are O(1)
without special-casing the empty queue. All bookkeeping lives in a small
``_State`` record; ``clear()`` swaps in a fresh record and flags the old
one as cleared. Iterators hold on to the record they were created with and
check the flag on every pull, so an iterator taken before a clear observes
exhaustion afterwards, even if new values are pushed.

The "no value" result of ``shift`` and ``peek`` on an empty queue is the
``NO_VALUE`` sentinel rather than ``None``, so that ``None`` can be stored.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# pylint: disable=too-few-public-methods


def _get_no_value() -> "_NoValueType":
    # Factory used by pickle to retrieve the one true instance.
    return NO_VALUE


@dataclass(frozen=True)
class _NoValueType:
    """Sentinel returned by ``Queue.shift``/``Queue.peek`` on an empty queue."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_no_value, ())


# Singleton instance
NO_VALUE = _NoValueType()


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T | None) -> None:
        self.value = value
        self.next: _Node[T] | None = None


class _State(Generic[T]):
    __slots__ = ("size", "cleared", "head", "tail")

    def __init__(self) -> None:
        empty: _Node[T] = _Node(None)
        self.size = 0
        self.cleared = False
        self.head = empty
        self.tail = empty


class Queue(Generic[T]):
    """A FIFO queue with O(1) ``push``, ``shift``, ``peek`` and size.

    Example:
        ```py
        >>> q = Queue([1, 2])
        >>> q.push(3)
        >>> q.shift(), list(q)
        (1, [2, 3])
        ```
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._state: _State[T] = _State()
        # Mirrors the behavior of list and set
        if values is not None:
            for value in values:
                self.push(value)

    @property
    def size(self) -> int:
        """Number of elements currently in the queue."""
        return self._state.size

    def __len__(self) -> int:
        return self._state.size

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"

    def clear(self) -> None:
        """Empty the queue and invalidate every iterator created so far."""
        self._state.cleared = True
        self._state = _State()

    def peek(self) -> T | _NoValueType:
        """Return the head element without removing it, or ``NO_VALUE``."""
        state = self._state
        if state.size == 0:
            return NO_VALUE
        assert state.head.next is not None
        return state.head.next.value  # type: ignore[return-value]

    def shift(self) -> T | _NoValueType:
        """Remove and return the head element, or ``NO_VALUE`` if empty."""
        state = self._state
        if state.size == 0:
            return NO_VALUE
        first = state.head.next
        assert first is not None
        if first.next is None:
            state.tail = state.head
        state.head.next = first.next
        state.size -= 1
        return first.value  # type: ignore[return-value]

    def push(self, value: T) -> None:
        """Append ``value`` at the tail."""
        state = self._state
        node = _Node(value)
        state.tail.next = node
        state.tail = node
        state.size += 1

    def __iter__(self) -> Iterator[T]:
        return self.values()

    def values(self) -> Iterator[T]:
        """Iterate over the elements from head to tail."""
        return (value for _, value in self._walk(self._state))

    def keys(self) -> Iterator[int]:
        """Iterate over the zero-based positions of the elements."""
        return (index for index, _ in self._walk(self._state))

    def entries(self) -> Iterator[tuple[int, T]]:
        """Iterate over ``(index, value)`` pairs from head to tail."""
        return self._walk(self._state)

    @staticmethod
    def _walk(state: _State[T]) -> Iterator[tuple[int, T]]:
        # The state is bound by the caller, so an iterator created before a
        # clear() keeps pointing at the old (now cleared) state.
        node = state.head
        index = 0
        while (node := node.next) is not None and not state.cleared:  # type: ignore[assignment]
            yield index, node.value  # type: ignore[misc]
            index += 1

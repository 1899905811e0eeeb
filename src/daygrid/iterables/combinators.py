"""Lazy, single-pass combinators over iterables.

Every function here works on any iterable, finite or infinite, and pulls
from it only as far as its own contract requires. Generators are the
cursors: nothing is computed until the consumer asks for the next element,
and a consumer that stops pulling simply leaves the source suspended.

Lookahead:
    ``group``, ``group_by_first_element`` and ``enumerate_items`` with
    ``indicate_last=True`` need to see one element *past* what they have
    handed out in order to decide where a group (or the sequence) ends.
    If the consumer stops mid-way, the shared source may therefore have
    advanced one element further than the consumer observed. The calendar
    page generator relies on this being harmless because it never reuses
    the source afterwards; other callers sharing a cursor should keep it
    in mind.

Shared cursors:
    ``wrap`` and ``first_and_rest`` return *views* over an existing iterator,
    not replays. Iterating a view twice continues from wherever the shared
    cursor currently is.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import EmptyError, LimitExceededError, UnderflowError
from .queue import Queue

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

# ============================================================================
#                           Creating iterables
# ============================================================================


def once(item: T) -> Iterator[T]:
    """Create an iterator that yields exactly ``item``."""
    yield item


def build(factory: Callable[[], Iterable[T] | None]) -> Iterator[T]:
    """Yield the elements of the iterables returned by ``factory``.

    ``factory`` is called again each time the previous iterable is exhausted,
    and the sequence ends when it returns ``None``. This lets an unbounded
    sequence be described one chunk at a time (e.g. one month at a time)
    without computing chunks nobody asks for.

    Args:
        factory: Zero-argument callable returning the next iterable, or
            ``None`` when there is nothing more to produce.
    """
    while (iterable := factory()) is not None:
        yield from iterable


def numeric_range(
    a: float, b: float | None = None, step: float = 1
) -> Iterator[float]:
    """Yield values in ``[a, b)``, or ``[0, a)`` if ``b`` is omitted.

    Values are ``step`` apart. Integer inputs are delegated to the builtin
    ``range``. Otherwise the n-th value is computed as ``a + n * step``
    instead of repeatedly adding ``step``, so floating-point error does not
    accumulate over long sequences. ``b`` may be ``math.inf`` (or
    ``-math.inf`` with a negative step) for an unbounded sequence.

    Raises:
        ValueError: If ``step`` is zero.
    """
    if b is None:
        a, b = 0, a
    if step == 0:
        raise ValueError("numeric_range() step must not be zero")

    if all(isinstance(n, int) for n in (a, b, step)):
        yield from range(a, b, step)  # type: ignore[arg-type]
        return

    n = 0
    while True:
        value = a + n * step
        if (step > 0 and value >= b) or (step < 0 and value <= b):
            return
        yield value
        n += 1


# ============================================================================
#                           Standard functions
# ============================================================================


def concat(*iterables: Iterable[T]) -> Iterator[T]:
    """Yield the iterables' elements in order.

    The next iterable is only touched once the previous one is exhausted.
    """
    for iterable in iterables:
        yield from iterable


def take_first(iterable: Iterable[T], items: int) -> Iterator[T]:
    """Yield the first ``items`` elements, never pulling past them.

    Raises:
        UnderflowError: When the source runs out before ``items`` elements.
    """
    iterator = iter(iterable)
    for produced in range(items):
        try:
            value = next(iterator)
        except StopIteration:
            raise UnderflowError(items, produced) from None
        yield value


def take_last(iterable: Iterable[T], items: int) -> Iterator[T]:
    """Drain the iterable, remembering the last ``items`` elements; then yield them.

    At most ``items`` elements are buffered at any time. With ``items == 0``
    the source is not touched at all.

    Raises:
        UnderflowError: When the source has fewer than ``items`` elements.
    """
    if items == 0:
        return

    window: Queue[T] = Queue()
    iterator = iter(iterable)
    for produced in range(items):
        try:
            window.push(next(iterator))
        except StopIteration:
            raise UnderflowError(items, produced) from None

    for value in iterator:
        window.shift()
        window.push(value)

    yield from window


def first_and_rest(iterable: Iterable[T]) -> tuple[T, CursorView[T]]:
    """Pull the first element eagerly and return it with a view of the rest.

    The view continues from the same underlying iterator, so nothing is
    skipped or produced twice.

    Raises:
        EmptyError: If the iterable is already exhausted.
    """
    iterator = iter(iterable)
    try:
        first = next(iterator)
    except StopIteration:
        raise EmptyError() from None
    return first, wrap(iterator)


def count(iterable: Iterable[object], fail_at: int | None = None) -> int:
    """Drain the iterable and return how many elements it had.

    Args:
        iterable: The iterable to count.
        fail_at: Stop counting and raise once the count reaches this limit.
            Use it when the source may be infinite.

    Raises:
        LimitExceededError: When the count reaches ``fail_at``.
    """
    total = 0
    for _ in iterable:
        total += 1
        if fail_at is not None and total >= fail_at:
            raise LimitExceededError(fail_at)
    return total


@dataclass(frozen=True)
class EnumerateItem(Generic[T]):
    """An element enriched with its position in the sequence.

    ``last`` is ``None`` unless the enumeration was asked to indicate it.
    """

    value: T
    index: int
    even: bool
    odd: bool
    first: bool
    last: bool | None = None


def enumerate_items(
    iterable: Iterable[T], indicate_last: bool = False
) -> Iterator[EnumerateItem[T]]:
    """Yield every element with its index, parity, and whether it is first.

    With ``indicate_last=True`` each item also says whether it is the last
    one. This needs one element of lookahead, so each item is only produced
    once the following element (or the end) has been pulled.
    """
    if not indicate_last:
        for index, value in enumerate(iterable):
            yield EnumerateItem(
                value, index, even=index % 2 == 0, odd=index % 2 == 1, first=index == 0
            )
        return

    iterator = iter(iterable)
    sentinel = object()
    current = next(iterator, sentinel)
    index = 0
    while current is not sentinel:
        following = next(iterator, sentinel)
        yield EnumerateItem(
            current,  # type: ignore[arg-type]
            index,
            even=index % 2 == 0,
            odd=index % 2 == 1,
            first=index == 0,
            last=following is sentinel,
        )
        current = following
        index += 1


# ============================================================================
#                           Cursor views
# ============================================================================


class CursorView(Generic[T]):
    """An iterable view over a shared, possibly partially consumed iterator.

    Every ``iter()`` on the view returns the same underlying iterator, so
    several views (or several loops over one view) all advance one position.
    This is an adapter, not a replay: nothing is buffered.

    Breaking out of a ``for`` loop over the view leaves the cursor where it
    stopped; it can be resumed by iterating the view again.
    """

    __slots__ = ("_iterator",)

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iterator = iterator

    def __iter__(self) -> Iterator[T]:
        return self._iterator

    def __repr__(self) -> str:
        return f"CursorView({self._iterator!r})"


def wrap(iterator: Iterator[T]) -> CursorView[T]:
    """Wrap an iterator (possibly partially consumed) into a re-iterable view."""
    return CursorView(iterator)


def unwrap(iterable: Iterable[T]) -> Iterator[T]:
    """Get the cursor behind an iterable."""
    return iter(iterable)


# ============================================================================
#                           Grouping
# ============================================================================


def group(iterable: Iterable[T], key: Callable[[T], K]) -> Iterator[list[T]]:
    """Split the iterable into maximal runs of adjacent elements with equal keys.

    Always consumes one element more than what has been yielded.

    Raises:
        EmptyError: If the iterable is empty.
    """
    first, rest = first_and_rest(iterable)

    current_key = key(first)
    run = [first]
    for element in rest:
        element_key = key(element)
        if element_key != current_key:
            yield run
            current_key = element_key
            run = []
        run.append(element)

    yield run


def group_by_last_element(
    iterable: Iterable[T], is_last_element: Callable[[T], bool]
) -> Iterator[list[T]]:
    """Collect elements until ``is_last_element`` holds, then yield the group.

    The matching element closes its group. A trailing group without a
    closing element is yielded when the source ends, if it is not empty.
    Does not consume more elements than those yielded.
    """
    collected: list[T] = []
    for element in iterable:
        collected.append(element)
        if is_last_element(element):
            yield collected
            collected = []
    if collected:
        yield collected


def group_by_first_element(
    iterable: Iterable[T], is_first_element: Callable[[T], bool]
) -> Iterator[list[T]]:
    """Start a new group at every element for which ``is_first_element`` holds.

    The first element always opens the first group, whether it matches or
    not. Always consumes one element more than what has been yielded, so the
    final group is only produced after the source signals exhaustion.

    Raises:
        EmptyError: If the iterable is empty.
    """
    first, rest = first_and_rest(iterable)

    collected = [first]
    for element in rest:
        if is_first_element(element):
            yield collected
            collected = []
        collected.append(element)

    yield collected

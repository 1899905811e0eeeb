"""Comparison and week/month boundary arithmetic over plain dates.

The comparison helpers work on any totally ordered value of the algebra
(``PlainDate``, ``PlainYearMonth``, ``Duration``). The week helpers take the
first day of the week as a parameter, so the same code serves Monday-first
and Sunday-first (or any other) calendars.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import reduce
from typing import Protocol, TypeVar

from .values import DayOfWeek, PlainDate, PlainDateRange, PlainYearMonth


class _Ordered(Protocol):
    def __lt__(self, other, /) -> bool: ...
    def __le__(self, other, /) -> bool: ...


O = TypeVar("O", bound=_Ordered)

# ============================================================================
#                               Comparison
# ============================================================================


def lt(a: O, b: O) -> bool:
    """``a`` is strictly before/less than ``b``."""
    return a < b


def lte(a: O, b: O) -> bool:
    """``a`` is before/less than or equal to ``b``."""
    return a <= b


def gt(a: O, b: O) -> bool:
    """``a`` is strictly after/greater than ``b``."""
    return b < a


def gte(a: O, b: O) -> bool:
    """``a`` is after/greater than or equal to ``b``."""
    return b <= a


def eq(a: O, b: O) -> bool:
    """``a`` and ``b`` denote the same value."""
    return a == b


def minimum(first: O, *rest: O) -> O:
    """The smallest argument; on ties, the leftmost one wins."""
    return reduce(lambda acc, value: value if value < acc else acc, rest, first)


def maximum(first: O, *rest: O) -> O:
    """The largest argument; on ties, the leftmost one wins."""
    return reduce(lambda acc, value: value if acc < value else acc, rest, first)


def is_between(value: O, low: O, high: O) -> bool:
    """Whether ``low <= value <= high``."""
    return low <= value <= high


def clamp(value: O, low: O, high: O) -> O:
    """Limit ``value`` to the inclusive interval ``[low, high]``."""
    if value < low:
        return low
    if high < value:
        return high
    return value


# ============================================================================
#                               Weeks
# ============================================================================


def ordinal_of_day_in_week(day: PlainDate, week_start: DayOfWeek) -> int:
    """Position of ``day`` in its week (1 for the first day, 7 for the last)."""
    return (day.day_of_week - week_start + 7) % 7 + 1


def day_count_to(a: DayOfWeek, b: DayOfWeek) -> int:
    """Days to go forward from weekday ``a`` to reach weekday ``b`` (0-6)."""
    diff = b - a
    if diff < 0:
        return diff + 7
    return diff


def start_of_week(day: PlainDate, week_start: DayOfWeek) -> PlainDate:
    """The first day of the week containing ``day``."""
    return day.subtract(days=ordinal_of_day_in_week(day, week_start) - 1)


def end_of_week(day: PlainDate, week_start: DayOfWeek) -> PlainDate:
    """The last day of the week containing ``day``."""
    return start_of_week(day, week_start).add(days=6)


# ============================================================================
#                               Months
# ============================================================================


def start_of_month(day: PlainDate) -> PlainDate:
    """The first day of ``day``'s month."""
    return day.year_month.first_day


def end_of_month(day: PlainDate) -> PlainDate:
    """The last day of ``day``'s month."""
    return day.year_month.last_day


def days_in_month(month: PlainYearMonth) -> Iterator[PlainDate]:
    """Lazily yield every day of ``month`` in ascending order."""
    for day in range(1, month.days_in_month + 1):
        yield month.to_plain_date(day)


# ============================================================================
#                               Ranges
# ============================================================================


def are_overlapping(a: PlainDateRange, b: PlainDateRange) -> bool:
    """Whether two ranges overlap; ranges that merely touch do not."""
    return a.normalize().overlaps(b.normalize())

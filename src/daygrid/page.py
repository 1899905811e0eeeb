"""Month-view calendar pages.

A calendar page shows a whole month laid out in weeks. The first week is
completed with the last days of the previous month, the last week with the
first days of the next month, and further weeks are appended until the page
has at least ``min_weeks`` weeks. Pages can therefore span three or more
months; days are produced lazily, one at a time, in ascending order.

Example:
    ```py
    >>> weeks = weeks_in_calendar_page("2024-03", DayOfWeek.MONDAY)
    >>> [str(week[0]) for week in weeks]
    ['2024-02-26', '2024-03-04', '2024-03-11', '2024-03-18', '2024-03-25']
    ```
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterator
from dataclasses import dataclass

from daygrid.dates import (
    DayOfWeek,
    PlainDate,
    PlainYearMonth,
    day_count_to,
    days_in_month,
)
from daygrid.iterables import (
    build,
    concat,
    first_and_rest,
    group_by_first_element,
    once,
    take_last,
    unwrap,
    wrap,
)

logger = logging.getLogger(__name__)

type MonthLike = PlainYearMonth | PlainDate | dt.date | tuple[int, int] | str
type DayOfWeekLike = DayOfWeek | int | str
type CalendarWeek = list[PlainDate]


def _check_min_weeks(min_weeks: int) -> int:
    if isinstance(min_weeks, bool) or not isinstance(min_weeks, int):
        raise ValueError(f"min_weeks must be an integer, got {min_weeks!r}")
    if min_weeks < 0:
        raise ValueError(f"min_weeks must not be negative, got {min_weeks}")
    return min_weeks


def days_in_calendar_page(
    month: MonthLike, week_start: DayOfWeekLike, min_weeks: int = 1
) -> Iterator[PlainDate]:
    """Lazily yield the days shown on the calendar page of ``month``.

    The page starts on the ``week_start`` day on or before the 1st of the
    month and ends on the day before a ``week_start``. The whole month is
    always shown; ``min_weeks`` only ever adds weeks at the end.

    Args:
        month: The month to show (anything ``PlainYearMonth.coerce`` accepts).
        week_start: First day of the week (anything ``DayOfWeek.parse`` accepts).
        min_weeks: Minimum number of weeks on the page.

    Raises:
        InvalidYearMonthError: If ``month`` is not month-like.
        InvalidDayOfWeekError: If ``week_start`` names no day of the week.
        ValueError: If ``min_weeks`` is not a non-negative integer.
    """
    # Validate eagerly, before the first day is requested.
    return _generate_days(
        PlainYearMonth.coerce(month),
        DayOfWeek.parse(week_start),
        _check_min_weeks(min_weeks),
    )


def _generate_days(
    month: PlainYearMonth, week_start: DayOfWeek, min_weeks: int
) -> Iterator[PlainDate]:
    # lead-in: the part of the first week that falls in the previous month
    first_day, rest_of_month = first_and_rest(days_in_month(month))
    lead_in = day_count_to(week_start, first_day.day_of_week)
    logger.debug(
        "Calendar page %s (week start %s, min weeks %d): %d lead-in day(s)",
        month,
        week_start.name,
        min_weeks,
        lead_in,
    )
    if lead_in:
        # only touch the previous month when needed: 0001-01 has none
        yield from take_last(days_in_month(month.subtract(months=1)), lead_in)

    # the month itself, counting the weeks it starts
    weeks = 1
    yield first_day
    for day in rest_of_month:
        if day.day_of_week == week_start:
            weeks += 1
        yield day

    # every following day, one month at a time, as long as somebody asks
    upcoming = month

    def next_month_days() -> Iterator[PlainDate]:
        nonlocal upcoming
        upcoming = upcoming.add(months=1)
        return days_in_month(upcoming)

    future_days = unwrap(build(next_month_days))

    # finish the month's last week
    boundary: PlainDate | None = None
    for day in wrap(future_days):
        if day.day_of_week == week_start:
            boundary = day
            break
        yield day
    assert boundary is not None  # the future is unbounded

    # whole weeks until the page is tall enough
    future_weeks = group_by_first_element(
        concat(once(boundary), wrap(future_days)),
        lambda d: d.day_of_week == week_start,
    )
    for week in future_weeks:
        if weeks >= min_weeks:
            break
        weeks += 1
        yield from week

    logger.debug("Calendar page %s: %d week(s)", month, weeks)


def weeks_in_calendar_page(
    month: MonthLike, week_start: DayOfWeekLike, min_weeks: int = 1
) -> Iterator[CalendarWeek]:
    """Lazily yield the weeks of the calendar page of ``month``.

    Each week is a list of consecutive days starting on ``week_start``; the
    grouping is done on the sequence of :func:`days_in_calendar_page`.
    """
    week_start = DayOfWeek.parse(week_start)
    return group_by_first_element(
        days_in_calendar_page(month, week_start, min_weeks),
        lambda d: d.day_of_week == week_start,
    )


@dataclass(frozen=True)
class CalendarPage:
    """A fully computed calendar page."""

    month: PlainYearMonth
    week_start: DayOfWeek
    weeks: tuple[tuple[PlainDate, ...], ...]

    @property
    def days(self) -> tuple[PlainDate, ...]:
        """All days of the page in ascending order."""
        return tuple(day for week in self.weeks for day in week)

    @property
    def first_day(self) -> PlainDate:
        """The first day shown on the page."""
        return self.weeks[0][0]

    @property
    def last_day(self) -> PlainDate:
        """The last day shown on the page."""
        return self.weeks[-1][-1]

    def is_in_month(self, day: PlainDate) -> bool:
        """Whether ``day`` belongs to the page's month (not lead-in/lead-out)."""
        return day.year_month == self.month


def calendar_page(
    month: MonthLike, week_start: DayOfWeekLike, min_weeks: int = 1
) -> CalendarPage:
    """Compute the whole calendar page of ``month`` at once."""
    target = PlainYearMonth.coerce(month)
    first_day_of_week = DayOfWeek.parse(week_start)
    weeks = tuple(
        tuple(week)
        for week in weeks_in_calendar_page(target, first_day_of_week, min_weeks)
    )
    return CalendarPage(month=target, week_start=first_day_of_week, weeks=weeks)

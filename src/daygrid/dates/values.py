"""Value objects of the date algebra.

``PlainDate`` and ``PlainYearMonth`` are calendar values without a time of
day or a time zone. They are immutable, ordered, and delegate the calendar
rules (leap years, month lengths, weekday computation) to the proleptic
Gregorian calendar of :mod:`datetime`.

Arithmetic never produces an invalid date:

* days and weeks roll over into the next month/year;
* months and years keep the day-of-month where possible and otherwise
  constrain it to the last day of the target month
  (``2024-01-31 + 1 month == 2024-02-29``).
"""

from __future__ import annotations

import calendar
import datetime as dt
import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from zoneinfo import ZoneInfo

from .errors import InvalidDateError, InvalidDayOfWeekError, InvalidYearMonthError

_YEAR_MONTH_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


class DayOfWeek(IntEnum):
    """Days of the week, numbered as in ISO 8601 (Monday is 1)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def parse(cls, value: DayOfWeek | int | str) -> DayOfWeek:
        """Read a day of the week from a member, an ISO number or a name.

        Names are case-insensitive and may be abbreviated to three letters.

        Raises:
            InvalidDayOfWeekError: If ``value`` names no day of the week.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidDayOfWeekError(value) from e
        if isinstance(value, str):
            text = value.strip().lower()
            if text.isdigit():
                return cls.parse(int(text))
            for member in cls:
                name = member.name.lower()
                if text in (name, name[:3]):
                    return member
        raise InvalidDayOfWeekError(value)

    @property
    def predecessor(self) -> DayOfWeek:
        """The day before this one, cyclically (Monday's is Sunday)."""
        return DayOfWeek((self - 2) % 7 + 1)

    @property
    def successor(self) -> DayOfWeek:
        """The day after this one, cyclically (Sunday's is Monday)."""
        return DayOfWeek(self % 7 + 1)


def _shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def _month_length(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


@dataclass(frozen=True, order=True)
class PlainDate:
    """A calendar date (year, month, day) with no time of day and no time zone.

    Instances compare chronologically and are hashable.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        try:
            dt.date(self.year, self.month, self.day)
        except (TypeError, ValueError) as e:
            raise InvalidDateError((self.year, self.month, self.day)) from e

    def __str__(self) -> str:
        return self.isoformat()

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    @classmethod
    def from_date(cls, value: dt.date) -> PlainDate:
        """Build from a :class:`datetime.date` (the time part of a datetime is dropped)."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_datetime(
        cls, value: dt.datetime, tz: dt.tzinfo | str | None = None
    ) -> PlainDate:
        """Return the calendar date of ``value`` as seen in time zone ``tz``.

        Args:
            value: The instant to convert. Naive datetimes are interpreted by
                :meth:`datetime.datetime.astimezone` as local time.
            tz: Target time zone, as a ``tzinfo`` or an IANA key such as
                ``"Europe/Prague"``. ``None`` keeps ``value``'s own wall date.
        """
        if tz is not None:
            zone = ZoneInfo(tz) if isinstance(tz, str) else tz
            value = value.astimezone(zone)
        return cls.from_date(value.date())

    @classmethod
    def today(cls, tz: dt.tzinfo | str | None = None) -> PlainDate:
        """Return the current date in ``tz`` (local time when ``None``)."""
        zone = ZoneInfo(tz) if isinstance(tz, str) else tz
        return cls.from_date(dt.datetime.now(zone).date())

    @classmethod
    def parse(cls, text: str) -> PlainDate:
        """Parse an ISO 8601 calendar date (``YYYY-MM-DD``).

        Raises:
            InvalidDateError: If ``text`` is not a valid ISO date.
        """
        try:
            return cls.from_date(dt.date.fromisoformat(text.strip()))
        except (AttributeError, ValueError) as e:
            raise InvalidDateError(text) from e

    def to_date(self) -> dt.date:
        """Return the equivalent :class:`datetime.date`."""
        return dt.date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        """Return the date as ``YYYY-MM-DD``."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    # ------------------------------------------------------------------
    # Derived fields
    # ------------------------------------------------------------------

    @property
    def day_of_week(self) -> DayOfWeek:
        """The day of the week this date falls on."""
        return DayOfWeek(self.to_date().isoweekday())

    @property
    def year_month(self) -> PlainYearMonth:
        """The month this date belongs to."""
        return PlainYearMonth(self.year, self.month)

    @property
    def days_in_month(self) -> int:
        """Length of this date's month."""
        return _month_length(self.year, self.month)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(
        self, *, years: int = 0, months: int = 0, weeks: int = 0, days: int = 0
    ) -> PlainDate:
        """Return a new date moved forward by the given amounts.

        Years and months are applied first (constraining the day to the
        target month's length), then weeks and days.
        """
        year, month = _shift_month(self.year, self.month, years * 12 + months)
        try:
            shifted = dt.date(year, month, min(self.day, _month_length(year, month)))
            return PlainDate.from_date(shifted + dt.timedelta(weeks=weeks, days=days))
        except (OverflowError, ValueError) as e:
            moved = f"{self} + {years}y {months}m {weeks}w {days}d"
            raise InvalidDateError(moved) from e

    def subtract(
        self, *, years: int = 0, months: int = 0, weeks: int = 0, days: int = 0
    ) -> PlainDate:
        """Return a new date moved backward by the given amounts."""
        return self.add(years=-years, months=-months, weeks=-weeks, days=-days)

    def days_until(self, other: PlainDate) -> int:
        """Number of days from this date to ``other`` (negative if earlier)."""
        return (other.to_date() - self.to_date()).days


@dataclass(frozen=True, order=True)
class PlainYearMonth:
    """A month of a specific year, independent of any day."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.year, int)
            or not isinstance(self.month, int)
            or not 1 <= self.year <= dt.MAXYEAR
            or not 1 <= self.month <= 12
        ):
            raise InvalidYearMonthError((self.year, self.month))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @classmethod
    def parse(cls, text: str) -> PlainYearMonth:
        """Parse ``YYYY-MM``.

        Raises:
            InvalidYearMonthError: If ``text`` is not of that form.
        """
        if not isinstance(text, str) or not (match := _YEAR_MONTH_RE.match(text)):
            raise InvalidYearMonthError(text)
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def coerce(
        cls,
        value: PlainYearMonth | PlainDate | dt.date | tuple[int, int] | str,
        tz: dt.tzinfo | str | None = None,
    ) -> PlainYearMonth:
        """Read a month from any month-like value.

        Accepts a ``PlainYearMonth``, a ``PlainDate``, a ``datetime.date``, a
        ``datetime.datetime`` (converted to ``tz`` first, if given), a
        ``(year, month)`` tuple or a ``"YYYY-MM"`` string.

        Raises:
            InvalidYearMonthError: If ``value`` cannot be read as a month.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, PlainDate):
            return value.year_month
        if isinstance(value, dt.datetime):
            return PlainDate.from_datetime(value, tz).year_month
        if isinstance(value, dt.date):
            return cls(value.year, value.month)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(*value)
        if isinstance(value, str):
            return cls.parse(value)
        raise InvalidYearMonthError(value)

    @property
    def days_in_month(self) -> int:
        """Number of days in this month."""
        return _month_length(self.year, self.month)

    @property
    def first_day(self) -> PlainDate:
        """The first day of this month."""
        return PlainDate(self.year, self.month, 1)

    @property
    def last_day(self) -> PlainDate:
        """The last day of this month."""
        return PlainDate(self.year, self.month, self.days_in_month)

    def to_plain_date(self, day: int) -> PlainDate:
        """Return the given day of this month."""
        return PlainDate(self.year, self.month, day)

    def add(self, *, years: int = 0, months: int = 0) -> PlainYearMonth:
        """Return the month ``years`` years and ``months`` months later."""
        year, month = _shift_month(self.year, self.month, years * 12 + months)
        return PlainYearMonth(year, month)

    def subtract(self, *, years: int = 0, months: int = 0) -> PlainYearMonth:
        """Return the month ``years`` years and ``months`` months earlier."""
        return self.add(years=-years, months=-months)


@dataclass(frozen=True)
class PlainDateRange:
    """An inclusive pair of dates.

    A range built by a caller may have ``start > end``; :meth:`normalize`
    returns the ordered version. Ranges are never changed in place.
    """

    start: PlainDate
    end: PlainDate

    def normalize(self) -> PlainDateRange:
        """Return the range with ``start <= end``, swapping the ends if needed."""
        if self.start > self.end:
            return PlainDateRange(self.end, self.start)
        return self

    def contains(self, day: PlainDate) -> bool:
        """Whether ``day`` lies within the range, both ends included."""
        normalized = self.normalize()
        return normalized.start <= day <= normalized.end

    def __contains__(self, day: object) -> bool:
        return isinstance(day, PlainDate) and self.contains(day)

    def overlaps(self, other: PlainDateRange) -> bool:
        """Whether the two ranges share more than a touching end point.

        Both ranges are expected to be normalized.
        """
        return max(self.start, other.start) < min(self.end, other.end)

    def days(self) -> Iterator[PlainDate]:
        """Lazily yield every day from ``start`` to ``end`` inclusive.

        Yields nothing for a range that is not normalized.
        """
        if self.start > self.end:
            return
        day = self.start
        while True:
            yield day
            if day == self.end:
                return
            day = day.add(days=1)

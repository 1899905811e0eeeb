"""Exact durations and their arithmetic.

A ``Duration`` is a fixed amount of elapsed time (days and smaller units),
backed by :class:`datetime.timedelta`. Calendar units of variable length
(months, years) are deliberately not representable here; use
``PlainDate.add(months=...)`` for those.

Scaling and division round to a whole number of a chosen ``TimeUnit``,
half away from zero.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from .values import PlainDate


class TimeUnit(Enum):
    """Units a duration can be expressed in or rounded to."""

    WEEKS = dt.timedelta(weeks=1)
    DAYS = dt.timedelta(days=1)
    HOURS = dt.timedelta(hours=1)
    MINUTES = dt.timedelta(minutes=1)
    SECONDS = dt.timedelta(seconds=1)
    MILLISECONDS = dt.timedelta(milliseconds=1)
    MICROSECONDS = dt.timedelta(microseconds=1)


def _round_half_expand(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True, order=True)
class Duration:
    """A signed, exact span of time. Ordered by length."""

    delta: dt.timedelta = dt.timedelta()

    @classmethod
    def of(  # pylint: disable=too-many-arguments
        cls,
        *,
        weeks: float = 0,
        days: float = 0,
        hours: float = 0,
        minutes: float = 0,
        seconds: float = 0,
        milliseconds: float = 0,
        microseconds: float = 0,
    ) -> Duration:
        """Build a duration from unit amounts, like ``timedelta``."""
        return cls(
            dt.timedelta(
                weeks=weeks,
                days=days,
                hours=hours,
                minutes=minutes,
                seconds=seconds,
                milliseconds=milliseconds,
                microseconds=microseconds,
            )
        )

    @classmethod
    def from_units(cls, amount: int, unit: TimeUnit) -> Duration:
        """Build a duration of ``amount`` whole ``unit``s."""
        return cls(unit.value * amount)

    @classmethod
    def between(cls, start: PlainDate, end: PlainDate) -> Duration:
        """The whole-day duration from ``start`` to ``end`` (negative if ``end`` is earlier)."""
        return cls(dt.timedelta(days=start.days_until(end)))

    def total(self, unit: TimeUnit) -> float:
        """Length of the duration expressed in ``unit`` (may be fractional)."""
        return self.delta / unit.value

    def __neg__(self) -> Duration:
        return Duration(-self.delta)

    def __abs__(self) -> Duration:
        return Duration(abs(self.delta))

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.delta + other.delta)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.delta - other.delta)

    def __bool__(self) -> bool:
        return bool(self.delta)

    def __str__(self) -> str:
        return str(self.delta)


def scale(factor: float, duration: Duration, unit: TimeUnit) -> Duration:
    """Multiply ``duration`` by ``factor`` and round to a whole ``unit``.

    Example:
        ```py
        >>> scale(1.5, Duration.of(hours=1), TimeUnit.MINUTES)
        Duration(delta=datetime.timedelta(seconds=5400))
        ```
    """
    return Duration.from_units(
        _round_half_expand(duration.total(unit) * factor), unit
    )


@overload
def div(dividend: Duration, divisor: Duration, unit: TimeUnit = ...) -> float: ...
@overload
def div(dividend: Duration, divisor: float, unit: TimeUnit = ...) -> Duration: ...
def div(
    dividend: Duration, divisor: Duration | float, unit: TimeUnit = TimeUnit.MICROSECONDS
) -> float | Duration:
    """Divide a duration by another duration or by a number.

    Args:
        dividend: The duration to divide.
        divisor: A ``Duration`` (giving a dimensionless ratio) or a number
            (giving a ``Duration``).
        unit: Both operands are measured in this unit for a ratio; for a
            numeric divisor, the result is rounded to a whole ``unit``.

    Raises:
        ZeroDivisionError: If ``divisor`` is zero.
    """
    if isinstance(divisor, Duration):
        return dividend.total(unit) / divisor.total(unit)
    return scale(1 / divisor, dividend, unit)

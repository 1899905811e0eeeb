"""Date algebra: plain calendar values, durations, and week/month arithmetic."""

from .algebra import (
    are_overlapping,
    clamp,
    day_count_to,
    days_in_month,
    end_of_month,
    end_of_week,
    eq,
    gt,
    gte,
    is_between,
    lt,
    lte,
    maximum,
    minimum,
    ordinal_of_day_in_week,
    start_of_month,
    start_of_week,
)
from .duration import Duration, TimeUnit, div, scale
from .errors import (
    DateError,
    InvalidDateError,
    InvalidDayOfWeekError,
    InvalidYearMonthError,
)
from .values import DayOfWeek, PlainDate, PlainDateRange, PlainYearMonth

__all__ = [
    "DateError",
    "DayOfWeek",
    "Duration",
    "InvalidDateError",
    "InvalidDayOfWeekError",
    "InvalidYearMonthError",
    "PlainDate",
    "PlainDateRange",
    "PlainYearMonth",
    "TimeUnit",
    "are_overlapping",
    "clamp",
    "day_count_to",
    "days_in_month",
    "div",
    "end_of_month",
    "end_of_week",
    "eq",
    "gt",
    "gte",
    "is_between",
    "lt",
    "lte",
    "maximum",
    "minimum",
    "ordinal_of_day_in_week",
    "scale",
    "start_of_month",
    "start_of_week",
]

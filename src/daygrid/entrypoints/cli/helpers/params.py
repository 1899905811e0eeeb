"""Click parameter types for calendar values."""

from typing import Any

import click

from daygrid.dates import DateError, DayOfWeek, PlainYearMonth


class YearMonthParam(click.ParamType):
    """A month given as ``YYYY-MM``."""

    name = "year-month"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> PlainYearMonth:
        try:
            return PlainYearMonth.coerce(value)
        except DateError as e:
            self.fail(str(e), param, ctx)


class DayOfWeekParam(click.ParamType):
    """A day of the week given by name, abbreviation or ISO number."""

    name = "day"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> DayOfWeek:
        try:
            return DayOfWeek.parse(value)
        except DateError as e:
            self.fail(str(e), param, ctx)


YEAR_MONTH = YearMonthParam()
DAY_OF_WEEK = DayOfWeekParam()

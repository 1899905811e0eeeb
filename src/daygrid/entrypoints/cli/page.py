"""``daygrid page`` and ``daygrid weekdays`` commands.

``page`` prints the calendar page of a month, either as a table (lead-in
and lead-out days from neighbouring months are dimmed) or, with
``--json``, as one array of ISO dates per week on stdout.

Defaults for ``--week-start`` and ``--min-weeks`` come from
``DAYGRID_WEEK_START`` / ``DAYGRID_MIN_WEEKS`` (see :mod:`daygrid.config`).

Examples
    $ daygrid page 2024-03
    $ daygrid page 2024-02 --week-start sunday --min-weeks 6 --json
"""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from daygrid import config
from daygrid.dates import DateError, DayOfWeek, PlainDate, PlainYearMonth
from daygrid.page import CalendarPage, calendar_page

from .helpers import DAY_OF_WEEK, YEAR_MONTH

logger = logging.getLogger(__name__)


def _weekday_headers(week_start: DayOfWeek) -> list[str]:
    day = week_start
    headers = []
    for _ in range(7):
        headers.append(day.name[:3].title())
        day = day.successor
    return headers


def render_table(page_: CalendarPage) -> Table:
    """Lay out a calendar page as a Rich table, one row per week."""
    table = Table(title=str(page_.month), show_edge=False)
    for header in _weekday_headers(page_.week_start):
        table.add_column(header, justify="right")
    for week in page_.weeks:
        table.add_row(
            *(
                Text(str(day.day), style="" if page_.is_in_month(day) else "dim")
                for day in week
            )
        )
    return table


def _resolve_defaults(
    week_start: DayOfWeek | None, min_weeks: int | None
) -> tuple[DayOfWeek, int]:
    try:
        if week_start is None:
            week_start = config.get_week_start()
        if min_weeks is None:
            min_weeks = config.get_min_weeks()
    except config.InvalidSettingError as e:
        raise click.ClickException(str(e)) from e
    return week_start, min_weeks


@click.command()
@click.argument("month", type=YEAR_MONTH, required=False)
@click.option(
    "--week-start",
    "-w",
    type=DAY_OF_WEEK,
    default=None,
    help="First day of the week (name, abbreviation or ISO number). [default: $DAYGRID_WEEK_START or monday]",
)
@click.option(
    "--min-weeks",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Minimum number of weeks on the page. [default: $DAYGRID_MIN_WEEKS or 1]",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print one JSON array of ISO dates per week instead of a table.",
)
def page(
    month: PlainYearMonth | None,
    week_start: DayOfWeek | None,
    min_weeks: int | None,
    as_json: bool,
) -> None:
    """Show the calendar page of MONTH (YYYY-MM, default: the current month)."""
    week_start, min_weeks = _resolve_defaults(week_start, min_weeks)
    if month is None:
        month = PlainDate.today().year_month

    try:
        result = calendar_page(month, week_start, min_weeks)
    except DateError as e:
        # e.g. 9999-12, whose last week runs past the supported calendar
        raise click.ClickException(f"Cannot show the page of {month}: {e}") from e
    logger.info(
        "Calendar page %s: %d week(s), %s to %s",
        result.month,
        len(result.weeks),
        result.first_day,
        result.last_day,
    )

    if as_json:
        click.echo(json.dumps([[day.isoformat() for day in week] for week in result.weeks]))
    else:
        Console().print(render_table(result))


@click.command()
def weekdays() -> None:
    """List the accepted names of the days of the week."""
    for day in DayOfWeek:
        name = day.name.lower()
        click.echo(f"{day.value}  {name} ({name[:3]})")

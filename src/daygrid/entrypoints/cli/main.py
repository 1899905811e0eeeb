"""daygrid CLI entry point.

Defines the top-level ``daygrid`` command (via Click-Extra), configures
logging for the whole process, and registers the subcommands.

Currently available commands
- ``daygrid page``: show the calendar page of a month.
- ``daygrid weekdays``: list the accepted day-of-week names.

Notes
- The CLI version is sourced from `daygrid.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Log output goes to stderr; rendered pages go to stdout.

Examples
    $ daygrid --version
    $ daygrid -v page 2024-03 --week-start sunday
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from daygrid import __version__
from daygrid.logging import FlightRecorderSettings, configure_logging, log_startup

from .helpers import parse_log_level
from .page import page as page_command
from .page import weekdays as weekdays_command

logger = logging.getLogger(__name__)


HELP = """DAYGRID command-line interface.

    Shows month-view calendar pages: the whole month laid out in weeks,
    completed with days from the neighbouring months, optionally padded to
    a minimum number of weeks.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps and source locations in log output).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight recorder log file.",
    default=Path(user_log_dir("daygrid", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="DAYGRID_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="DAYGRID_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity in memory and write "
        "them to --log-path when a WARNING/ERROR occurs, or on exit with "
        "--force-flush. Console verbosity is unchanged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL), for both the "
        "console and the flight recorder. Repeatable, or a comma/space list in "
        "DAYGRID_LOGGER_LEVELS."
    ),
    default=("click_extra=WARNING",),
    envvar="DAYGRID_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def daygrid(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """DAYGRID command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    recorder = (
        FlightRecorderSettings(
            path=log_path,
            capacity=flight_recorder_capacity,
            flush_on_close=force_flush_flight_recorder,
        )
        if flight_recorder
        else None
    )

    # 1) console (and flight recorder) on the root logger, then overrides
    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,  # None or True => allow color
        flight_recorder=recorder,
        logger_levels=logger_levels,
    )

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        flight_recorder=recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


daygrid.add_command(page_command)
daygrid.add_command(weekdays_command)

"""Logging setup for the daygrid CLI.

The library only creates module-level loggers (page generation reports on
``daygrid.page`` at DEBUG level) and never installs handlers on import.
The CLI calls :func:`configure_logging` once per invocation. Records then
go to the console through Rich, at the verbosity chosen with ``-v``/``-q``.
With the flight recorder enabled they are also buffered in memory at DEBUG
granularity, and the buffer is written to a file when a WARNING arrives
(or on exit, when forced).

On the console, records of other libraries carry their top-level package
name, e.g. ``[click_extra] ...``.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from daygrid import config
from daygrid.dates import PlainDate

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "daygrid"

# Distributions whose versions are worth a line in the startup diagnostics.
REPORTED_DISTRIBUTIONS = {"click": "Click", "click-extra": "Click-Extra", "rich": "Rich"}

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records of other libraries with ``[package]`` for the console format.

    Sets ``record.prefix`` to the bracketed top-level package of the logger
    (``click_extra.colorize`` gives ``[click_extra]``), or to ``""`` for
    daygrid's own loggers. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


@dataclass(frozen=True)
class FlightRecorderSettings:
    """Where and how much the flight recorder keeps.

    Attributes:
        path: File the buffer is written to (truncated on the first write).
        capacity: Number of records kept in memory.
        flush_on_close: Also write the buffer when logging shuts down.
    """

    path: Path
    capacity: int = 2000
    flush_on_close: bool = False


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler.

    Output goes to stderr so that stdout only carries rendered pages and
    JSON. Debug mode lowers the level to DEBUG and shows timestamps, logger
    names and source locations instead of the third-party prefix.

    Args:
        level: Minimum level shown (ignored in debug mode).
        debug_mode: Use the verbose debug layout.
        color: Allow colors; ``False`` follows click-extra's ``--no-color``.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    settings: FlightRecorderSettings, flush_level: int = logging.WARNING
) -> MemoryHandler:
    """Build the flight recorder: a memory buffer in front of a file.

    The file is opened lazily, so runs without a WARNING (and without
    ``flush_on_close``) leave no file behind.
    """
    file_handler = logging.FileHandler(
        settings.path, mode="w", encoding="utf-8", delay=True
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=settings.capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=settings.flush_on_close,
    )


def configure_logging(
    *,
    level: int,
    debug_mode: bool = False,
    color: bool = True,
    flight_recorder: FlightRecorderSettings | None = None,
    logger_levels: dict[str, int] | None = None,
) -> list[Handler]:
    """Install the console handler (and flight recorder) on the root logger.

    The root logger passes everything through; each handler applies its own
    level. ``logger_levels`` then raises or lowers individual loggers, which
    affects both destinations. Replaces handlers left by an earlier call.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if flight_recorder is not None:
        handlers.append(config_flight_recorder(flight_recorder))

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, logger_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(logger_level)
    return handlers


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def _page_defaults() -> str:
    # An invalid setting is only reported here; `daygrid page` fails on it.
    try:
        week_start, min_weeks = config.get_week_start(), config.get_min_weeks()
    except config.InvalidSettingError as e:
        return f"<invalid: {e}>"
    return f"week_start={week_start.name.lower()}, min_weeks={min_weeks}"


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[Handler],
    flight_recorder: FlightRecorderSettings | None,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary at INFO and diagnostics at DEBUG.

    The diagnostics cover the interpreter, the reported library versions,
    today's date and the page defaults taken from the environment (what
    ``daygrid page`` without arguments would show), the handlers, and the
    logger overrides.
    """
    logger.info(
        "DAYGRID %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for distribution, label in REPORTED_DISTRIBUTIONS.items():
        logger.debug("%s: %s", label, _distribution_version(distribution))
    logger.debug("Today: %s", PlainDate.today())
    logger.debug("Page defaults: %s", _page_defaults())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            flight_recorder.path,
            flight_recorder.capacity,
            flight_recorder.flush_on_close,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )

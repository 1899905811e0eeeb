"""Configuration defaults for daygrid.

Defaults for calendar pages are read from the environment so that a shell
or a deployment can pick, say, Sunday-first weeks once for every command:

- ``DAYGRID_WEEK_START``: first day of the week, as a name (``sunday``), a
  three-letter abbreviation (``sun``) or an ISO number (``7``).
  Defaults to Monday.
- ``DAYGRID_MIN_WEEKS``: minimum number of weeks on a page (non-negative
  integer). Defaults to 1.
"""

import os

from daygrid.dates import DayOfWeek, InvalidDayOfWeekError

WEEK_START_ENV = "DAYGRID_WEEK_START"  # pragma: no mutate
MIN_WEEKS_ENV = "DAYGRID_MIN_WEEKS"  # pragma: no mutate

DEFAULT_WEEK_START = DayOfWeek.MONDAY
DEFAULT_MIN_WEEKS = 1


class InvalidSettingError(Exception):
    """Raised when an environment setting has a malformed value.

    Attributes:
        name (str): The environment variable.
        value (str): Its raw value.
    """

    def __init__(self, name: str, value: str, expected: str):
        super().__init__(f"{name}={value!r} is invalid; expected {expected}.")
        self.name = name
        self.value = value


def get_week_start() -> DayOfWeek:
    """Get the default first day of the week.

    Returns:
        The day named by ``DAYGRID_WEEK_START``, or Monday if it is unset or empty.

    Raises:
        InvalidSettingError: If the variable names no day of the week.
    """
    if not (raw := os.environ.get(WEEK_START_ENV, "").strip()):
        return DEFAULT_WEEK_START
    try:
        return DayOfWeek.parse(raw)
    except InvalidDayOfWeekError as e:
        raise InvalidSettingError(WEEK_START_ENV, raw, "a day of the week") from e


def get_min_weeks() -> int:
    """Get the default minimum number of weeks per page.

    Returns:
        The value of ``DAYGRID_MIN_WEEKS``, or 1 if it is unset or empty.

    Raises:
        InvalidSettingError: If the variable is not a non-negative integer.
    """
    if not (raw := os.environ.get(MIN_WEEKS_ENV, "").strip()):
        return DEFAULT_MIN_WEEKS
    if not raw.isdigit():
        raise InvalidSettingError(MIN_WEEKS_ENV, raw, "a non-negative integer")
    return int(raw)

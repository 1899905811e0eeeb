"""Exceptions for the date algebra."""


class DateError(Exception):
    """Base class for date algebra errors."""


class InvalidDateError(DateError, ValueError):
    """A value that does not name a calendar date.

    Attributes:
        value (object): The offending input (e.g. ``"2023-02-30"``).
    """

    def __init__(self, value: object):
        super().__init__(f"{value!r} is not a valid calendar date.")
        self.value = value


class InvalidYearMonthError(DateError, ValueError):
    """A value that cannot be read as a (year, month) pair.

    Attributes:
        value (object): The offending input.
    """

    def __init__(self, value: object):
        super().__init__(f"{value!r} is not a valid year-month.")
        self.value = value


class InvalidDayOfWeekError(DateError, ValueError):
    """A value that does not name a day of the week.

    Attributes:
        value (object): The offending input.
    """

    def __init__(self, value: object):
        super().__init__(
            f"{value!r} is not a day of the week (expected a name such as 'monday', "
            "an abbreviation such as 'mon', or an ISO number 1-7)."
        )
        self.value = value

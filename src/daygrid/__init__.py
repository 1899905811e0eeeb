"""DAYGRID

Lazy month-view calendar pages. Given a month, the first day of the week
and a minimum number of weeks, daygrid produces the days (or weeks) a
month calendar shows, borrowing days from the neighbouring months to fill
partial weeks. It is built on a small toolkit of single-pass iterable
combinators and an algebra of plain calendar dates.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

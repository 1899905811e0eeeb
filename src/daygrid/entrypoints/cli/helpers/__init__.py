"""CLI helpers for daygrid: option parsers and Click parameter types."""

from .log_level_parser import parse_log_level
from .params import DAY_OF_WEEK, YEAR_MONTH

__all__ = ["DAY_OF_WEEK", "YEAR_MONTH", "parse_log_level"]

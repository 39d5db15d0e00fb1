import logging

from .delta import Delta, parse_delta
from .errors import (
    InvalidDateInput,
    InvalidDeltaType,
    InvalidTimeType,
    MalformedDeltaExpression,
    TimestampError,
)
from .timestamp import add, from_date, now
from .util import DAY, HOUR, MILLISECOND, MINUTE, MONTH, SECOND, UNITS, WEEK, YEAR

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "now",
    "add",
    "from_date",
    "parse_delta",
    "Delta",
    "TimestampError",
    "InvalidTimeType",
    "InvalidDeltaType",
    "MalformedDeltaExpression",
    "InvalidDateInput",
    "UNITS",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]

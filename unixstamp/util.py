"""Utility constants for unixstamp.

Time unit constants represent durations in seconds.
Months and years are fixed approximations (30 and 365 days), not calendar-aware.
"""

from types import MappingProxyType

# Time unit constants (all values in seconds)
MILLISECOND = 0.001
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000

# Canonical order in which units may appear in a delta expression
UNIT_ORDER = ("y", "M", "w", "d", "h", "m", "s", "ms")

UNITS = MappingProxyType(
    {
        "y": YEAR,
        "M": MONTH,
        "w": WEEK,
        "d": DAY,
        "h": HOUR,
        "m": MINUTE,
        "s": SECOND,
        "ms": MILLISECOND,
    }
)

UNIT_NAMES = MappingProxyType(
    {
        "y": "years",
        "M": "months",
        "w": "weeks",
        "d": "days",
        "h": "hours",
        "m": "minutes",
        "s": "seconds",
        "ms": "milliseconds",
    }
)

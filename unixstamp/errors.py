"""Exceptions raised by unixstamp.

Each error also derives from the builtin exception callers would expect
(TypeError for wrong input types, ValueError for bad values), so existing
`except TypeError` / `except ValueError` handlers keep working.
"""

from unixstamp.util import UNIT_NAMES, UNIT_ORDER

DELTA_FORMAT = "[+|-] " + " ".join(
    f"[{{{UNIT_NAMES[suffix]}}}{suffix}]" for suffix in UNIT_ORDER
)


class TimestampError(Exception):
    """Base class for every error raised by unixstamp."""


class InvalidTimeType(TimestampError, TypeError):
    pass


class InvalidDeltaType(TimestampError, TypeError):
    pass


class MalformedDeltaExpression(TimestampError, ValueError):
    """A delta string that does not match the delta grammar."""

    def __init__(self, expression: str, position: int, reason: str):
        self.expression: str = expression
        self.position: int = position
        self.reason: str = reason
        super().__init__(
            f"Malformed delta expression {expression!r}: {reason} "
            f"(at position {position}).\n"
            f"Expected delta string format: {DELTA_FORMAT}\n"
            f"Examples:\n"
            f"  '1h'          # one hour\n"
            f"  '-2d 12h'     # two and a half days back\n"
            f"  '1y2M3w'      # units must appear in this order"
        )


class InvalidDateInput(TimestampError, TypeError, ValueError):
    pass

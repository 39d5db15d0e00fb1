"""Create and manipulate Unix timestamps (seconds since the Unix epoch)."""

import logging
import math
from datetime import date, datetime, time, timezone
from numbers import Real
from time import time as current_time
from typing import Any, TypeAlias

from dateutil import parser as date_parser

from unixstamp.delta import Delta, parse_delta
from unixstamp.errors import InvalidDateInput, InvalidDeltaType, InvalidTimeType

logger = logging.getLogger(__name__)

DeltaLike: TypeAlias = str | int | float | Delta


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_finite(value: Real) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints and Fractions too large for a float are still finite
        return True


def now(delta: DeltaLike | None = None) -> float:
    """
    Return the current time as a Unix timestamp.

    Args:
        delta: Optional offset, either a delta expression ("1h", "-2d") or a
            number of seconds. Falsy values (None, 0, "") mean no offset.

    Returns:
        Seconds since the epoch, with sub-second precision

    Example:
        >>> in_an_hour = now("1h")
        >>> a_week_ago = now("-1w")
    """
    current = current_time()
    return add(current, delta) if delta else current


def add(time: Any, delta: Any) -> float:
    """
    Apply a delta to a timestamp.

    Args:
        time: The original timestamp (any finite real number except bool)
        delta: A delta expression, a parsed Delta or a number of seconds

    Returns:
        time + delta, in seconds

    Raises:
        InvalidTimeType: If time is not a finite number
        InvalidDeltaType: If delta is neither a string, a Delta nor a number
        MalformedDeltaExpression: If delta is a string that cannot be parsed

    Example:
        >>> add(0, "1d 12h")
        129600
        >>> add(0, -60)
        -60
    """
    if not _is_number(time) or not _is_finite(time):
        raise InvalidTimeType(
            f"Time must be a finite number of seconds since the epoch.\n"
            f"Got {type(time).__name__!r}: {time!r}\n"
            f"Hint: Convert dates first:\n"
            f"  add(from_date('2025-01-01T00:00:00Z'), '1d')"
        )

    if isinstance(delta, str):
        seconds = parse_delta(delta).seconds
    elif isinstance(delta, Delta):
        seconds = delta.seconds
    elif _is_number(delta):
        seconds = delta
    else:
        raise InvalidDeltaType(
            f"Delta must be a string, a Delta or a number.\n"
            f"Got {type(delta).__name__!r}: {delta!r}\n"
            f"Examples:\n"
            f"  add(ts, '1h30m')  # delta expression\n"
            f"  add(ts, 5400)     # seconds\n"
            f"  add(ts, parse_delta('1h30m'))  # parsed Delta"
        )

    logger.debug("Adding %r seconds to %r", seconds, time)
    return time + seconds


def from_date(date_value: Any) -> float:
    """
    Return the Unix timestamp for a date string, datetime or date.

    Strings are parsed with dateutil, so ISO 8601 ("2025-01-01T12:00:00Z")
    and the other formats it understands are accepted. Naive datetimes and
    strings without an offset are taken as UTC. Plain dates map to midnight
    UTC.

    Raises:
        InvalidDateInput: If the value is not a string, datetime or date, or
            the string cannot be parsed as a date
    """
    if isinstance(date_value, str):
        try:
            parsed = date_parser.parse(date_value)
        except (ValueError, OverflowError) as exc:
            raise InvalidDateInput(
                f"Could not parse {date_value!r} as a date.\n"
                f"Hint: Use ISO 8601, e.g. '2025-01-01T12:00:00Z'"
            ) from exc
        result = _datetime_to_timestamp(parsed)
    elif isinstance(date_value, datetime):
        result = _datetime_to_timestamp(date_value)
    elif isinstance(date_value, date):
        result = datetime.combine(date_value, time.min, tzinfo=timezone.utc).timestamp()
    else:
        raise InvalidDateInput(
            f"Expected either a string or a date.\n"
            f"Got {type(date_value).__name__!r}: {date_value!r}\n"
            f"Examples:\n"
            f"  from_date('2025-01-01T00:00:00Z')\n"
            f"  from_date(datetime(2025, 1, 1, tzinfo=timezone.utc))\n"
            f"  from_date(date(2025, 1, 1))"
        )

    logger.debug("Converted date %r to timestamp %r", date_value, result)
    return result


def _datetime_to_timestamp(value: datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()

"""Delta expressions: parsing and evaluation.

A delta expression is an optional sign followed by unit terms in a fixed order:

    [+|-] [{years}y] [{months}M] [{weeks}w] [{days}d] [{hours}h]
          [{minutes}m] [{seconds}s] [{milliseconds}ms]

Whitespace is allowed around every token. The sign applies to the whole
expression, so "-1h2m" is 62 minutes back rather than 58.
"""

import logging
from dataclasses import dataclass

from unixstamp.errors import MalformedDeltaExpression
from unixstamp.util import UNIT_NAMES, UNIT_ORDER, UNITS

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_RANK = {suffix: rank for rank, suffix in enumerate(UNIT_ORDER)}


@dataclass(frozen=True)
class Delta:
    """A parsed delta: a sign and (suffix, magnitude) terms in canonical order.

    Zero-magnitude terms are dropped and an empty delta is always positive,
    so equal offsets written differently ("0s", "-", "") compare equal.
    """

    sign: int = 1
    terms: tuple[tuple[str, int], ...] = ()

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"Delta sign must be 1 or -1, got {self.sign!r}")

        last_rank = -1
        for suffix, magnitude in self.terms:
            if suffix not in _RANK:
                valid = ", ".join(UNIT_ORDER)
                raise ValueError(f"Unknown unit {suffix!r}. Valid units: {valid}")
            if isinstance(magnitude, bool) or not isinstance(magnitude, int):
                raise ValueError(
                    f"Magnitude for unit {suffix!r} must be an int, "
                    f"got {type(magnitude).__name__!r}"
                )
            if magnitude < 0:
                raise ValueError(
                    f"Magnitude for unit {suffix!r} must be non-negative, "
                    f"got {magnitude}. Use sign=-1 for negative deltas"
                )
            if _RANK[suffix] <= last_rank:
                raise ValueError(
                    f"Units must appear once each, in the order {' '.join(UNIT_ORDER)}"
                )
            last_rank = _RANK[suffix]

        terms = tuple((s, m) for s, m in self.terms if m)
        object.__setattr__(self, "terms", terms)
        if not terms:
            object.__setattr__(self, "sign", 1)

    @property
    def seconds(self) -> int | float:
        """Signed total length of the delta in seconds."""
        total = sum(magnitude * UNITS[suffix] for suffix, magnitude in self.terms)
        return self.sign * total

    def __str__(self) -> str:
        """Canonical expression, e.g. '-1h2m'. An empty delta renders as '0s'."""
        if not self.terms:
            return "0s"
        body = "".join(f"{magnitude}{suffix}" for suffix, magnitude in self.terms)
        return f"-{body}" if self.sign < 0 else body


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _read_suffix(text: str, pos: int) -> str | None:
    # "ms" must win over "m"
    if text.startswith("ms", pos):
        return "ms"
    if pos < len(text) and text[pos] in _RANK:
        return text[pos]
    return None


def parse_delta(expression: str) -> Delta:
    """
    Parse a delta expression into a Delta.

    Args:
        expression: Text such as "1h", "-2d 12h" or "1y2M3w4d5h6m7s8ms".
            Unit suffixes are case sensitive: "m" is minutes, "M" is months
            and "ms" is milliseconds. An empty or whitespace-only expression
            (optionally signed) is a zero delta.

    Returns:
        The parsed Delta

    Raises:
        MalformedDeltaExpression: If the expression does not match the grammar,
            e.g. units out of order ("1d1y"), repeated units ("1h2h"), a unit
            with no magnitude ("h"), a magnitude with no unit ("5") or an
            unknown unit ("3x").

    Example:
        >>> parse_delta("-1h 30m").seconds
        -5400
    """
    pos = _skip_whitespace(expression, 0)
    sign = 1
    if pos < len(expression) and expression[pos] in "+-":
        sign = -1 if expression[pos] == "-" else 1
        pos += 1

    terms: list[tuple[str, int]] = []
    seen: set[str] = set()
    while True:
        pos = _skip_whitespace(expression, pos)
        if pos >= len(expression):
            break

        digits_at = pos
        while pos < len(expression) and expression[pos] in _DIGITS:
            pos += 1
        if pos == digits_at:
            suffix = _read_suffix(expression, pos)
            if suffix is not None:
                reason = f"unit {suffix!r} ({UNIT_NAMES[suffix]}) has no magnitude"
            else:
                reason = f"unexpected character {expression[pos]!r}"
            raise MalformedDeltaExpression(expression, pos, reason)
        magnitude = int(expression[digits_at:pos])

        pos = _skip_whitespace(expression, pos)
        suffix = _read_suffix(expression, pos)
        if suffix is None:
            if pos >= len(expression):
                reason = f"magnitude {magnitude} has no unit"
            else:
                reason = f"unknown unit starting at {expression[pos]!r}"
            raise MalformedDeltaExpression(expression, pos, reason)

        if suffix in seen:
            raise MalformedDeltaExpression(
                expression, pos, f"unit {suffix!r} appears more than once"
            )
        if terms and _RANK[suffix] < _RANK[terms[-1][0]]:
            raise MalformedDeltaExpression(
                expression,
                pos,
                f"unit {suffix!r} ({UNIT_NAMES[suffix]}) must come before "
                f"{terms[-1][0]!r} ({UNIT_NAMES[terms[-1][0]]})",
            )

        seen.add(suffix)
        terms.append((suffix, magnitude))
        pos += len(suffix)

    delta = Delta(sign=sign, terms=tuple(terms))
    logger.debug("Parsed delta %r as %s (%s seconds)", expression, delta, delta.seconds)
    return delta

"""Parsing of human-written duration text into nanoseconds.

A duration is a run of `<number><unit>` components, e.g. "5m 2 seconds",
"1h1m1s" or "0.5d, 40m, 30.12345s". Components may be separated by a comma,
by whitespace or by nothing at all, and repeated units simply add up. A bare
number with no unit at all is read as milliseconds.
"""

import re
from decimal import Decimal

from prettydur.errors import (
    InvalidDurationError,
    InvalidUnitError,
    IsNegativeError,
    MissingUnitError,
    ValueTooBigError,
)
from prettydur.lexer import DECIMAL_CONTEXT, lex_number, parse_number, truncate_to_int
from prettydur.units import MAX_NANOS, MILLISECOND, match_unit

_SPACE = " \t"
_SEPARATOR_RE = re.compile(r",[ \t]*|[ \t]*")


def to_nanos(value: Decimal, unit: int) -> int:
    """Convert `value` units to whole nanoseconds, truncating any remainder."""
    if value < 0:
        raise IsNegativeError(value)
    nanos = DECIMAL_CONTEXT.multiply(value, Decimal(unit))
    if nanos > MAX_NANOS:
        raise ValueTooBigError()
    return truncate_to_int(nanos)


def parse_component(text: str) -> tuple[int, str]:
    """Parse one `<number>[whitespace]<unit>` group from the head of `text`.

    Returns the component's value in nanoseconds and the unconsumed text.
    """
    lexed = lex_number(text)
    if lexed is None:
        raise InvalidDurationError()
    value, rest = lexed
    if value < 0:
        raise IsNegativeError(value)

    rest = rest.lstrip(_SPACE)
    if not rest.strip():
        raise MissingUnitError()

    matched = match_unit(rest)
    if matched is None:
        raise InvalidUnitError(rest.split()[0])
    unit, rest = matched
    return to_nanos(value, unit), rest


def _skip_separator(text: str) -> str:
    # The pattern can match the empty string, so this never fails.
    return text[_SEPARATOR_RE.match(text).end():]


def parse_nanos(text: str) -> int:
    """Parse duration text into a nanosecond count.

    Raises a `DurationError` subclass describing the first problem found;
    nothing is returned for partially valid input.
    """
    text = text.strip()
    if not text:
        raise InvalidDurationError()

    bare = parse_number(text)
    if bare is not None:
        return to_nanos(bare, MILLISECOND)

    total = 0
    rest = text
    while rest:
        nanos, rest = parse_component(rest)
        total += nanos
        if total > MAX_NANOS:
            raise ValueTooBigError()
        rest = _skip_separator(rest)
    return total

"""Decimal number recognition for duration text.

Numbers are read into `decimal.Decimal` so that "0.1" multiplied by a unit
is exact. All arithmetic on intermediate values goes through
`DECIMAL_CONTEXT`.
"""

import re
from decimal import ROUND_DOWN, Context, Decimal, DivisionByZero, InvalidOperation, Overflow

from prettydur.errors import ValueTooBigError
from prettydur.units import MAX_NANOS

# Wide enough that any product of a literal and a unit multiplier is exact
# down to the nanosecond for every value below MAX_NANOS.
DECIMAL_CONTEXT = Context(
    prec=200,
    rounding=ROUND_DOWN,
    traps=[InvalidOperation, Overflow, DivisionByZero],
)

_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)")


def _to_decimal(literal: str) -> Decimal:
    value = Decimal(literal)
    if value.copy_abs() > MAX_NANOS:
        raise ValueTooBigError()
    return value


def lex_number(text: str) -> tuple[Decimal, str] | None:
    """Read a decimal literal from the head of `text`.

    Accepts "5", "5.", ".5", "5.25", each with an optional sign. Returns the
    value and the unconsumed remainder, or None if `text` does not start with
    a number.
    """
    match = _NUMBER_RE.match(text)
    if match is None:
        return None
    return _to_decimal(match.group()), text[match.end():]


def parse_number(text: str) -> Decimal | None:
    """Return the value of `text` if all of it is a single decimal literal."""
    match = _NUMBER_RE.fullmatch(text)
    if match is None:
        return None
    return _to_decimal(match.group())


def truncate_to_int(value: Decimal) -> int:
    """Drop the fractional part of a non-negative decimal."""
    return int(value.to_integral_value(rounding=ROUND_DOWN, context=DECIMAL_CONTEXT))

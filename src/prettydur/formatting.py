"""Rendering nanosecond counts as duration text.

Two renderings are provided:

- `format_human` picks the coarsest unit the value reaches and shows at most
  two finer units beneath it, truncating anything smaller. Output can be
  compact ("1h 5m") or spelled out ("1 hour 5 minutes").
- `format_exact` uses the same tiers but never drops information, so
  parsing its output always gives back the same nanosecond count.
"""

from decimal import ROUND_DOWN, Decimal

from prettydur.lexer import DECIMAL_CONTEXT
from prettydur.units import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    YEAR,
)

DEFAULT_PRECISION = 2

# unit -> (compact suffix, spelled singular)
UNIT_NAMES: dict[int, tuple[str, str]] = {
    NANOSECOND: ("ns", "nanosecond"),
    MICROSECOND: ("us", "microsecond"),
    MILLISECOND: ("ms", "millisecond"),
    SECOND: ("s", "second"),
    MINUTE: ("m", "minute"),
    HOUR: ("h", "hour"),
    DAY: ("d", "day"),
    YEAR: ("yr", "year"),
}

# Values below one minute are shown as a single, possibly fractional, unit.
_FRACTIONAL_TIERS = (
    (MILLISECOND, MICROSECOND),
    (SECOND, MILLISECOND),
    (MINUTE, SECOND),
)

# (exclusive upper bound, units shown); None means unbounded.
_HUMAN_TIERS = (
    (HOUR, (MINUTE, SECOND)),
    (DAY, (HOUR, MINUTE, SECOND)),
    (YEAR, (DAY, HOUR, MINUTE)),
    (None, (YEAR, DAY, HOUR)),
)

# The exact form carries whatever is left below the last unit as seconds.
_EXACT_TIERS = (
    (HOUR, (MINUTE,)),
    (DAY, (HOUR, MINUTE)),
    (YEAR, (DAY, HOUR, MINUTE)),
    (None, (YEAR, DAY, HOUR, MINUTE)),
)


def plain(value: Decimal) -> str:
    """Render a decimal without exponent and without trailing zeros."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _divide(nanos: int, unit: int) -> Decimal:
    return DECIMAL_CONTEXT.divide(Decimal(nanos), Decimal(unit))


def _truncated(nanos: int, unit: int, precision: int) -> str:
    # A nanosecond count over a unit of at most one second never needs more
    # than nine fractional digits.
    quantum = Decimal(1).scaleb(-min(precision, 9))
    value = _divide(nanos, unit).quantize(quantum, rounding=ROUND_DOWN, context=DECIMAL_CONTEXT)
    return plain(value)


def _label(count: str, unit: int, spelled: bool, exactly_one: bool = False) -> str:
    short, long = UNIT_NAMES[unit]
    if not spelled:
        return f"{count}{short}"
    # Singular only for exactly one unit; 1.001s truncated to "1" stays plural.
    if exactly_one:
        return f"1 {long}"
    return f"{count} {long}s"


def _split(nanos: int, units: tuple[int, ...]) -> tuple[list[int], int]:
    """Break `nanos` into whole counts of each unit, coarsest first."""
    counts = []
    for unit in units:
        count, nanos = divmod(nanos, unit)
        counts.append(count)
    return counts, nanos


def _compound(nanos: int, tiers) -> tuple[tuple[int, ...], list[int], int]:
    for bound, units in tiers:
        if bound is None or nanos < bound:
            counts, rest = _split(nanos, units)
            return units, counts, rest
    raise AssertionError("unreachable: last tier is unbounded")


def format_human(nanos: int, spelled: bool = False, precision: int = DEFAULT_PRECISION) -> str:
    """Render `nanos` as approximate, human friendly text.

    Args:
        nanos: Non-negative nanosecond count.
        spelled: Use "5 minutes" instead of "5m".
        precision: Fractional digits kept for sub-minute values. Extra digits
            are truncated, not rounded, and trailing zeros are dropped.

    Returns:
        Text such as "1.5s", "6m 3s" or "1 hour 1 minute 1 second".
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")

    if nanos < MICROSECOND:
        return _label(str(nanos), NANOSECOND, spelled, nanos == 1)
    for bound, unit in _FRACTIONAL_TIERS:
        if nanos < bound:
            return _label(_truncated(nanos, unit, precision), unit, spelled, nanos == unit)

    units, counts, _ = _compound(nanos, _HUMAN_TIERS)
    parts = [_label(str(counts[0]), units[0], spelled, counts[0] == 1)]
    for unit, count in zip(units[1:], counts[1:]):
        if count:
            parts.append(_label(str(count), unit, spelled, count == 1))
    return " ".join(parts)


def format_exact(nanos: int) -> str:
    """Render `nanos` losslessly; `parse_nanos(format_exact(n)) == n`."""
    if nanos < MICROSECOND:
        return f"{nanos}ns"
    for bound, unit in _FRACTIONAL_TIERS:
        if nanos < bound:
            return _label(plain(_divide(nanos, unit)), unit, False)

    units, counts, rest = _compound(nanos, _EXACT_TIERS)
    parts = [_label(str(counts[0]), units[0], False)]
    for unit, count in zip(units[1:], counts[1:]):
        if count:
            parts.append(_label(str(count), unit, False))
    if rest:
        parts.append(_label(plain(_divide(rest, SECOND)), SECOND, False))
    return " ".join(parts)

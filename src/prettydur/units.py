"""Unit constants and the table of accepted unit spellings.

All multipliers are integer nanosecond counts. Lookups are case-insensitive
and the table is never mutated after import.
"""

from typing import Final

NANOSECOND: Final = 1
MICROSECOND: Final = 1_000 * NANOSECOND
MILLISECOND: Final = 1_000 * MICROSECOND
SECOND: Final = 1_000 * MILLISECOND
MINUTE: Final = 60 * SECOND
HOUR: Final = 60 * MINUTE
DAY: Final = 24 * HOUR
WEEK: Final = 7 * DAY
# 365.25 days
YEAR: Final = 31_557_600 * SECOND

MAX_NANOS: Final = 2**128 - 1

UNIT_SPELLINGS: Final[dict[int, tuple[str, ...]]] = {
    NANOSECOND: ("nanoseconds", "nanosecond", "nanos", "ns"),
    MICROSECOND: ("microseconds", "microsecond", "micros", "us", "µs", "μs"),
    MILLISECOND: ("milliseconds", "millisecond", "millis", "ms"),
    SECOND: ("seconds", "second", "secs", "sec", "s"),
    MINUTE: ("minutes", "minute", "mins", "min", "m"),
    HOUR: ("hours", "hour", "hrs", "hr", "h"),
    DAY: ("days", "day", "d"),
    WEEK: ("weeks", "week", "w"),
    YEAR: ("years", "year", "yrs", "yr", "y"),
}

# Longest spelling first so "ms" is tried before "m" and "secs" before "s".
_LOOKUP: Final[tuple[tuple[str, int], ...]] = tuple(
    sorted(
        ((spelling, unit) for unit, spellings in UNIT_SPELLINGS.items() for spelling in spellings),
        key=lambda entry: len(entry[0]),
        reverse=True,
    )
)


def match_unit(text: str) -> tuple[int, str] | None:
    """Match a unit spelling at the head of `text`.

    Returns the unit multiplier and the unconsumed remainder, or None when no
    spelling matches. A match followed directly by another letter is not a
    match: "5mins" must not be read as "5m" followed by garbage.
    """
    for spelling, unit in _LOOKUP:
        if text[:len(spelling)].lower() == spelling:
            rest = text[len(spelling):]
            if rest[:1].isalpha():
                return None
            return unit, rest
    return None


def lookup_unit(spelling: str) -> int:
    """Return the multiplier for an exact unit spelling, e.g. "secs"."""
    matched = match_unit(spelling)
    if matched is None or matched[1]:
        raise KeyError(spelling)
    return matched[0]

"""prettydur - Parse and format human readable durations with nanosecond precision."""

# Value model and entry points
from prettydur.duration import Duration, parse, parse_std, pretty

# Errors
from prettydur.errors import (
    DurationError,
    InvalidDurationError,
    InvalidUnitError,
    IsNegativeError,
    MissingUnitError,
    ValueTooBigError,
)

# Formatting
from prettydur.formatting import format_exact, format_human

# Serialization
from prettydur.serialization import Timedelta

# Units
from prettydur.units import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    WEEK,
    YEAR,
)

__all__ = [
    # Core functionality
    "Duration",
    "parse",
    "parse_std",
    "pretty",
    "format_human",
    "format_exact",
    "Timedelta",
    # Errors
    "DurationError",
    "InvalidDurationError",
    "InvalidUnitError",
    "IsNegativeError",
    "MissingUnitError",
    "ValueTooBigError",
    # Units
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "YEAR",
]

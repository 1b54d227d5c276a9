"""Duration type with nanosecond precision for consistent time handling."""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer, model_validator

from prettydur.errors import IsNegativeError
from prettydur.formatting import DEFAULT_PRECISION, format_exact, format_human
from prettydur.lexer import DECIMAL_CONTEXT
from prettydur.parser import parse_nanos, to_nanos
from prettydur.units import MICROSECOND, MILLISECOND, SECOND

_ONE_MICROSECOND = timedelta(microseconds=1)
_STD_MAX_MICROS = timedelta.max // _ONE_MICROSECOND
_FORMAT_SPEC_RE = re.compile(r"(?P<spelled>#)?(?:\.(?P<precision>\d+))?")


def _as_decimal(value: int | float | Decimal | str) -> Decimal:
    if isinstance(value, float):
        # repr keeps 0.1 as 0.1 rather than its binary expansion
        return Decimal(repr(value))
    return Decimal(value)


class Duration(BaseModel):
    """Duration type with nanosecond precision for consistent time handling.

    Core representation is int nanoseconds to avoid float precision issues.
    Serializes to its exact text form ("1m 30.0042s") and validates from
    duration text, a nanosecond count, or a `timedelta`.
    """

    model_config = ConfigDict(frozen=True)

    nanos: int = Field(description="Duration in nanoseconds")

    @model_validator(mode="before")
    @classmethod
    def validate_nanos(cls, values: Any) -> Any:
        if isinstance(values, str):
            return {"nanos": parse_nanos(values)}
        if isinstance(values, timedelta):
            return {"nanos": cls.from_std(values).nanos}
        if isinstance(values, int) and not isinstance(values, bool):
            return {"nanos": values}
        return values

    @field_validator("nanos")
    @classmethod
    def validate_non_negative(cls, nanos: int) -> int:
        if nanos < 0:
            raise IsNegativeError(Decimal(nanos))
        return nanos

    @model_serializer(mode="plain")
    def serialize_exact(self) -> str:
        return self.format_exact()

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Create duration from text such as "5m 2s" or "1h1m1s"."""
        return cls(nanos=parse_nanos(text))

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        """Create duration from nanoseconds."""
        return cls(nanos=nanos)

    @classmethod
    def from_micros(cls, micros: int | float | Decimal | str) -> Duration:
        """Create duration from microseconds."""
        return cls(nanos=to_nanos(_as_decimal(micros), MICROSECOND))

    @classmethod
    def from_millis(cls, millis: int | float | Decimal | str) -> Duration:
        """Create duration from milliseconds."""
        return cls(nanos=to_nanos(_as_decimal(millis), MILLISECOND))

    @classmethod
    def from_secs(cls, seconds: int | float | Decimal | str) -> Duration:
        """Create duration from seconds."""
        return cls(nanos=to_nanos(_as_decimal(seconds), SECOND))

    @classmethod
    def from_std(cls, delta: timedelta) -> Duration:
        """Create duration from a `timedelta`."""
        micros = delta // _ONE_MICROSECOND
        if micros < 0:
            raise IsNegativeError(DECIMAL_CONTEXT.divide(Decimal(micros), Decimal(1_000_000)))
        return cls(nanos=micros * MICROSECOND)

    def to_std(self) -> timedelta:
        """Convert to a `timedelta`.

        Sub-microsecond precision is truncated, and values past
        `timedelta.max` saturate to it.
        """
        micros = self.nanos // MICROSECOND
        if micros > _STD_MAX_MICROS:
            return timedelta.max
        return timedelta(microseconds=micros)

    def as_nanos(self) -> int:
        """Get duration as nanoseconds."""
        return self.nanos

    def as_micros(self) -> Decimal:
        """Get duration as microseconds."""
        return DECIMAL_CONTEXT.divide(Decimal(self.nanos), Decimal(MICROSECOND))

    def as_millis(self) -> Decimal:
        """Get duration as milliseconds."""
        return DECIMAL_CONTEXT.divide(Decimal(self.nanos), Decimal(MILLISECOND))

    def as_secs(self) -> Decimal:
        """Get duration as seconds."""
        return DECIMAL_CONTEXT.divide(Decimal(self.nanos), Decimal(SECOND))

    def format_human(self, spelled: bool = False, precision: int = DEFAULT_PRECISION) -> str:
        """Approximate text, e.g. "6m 3s" or "6 minutes 3 seconds"."""
        return format_human(self.nanos, spelled=spelled, precision=precision)

    def format_exact(self) -> str:
        """Lossless text that parses back to this exact value."""
        return format_exact(self.nanos)

    def __add__(self, other: Duration | timedelta) -> Duration:
        """Add a duration or timedelta."""
        if isinstance(other, Duration):
            return Duration(nanos=self.nanos + other.nanos)
        if isinstance(other, timedelta):
            return Duration(nanos=self.nanos + Duration.from_std(other).nanos)
        return NotImplemented

    def __radd__(self, other: timedelta | datetime) -> timedelta | datetime:
        """Add to a timedelta or datetime (reverse)."""
        if isinstance(other, timedelta | datetime):
            return other + self.to_std()
        return NotImplemented

    def __sub__(self, other: Duration | timedelta) -> Duration:
        """Subtract a duration or timedelta."""
        if isinstance(other, Duration):
            result_nanos = self.nanos - other.nanos
        elif isinstance(other, timedelta):
            result_nanos = self.nanos - Duration.from_std(other).nanos
        else:
            return NotImplemented
        if result_nanos < 0:
            raise ValueError("Duration cannot be negative")
        return Duration(nanos=result_nanos)

    def __rsub__(self, other: timedelta | datetime) -> timedelta | datetime:
        """Subtract from a timedelta or datetime (reverse)."""
        if isinstance(other, timedelta | datetime):
            return other - self.to_std()
        return NotImplemented

    def __mul__(self, scalar: int) -> Duration:
        """Multiply duration by an integer."""
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        if scalar < 0:
            raise ValueError("Duration cannot be negative")
        return Duration(nanos=self.nanos * scalar)

    def __rmul__(self, scalar: int) -> Duration:
        """Multiply duration by an integer (reverse)."""
        return self.__mul__(scalar)

    def __truediv__(self, scalar: int) -> Duration:
        """Divide by an integer, discarding any fractional nanosecond."""
        if isinstance(scalar, Duration):
            return NotImplemented
        return self.__floordiv__(scalar)

    def __floordiv__(self, other: int | Duration) -> int | Duration:
        """Floor division by an integer or by another duration."""
        if isinstance(other, Duration):
            if other.nanos == 0:
                raise ZeroDivisionError("Cannot divide by zero duration")
            return self.nanos // other.nanos
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        if other < 0:
            raise ValueError("Duration cannot be negative")
        return Duration(nanos=self.nanos // other)

    def __mod__(self, other: int | Duration) -> Duration:
        """Remainder after dividing by an integer or duration."""
        if isinstance(other, Duration):
            divisor = other.nanos
        elif isinstance(other, int) and not isinstance(other, bool):
            divisor = other
        else:
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        if divisor < 0:
            raise ValueError("Duration cannot be negative")
        return Duration(nanos=self.nanos % divisor)

    def __lt__(self, other: Duration) -> bool:
        """Less than comparison."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanos < other.nanos

    def __le__(self, other: Duration) -> bool:
        """Less than or equal comparison."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanos <= other.nanos

    def __gt__(self, other: Duration) -> bool:
        """Greater than comparison."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanos > other.nanos

    def __ge__(self, other: Duration) -> bool:
        """Greater than or equal comparison."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanos >= other.nanos

    def __eq__(self, other: object) -> bool:
        """Equality comparison."""
        if not isinstance(other, Duration):
            return False
        return self.nanos == other.nanos

    def __hash__(self) -> int:
        """Hash on the nanosecond count."""
        return hash(self.nanos)

    def __str__(self) -> str:
        """Compact human readable form."""
        return self.format_human()

    def __format__(self, format_spec: str) -> str:
        """Support `#` for the spelled form and `.N` for precision."""
        match = _FORMAT_SPEC_RE.fullmatch(format_spec)
        if match is None:
            raise ValueError(f"Invalid format specifier {format_spec!r} for Duration")
        precision = match.group("precision")
        return self.format_human(
            spelled=match.group("spelled") is not None,
            precision=DEFAULT_PRECISION if precision is None else int(precision),
        )

    def __repr__(self) -> str:
        """Representation."""
        return f"Duration({self.nanos}ns)"

    @classmethod
    def zero(cls) -> Duration:
        """Create zero duration."""
        return cls(nanos=0)

    def is_zero(self) -> bool:
        """Check if duration is zero."""
        return self.nanos == 0


def parse(text: str) -> Duration:
    """Parse duration text such as "5m 2 seconds" into a `Duration`.

    A bare number is read as milliseconds. Raises a `DurationError`
    subclass on failure.
    """
    return Duration.parse(text)


def parse_std(text: str) -> timedelta:
    """Parse duration text straight into a `timedelta`."""
    return parse(text).to_std()


def pretty(delta: timedelta) -> Duration:
    """Wrap a `timedelta` so it prints as human duration text."""
    return Duration.from_std(delta)



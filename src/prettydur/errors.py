"""Errors raised while parsing duration text."""

from decimal import Decimal


class DurationError(ValueError):
    """Base class for duration parse failures."""

    message = "invalid duration"

    def __str__(self) -> str:
        return self.message


class InvalidDurationError(DurationError):
    """The input matches no accepted duration form."""


class ValueTooBigError(DurationError):
    message = "the duration value is too big to store"


class MissingUnitError(DurationError):
    message = "missing unit after number"


class InvalidUnitError(DurationError):
    """Unit text was present but is not a known unit."""

    def __init__(self, unit: str):
        super().__init__(unit)
        self.unit = unit

    def __str__(self) -> str:
        return f"invalid duration unit `{self.unit}`"


class IsNegativeError(DurationError):
    """A well-formed but negative number was given."""

    def __init__(self, value: Decimal):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"duration cannot be negative: {self.value}"

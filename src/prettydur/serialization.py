"""
Pydantic-based serialization for durations.

`Duration` already serializes to its exact text form and validates from
text or a nanosecond count. This module adds `Timedelta`, an annotated
`timedelta` that reads and writes the same text.

Example usage:
    class Job(BaseModel):
        timeout: Duration
        retry_after: Timedelta

    Job.model_validate({"timeout": "1m 30s", "retry_after": 1_500_000_000})
"""

from datetime import timedelta
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema

from prettydur.duration import Duration


def _validate_timedelta(value: Any) -> timedelta:
    """Validate and convert input to a non-negative timedelta."""
    if isinstance(value, Duration):
        return value.to_std()
    if isinstance(value, timedelta):
        # Round-trip through Duration to reject negative values.
        return Duration.from_std(value).to_std()
    if isinstance(value, str):
        return Duration.parse(value).to_std()
    if isinstance(value, int) and not isinstance(value, bool):
        return Duration.model_validate(value).to_std()

    raise ValueError(
        f"Cannot convert {type(value)} to a duration. Expected duration text, "
        "a non-negative integer nanosecond count, or a timedelta."
    )


def _serialize_timedelta(value: timedelta) -> str:
    return Duration.from_std(value).format_exact()


DURATION_JSON_SCHEMA = {
    "anyOf": [
        {"type": "string", "description": "Duration text such as '1h 30m' or '250ms'"},
        {"type": "integer", "minimum": 0, "description": "Nanoseconds"},
    ],
    "examples": ["1m 30.0042s", "250ms", 1500000000],
}

Timedelta = Annotated[
    timedelta,
    BeforeValidator(_validate_timedelta),
    PlainSerializer(_serialize_timedelta, return_type=str),
    WithJsonSchema(DURATION_JSON_SCHEMA, mode="validation"),
]

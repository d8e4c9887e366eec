"""Shared field types for decoded API models."""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer


def _from_epoch_seconds(value: Any) -> Any:
    # Numbers are always seconds, never milliseconds
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"Epoch seconds out of range: {value!r}") from e
    if isinstance(value, str):
        raise ValueError("Timestamps are epoch seconds, not strings")
    return value


def _to_epoch_seconds(value: datetime) -> int:
    return int(value.timestamp())


# Seconds since the Unix epoch on the wire, aware UTC datetime in Python
Timestamp = Annotated[
    datetime,
    BeforeValidator(_from_epoch_seconds),
    PlainSerializer(_to_epoch_seconds, return_type=int, when_used="json"),
]

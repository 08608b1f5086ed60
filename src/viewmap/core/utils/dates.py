"""Timestamp parsing and decomposition for the archive view."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from ..exceptions import InvalidDateError


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp and normalize it to UTC.

    Accepts a trailing ``Z``, a space instead of ``T``, date-only values
    (midnight) and fractional seconds of any precision. Naive values are
    taken as UTC.

    Raises:
        InvalidDateError: If *value* is missing, not a string, or unparseable.
    """
    if value is None:
        raise InvalidDateError("created-at is missing")
    if not isinstance(value, str):
        raise InvalidDateError(f"created-at must be a string, got {type(value).__name__}")

    raw = value.strip()
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError:
        dt = _parse_long_fraction(raw)
        if dt is None:
            raise InvalidDateError(f"created-at is not a valid timestamp: {value!r}") from None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    try:
        return dt.astimezone(UTC)
    except OverflowError:
        raise InvalidDateError(f"created-at is out of range: {value!r}") from None


def _parse_long_fraction(raw: str) -> datetime | None:
    """Retry with the fractional part cut to microseconds (``.1234567Z`` style)."""
    head, sep, tail = raw.partition(".")
    if not sep:
        return None
    digits = len(tail) - len(tail.lstrip("0123456789"))
    if digits <= 6:
        return None
    try:
        return datetime.fromisoformat(f"{head}.{tail[:6]}{tail[digits:]}")
    except ValueError:
        return None


def timestamp_components(dt: datetime) -> list[str]:
    """Return ``[year, month, day, hour, minute, second]`` as zero-padded strings.

    Sub-second precision is discarded, not rounded.
    """
    return [
        f"{dt.year:04d}",
        f"{dt.month:02d}",
        f"{dt.day:02d}",
        f"{dt.hour:02d}",
        f"{dt.minute:02d}",
        f"{dt.second:02d}",
    ]

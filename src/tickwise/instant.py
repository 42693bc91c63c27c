"""Helpers for building and validating instants.

An instant is a timezone-aware :class:`datetime.datetime`.  Naive
datetimes are rejected everywhere an instant is expected.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from tickwise.exceptions import InvalidInstantError


def require_aware(value: Any) -> datetime:
    """Return *value* unchanged if it is a timezone-aware ``datetime``."""
    if not isinstance(value, datetime):
        raise InvalidInstantError(value, f"expected datetime, got {type(value).__name__}")
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidInstantError(value, "datetime must carry a timezone or UTC offset")
    return value


def parse_instant(text: str) -> datetime:
    """Parse an ISO-8601 literal such as ``"2023-01-01T09:00:00Z"``.

    A trailing ``Z`` means UTC.  Literals without an offset are rejected
    rather than silently assumed to be local time.
    """
    if not isinstance(text, str):
        raise InvalidInstantError(text, f"expected str, got {type(text).__name__}")

    raw = text.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as e:
        raise InvalidInstantError(text, f"not an ISO-8601 timestamp ({e})") from e

    if parsed.tzinfo is None:
        raise InvalidInstantError(text, "missing UTC offset (use 'Z' or '+HH:MM')")
    return parsed


def format_instant(instant: datetime) -> str:
    """Render *instant* as ISO-8601 with its offset."""
    return require_aware(instant).isoformat()

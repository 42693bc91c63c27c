"""Custom exceptions for the tickwise package."""

from __future__ import annotations

from typing import Any


class ClockError(Exception):
    """Base exception for all clock-related errors."""


class InvalidInstantError(ClockError):
    """Raised when a value cannot be used as an instant.

    Only construction and parsing helpers raise this; ``Clock.now()``
    never does.
    """

    def __init__(self, value: Any, message: str) -> None:
        self.value = value
        super().__init__(f"Invalid instant {value!r}: {message}")


class ClockConfigError(ClockError):
    """Raised when a clock is misconfigured."""

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        super().__init__(f"Clock '{kind}' misconfigured: {message}")

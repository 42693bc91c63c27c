"""Clock abstraction for testable time-dependent logic.

Consumers take a :class:`Clock` in their constructor instead of reading
the system time directly::

    class Greeter:
        def __init__(self, clock: Clock | None = None) -> None:
            self._clock = clock or SystemClock()

Production code relies on the :class:`SystemClock` default; tests pass a
:class:`FixedClock` pinned to a literal instant.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

from tickwise.instant import parse_instant, require_aware


@runtime_checkable
class Clock(Protocol):
    """Protocol for getting the current time.  Inject a fake in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    """Default clock backed by the real system time.

    Reads the wall clock, so successive values follow host clock
    adjustments and are not guaranteed to be monotonic.
    """

    def now(self) -> datetime:
        return datetime.now(UTC)

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to one instant.  ``now()`` always returns it.

    Attributes:
        instant: The timezone-aware instant returned by every ``now()``.
    """

    instant: datetime

    def __post_init__(self) -> None:
        require_aware(self.instant)

    @classmethod
    def at(cls, text: str) -> FixedClock:
        """Build a clock from an ISO-8601 literal, e.g. ``"2023-01-01T09:00:00Z"``."""
        return cls(parse_instant(text))

    def now(self) -> datetime:
        return self.instant

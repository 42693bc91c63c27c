"""tickwise — an injectable clock for testable time-dependent code.

Consumers take a ``Clock`` in their constructor.  Production wires the
``SystemClock``; tests wire a ``FixedClock`` pinned to a literal instant.
"""

from tickwise.clock import Clock, FixedClock, SystemClock
from tickwise.exceptions import ClockConfigError, ClockError, InvalidInstantError
from tickwise.instant import format_instant, parse_instant, require_aware
from tickwise.settings import ClockSettings, resolve_clock

__all__ = [
    "Clock",
    "ClockConfigError",
    "ClockError",
    "ClockSettings",
    "FixedClock",
    "InvalidInstantError",
    "SystemClock",
    "format_instant",
    "parse_instant",
    "require_aware",
    "resolve_clock",
]

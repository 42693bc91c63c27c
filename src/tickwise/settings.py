"""Environment-driven choice of the default clock.

Applications that want a deployment-wide default (e.g. pinning time in
a staging environment) call :func:`resolve_clock` at their wiring point
instead of constructing ``SystemClock()`` directly.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tickwise.clock import Clock, FixedClock, SystemClock
from tickwise.exceptions import ClockConfigError, InvalidInstantError
from tickwise.instant import parse_instant, require_aware

logger = logging.getLogger(__name__)


class ClockSettings(BaseSettings):
    """Settings read from ``TICKWISE_*`` environment variables.

    Attributes:
        clock:          Which clock to wire: "system" or "fixed".
        fixed_instant:  Instant for the "fixed" clock, as an ISO-8601
                        literal with an offset.
    """

    clock: Literal["system", "fixed"] = "system"
    fixed_instant: datetime | None = None

    model_config = SettingsConfigDict(
        env_prefix="TICKWISE_",
        extra="ignore",
    )

    @field_validator("fixed_instant", mode="before")
    @classmethod
    def _check_instant(cls, value: Any) -> datetime | None:
        if value is None or value == "":
            return None
        try:
            if isinstance(value, str):
                return parse_instant(value)
            return require_aware(value)
        except InvalidInstantError as e:
            raise ValueError(str(e)) from e


def resolve_clock(settings: ClockSettings | None = None) -> Clock:
    """Build the clock selected by *settings* (read from the environment if omitted).

    Raises:
        ClockConfigError: If the fixed clock is selected without an instant.
    """
    settings = settings or ClockSettings()

    if settings.clock == "fixed":
        if settings.fixed_instant is None:
            raise ClockConfigError("fixed", "TICKWISE_FIXED_INSTANT is required")
        logger.warning(
            "Clock pinned to %s via TICKWISE_CLOCK=fixed", settings.fixed_instant.isoformat()
        )
        return FixedClock(settings.fixed_instant)

    logger.debug("Using system clock")
    return SystemClock()

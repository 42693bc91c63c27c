"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from tickwise import FixedClock


@pytest.fixture
def morning():
    return datetime(2023, 1, 1, 9, 0, tzinfo=UTC)


@pytest.fixture
def afternoon():
    return datetime(2023, 1, 1, 15, 0, tzinfo=UTC)


@pytest.fixture
def evening():
    return datetime(2023, 1, 1, 19, 0, tzinfo=UTC)


@pytest.fixture
def morning_clock(morning):
    return FixedClock(morning)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("TICKWISE_CLOCK", "TICKWISE_FIXED_INSTANT"):
        monkeypatch.delenv(var, raising=False)

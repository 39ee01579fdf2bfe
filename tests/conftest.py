"""Shared fixtures for the timestamp-nano test suite."""

from __future__ import annotations

import pytest

from timestamp_nano.core.clock import SimClock
from timestamp_nano.core.config import set_settings
from timestamp_nano.core.timestamp import TimestampNano


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch):
    """Each test starts from default settings and a clean environment."""
    monkeypatch.delenv("TIMESTAMP_NANO_OVERFLOW_POLICY", raising=False)
    monkeypatch.delenv("TIMESTAMP_NANO_OBSERVABILITY__LOG_LEVEL", raising=False)
    monkeypatch.delenv("TIMESTAMP_NANO_OBSERVABILITY__LOG_FORMAT", raising=False)
    set_settings(None)
    yield
    set_settings(None)


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

@pytest.fixture
def base_nanoseconds() -> int:
    """Epoch + ~53 years (2023-11-14 22:13:20 UTC)."""
    return 1_700_000_000_000_000_000


@pytest.fixture
def base_timestamp(base_nanoseconds) -> TimestampNano:
    return TimestampNano(base_nanoseconds)


@pytest.fixture
def full_precision_nanoseconds() -> int:
    """2025-02-10 20:27:12.123456789 UTC."""
    return 1_739_219_232_123_456_789


@pytest.fixture
def full_precision_timestamp(full_precision_nanoseconds) -> TimestampNano:
    return TimestampNano(full_precision_nanoseconds)


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@pytest.fixture
def sim_clock() -> SimClock:
    """Return a SimClock starting at 2024-06-01 00:00:00 UTC."""
    return SimClock(start=TimestampNano.from_fields(2024, 6, 1))

"""Clock abstraction producing TimestampNano values.

WallClock: real wall-clock time from ``time.time_ns()``
SimClock: deterministic simulated time (replay, tests)

Consumers that need "now" take an INanoClock instead of reading the
system clock directly, so replays stay reproducible.
"""

from __future__ import annotations

import time
from typing import Protocol

from .timestamp import TimestampNano


class INanoClock(Protocol):
    """Clock interface used by all time-dependent code."""

    def now(self) -> TimestampNano:
        """Current instant as nanoseconds since epoch."""
        ...


class WallClock:
    """Real wall-clock time."""

    def now(self) -> TimestampNano:
        return TimestampNano(time.time_ns())


class SimClock:
    """Simulated clock for deterministic replay.

    Time advances only when explicitly set by the caller.
    """

    def __init__(self, start: TimestampNano | None = None) -> None:
        self._time = start if start is not None else TimestampNano.from_fields(2024, 1, 1)

    def now(self) -> TimestampNano:
        return self._time

    def set_time(self, t: TimestampNano) -> None:
        """Move to *t*. Must be monotonically non-decreasing."""
        if t < self._time:
            raise ValueError(
                f"SimClock cannot go backwards: {t} < {self._time}"
            )
        self._time = t

    def advance_ns(self, nanoseconds: int) -> None:
        """Advance time by a non-negative number of nanoseconds."""
        if nanoseconds < 0:
            raise ValueError(f"SimClock cannot advance by {nanoseconds} ns")
        self.set_time(self._time.checked_add_nanoseconds(nanoseconds))


_wall_clock = WallClock()


def utc_now() -> TimestampNano:
    """Return the current wall-clock instant."""
    return _wall_clock.now()

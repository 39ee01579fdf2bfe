"""Unit factors and fixed reference points."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

# Stored field is an unsigned 64-bit count
U64_MAX: int = 2**64 - 1
U64_MODULUS: int = 2**64

# Unix epoch as an aware UTC datetime
EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)

ONE_MICROSECOND: timedelta = timedelta(microseconds=1)

# 100 ns ticks counted from 0001-01-01
TICKS_PER_MICROSECOND: int = 10
EPOCH_TICKS: int = (
    (datetime(1970, 1, 1) - datetime(1, 1, 1)) // ONE_MICROSECOND
) * TICKS_PER_MICROSECOND  # 621_355_968_000_000_000

MIN_YEAR: int = 1
MAX_YEAR: int = 9999

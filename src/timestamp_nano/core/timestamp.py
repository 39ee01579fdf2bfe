"""TimestampNano: a nanosecond-precision UTC instant.

Stores the number of nanoseconds since the Unix epoch
(1970-01-01 00:00:00 UTC) as a single unsigned 64-bit integer and derives
everything else from it on demand.  Feeds such as DataBento already deliver
timestamps in this form, so constructing and comparing values never touches
the calendar.

Calendar views go through ``datetime`` and therefore stop at microsecond
resolution; the remaining 0-999 ns are kept in the raw count and exposed
as :attr:`TimestampNano.sub_tick_nanoseconds`.

Usage::

    ts = TimestampNano(1_739_219_232_123_456_789)
    str(ts)                      # '2025-02-10 20:27:12.123456789'
    ts.to_calendar_utc()         # datetime(2025, 2, 10, 20, 27, 12, 123456, tzinfo=utc)
    ts.add_milliseconds(-123)    # new value, original untouched
    TimestampNano.parse("2025-02-10 20:27:12.5")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date as _date, datetime
from typing import Any

from pydantic_core import core_schema

from . import calendar_utils
from .constants import (
    EPOCH_TICKS,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    TICKS_PER_MICROSECOND,
    U64_MAX,
    U64_MODULUS,
)
from .enums import OverflowPolicy
from .errors import InvalidCalendarField, TimestampOverflowError
from .text import format_timestamp, parse_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class TimestampNano:
    """Nanoseconds since the Unix epoch, as an immutable value."""

    nanoseconds_since_epoch: int = 0

    def __post_init__(self) -> None:
        value = self.nanoseconds_since_epoch
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(
                f"nanoseconds_since_epoch must be int, got {type(value).__name__}"
            )
        if not 0 <= value <= U64_MAX:
            raise TimestampOverflowError(value, "must fit an unsigned 64-bit integer")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_unix_nanoseconds(cls, nanoseconds: int) -> TimestampNano:
        """Wrap a raw Unix nanosecond count (e.g. a DataBento ``ts_event``)."""
        return cls(nanoseconds)

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0,
        nanosecond: int = 0,
    ) -> TimestampNano:
        """Create a value from calendar parts.

        ``year`` to ``millisecond`` follow the ``datetime`` rules and raise
        :class:`InvalidCalendarField` when out of range.  ``microsecond`` is
        added to the calendar instant and ``nanosecond`` to the resulting
        count, so neither is range-checked: ``microsecond=5000`` simply
        moves the instant 5 ms later.
        """
        instant = calendar_utils.build_instant(
            year, month, day, hour, minute, second, millisecond, microsecond
        )
        nanoseconds = (
            calendar_utils.microseconds_since_epoch(instant) * NANOS_PER_MICROSECOND
            + nanosecond
        )
        if not 0 <= nanoseconds <= U64_MAX:
            raise InvalidCalendarField(
                f"{instant.isoformat()} + {nanosecond} ns is outside the "
                "representable range (epoch onwards, unsigned 64-bit nanoseconds)"
            )
        return cls(nanoseconds)

    @classmethod
    def from_calendar_utc(cls, instant: datetime) -> TimestampNano:
        """Create a value from a ``datetime`` (exact to the microsecond).

        Naive datetimes are taken to be UTC.  Instants before the epoch are
        rejected rather than wrapped.
        """
        micros = calendar_utils.microseconds_since_epoch(instant)
        if micros < 0:
            raise InvalidCalendarField(
                f"{instant.isoformat()} is before the Unix epoch"
            )
        nanoseconds = micros * NANOS_PER_MICROSECOND
        if nanoseconds > U64_MAX:
            raise InvalidCalendarField(
                f"{instant.isoformat()} is beyond the unsigned 64-bit nanosecond range"
            )
        return cls(nanoseconds)

    @classmethod
    def parse(cls, text: str) -> TimestampNano:
        """Parse ``yyyy-MM-dd HH:mm:ss.fffffffff`` (fraction optional, 0-9 digits).

        Raises :class:`ParseError` if the text does not match, or
        :class:`InvalidCalendarField` if the matched fields are invalid.
        """
        return cls.from_fields(*parse_fields(text))

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def sub_tick_nanoseconds(self) -> int:
        """The last three digits: nanoseconds below microsecond resolution."""
        return self.nanoseconds_since_epoch % NANOS_PER_MICROSECOND

    @property
    def sub_second_nanoseconds(self) -> int:
        """Fractional second in nanoseconds (0-999,999,999)."""
        instant = self.to_calendar_utc()
        return instant.microsecond * NANOS_PER_MICROSECOND + self.sub_tick_nanoseconds

    def to_calendar_utc(self) -> datetime:
        """Aware UTC ``datetime``, truncated to the microsecond."""
        return calendar_utils.from_microseconds_since_epoch(
            self.nanoseconds_since_epoch // NANOS_PER_MICROSECOND
        )

    def date(self) -> _date:
        """UTC calendar date."""
        return self.to_calendar_utc().date()

    def to_unix_nanoseconds(self) -> int:
        """The raw count, as stored."""
        return self.nanoseconds_since_epoch

    def total_ticks(self) -> int:
        """100 ns ticks since 0001-01-01, sub-microsecond part dropped."""
        return (
            EPOCH_TICKS
            + (self.nanoseconds_since_epoch // NANOS_PER_MICROSECOND) * TICKS_PER_MICROSECOND
        )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add_nanoseconds(self, nanoseconds: int) -> TimestampNano:
        """Add a signed delta, wrapping modulo 2**64.

        Subtracting past the epoch does not raise: the result wraps to the
        top of the unsigned range.  Use :meth:`checked_add_nanoseconds` or
        :meth:`saturating_add_nanoseconds` where that is not wanted.
        """
        total = self.nanoseconds_since_epoch + nanoseconds
        if not 0 <= total <= U64_MAX:
            logger.debug(
                "TimestampNano %d %+d ns wrapped modulo 2**64",
                self.nanoseconds_since_epoch,
                nanoseconds,
            )
        return TimestampNano(total % U64_MODULUS)

    def add_microseconds(self, microseconds: int) -> TimestampNano:
        return self.add_nanoseconds(microseconds * NANOS_PER_MICROSECOND)

    def add_milliseconds(self, milliseconds: int) -> TimestampNano:
        return self.add_nanoseconds(milliseconds * NANOS_PER_MILLISECOND)

    def add_seconds(self, seconds: int) -> TimestampNano:
        return self.add_nanoseconds(seconds * NANOS_PER_SECOND)

    def add_minutes(self, minutes: int) -> TimestampNano:
        return self.add_nanoseconds(minutes * NANOS_PER_MINUTE)

    def add_hours(self, hours: int) -> TimestampNano:
        return self.add_nanoseconds(hours * NANOS_PER_HOUR)

    def add_days(self, days: int) -> TimestampNano:
        return self.add_nanoseconds(days * NANOS_PER_DAY)

    def add_months(self, months: int) -> TimestampNano:
        """Calendar month arithmetic; the day of month is clamped.

        The sub-microsecond nanoseconds are carried over unchanged.
        """
        shifted = calendar_utils.add_months(self.to_calendar_utc(), months)
        return TimestampNano.from_calendar_utc(shifted).add_nanoseconds(
            self.sub_tick_nanoseconds
        )

    def checked_add_nanoseconds(self, nanoseconds: int) -> TimestampNano:
        """Add a signed delta, raising if the result leaves the u64 range."""
        total = self.nanoseconds_since_epoch + nanoseconds
        if not 0 <= total <= U64_MAX:
            raise TimestampOverflowError(
                total,
                f"{self.nanoseconds_since_epoch} {nanoseconds:+d} ns",
            )
        return TimestampNano(total)

    def saturating_add_nanoseconds(self, nanoseconds: int) -> TimestampNano:
        """Add a signed delta, clamping the result to [0, 2**64 - 1]."""
        total = self.nanoseconds_since_epoch + nanoseconds
        return TimestampNano(min(max(total, 0), U64_MAX))

    def shift(
        self,
        nanoseconds: int,
        policy: OverflowPolicy | None = None,
    ) -> TimestampNano:
        """Add a signed delta under an explicit overflow policy.

        Without *policy* the configured ``overflow_policy`` applies.
        """
        if policy is None:
            from .config import get_settings

            policy = get_settings().overflow_policy
        if policy == OverflowPolicy.CHECKED:
            return self.checked_add_nanoseconds(nanoseconds)
        if policy == OverflowPolicy.SATURATE:
            return self.saturating_add_nanoseconds(nanoseconds)
        return self.add_nanoseconds(nanoseconds)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """``yyyy-MM-dd HH:mm:ss.fffffffff``"""
        instant = self.to_calendar_utc()
        return format_timestamp(
            instant,
            instant.microsecond * NANOS_PER_MICROSECOND + self.sub_tick_nanoseconds,
        )

    def __str__(self) -> str:
        return self.to_string()

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @classmethod
    def _coerce(cls, value: Any) -> TimestampNano:
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U64_MAX:
            return cls(value)
        raise ValueError(
            f"expected TimestampNano or unsigned 64-bit nanosecond count, got {value!r}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: Any
    ) -> core_schema.CoreSchema:
        """Validate from an int (or instance), serialize as that single int."""
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_unix_nanoseconds,
                return_schema=core_schema.int_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: Any
    ) -> dict[str, Any]:
        """Describe the field as the unsigned 64-bit integer it travels as."""
        return handler(core_schema.int_schema(ge=0, le=U64_MAX))

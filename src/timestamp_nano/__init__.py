"""timestamp-nano: nanosecond-precision UTC timestamps.

A single immutable value type, :class:`TimestampNano`, holding nanoseconds
since the Unix epoch as one unsigned 64-bit integer.

Key components
--------------
TimestampNano         The value type: construction, calendar views, arithmetic, text
OverflowPolicy        WRAP / CHECKED / SATURATE for nanosecond arithmetic
WallClock, SimClock   Sources of "now" as TimestampNano values
Settings              Library settings (TOML file + TIMESTAMP_NANO_* env vars)

Errors
------
TimestampError        Base class
ParseError            Text does not match yyyy-MM-dd HH:mm:ss.fffffffff
InvalidCalendarField  Calendar parts do not form a representable instant
TimestampOverflowError  Count outside the unsigned 64-bit range
"""

from .core.clock import INanoClock, SimClock, WallClock, utc_now
from .core.config import Settings, get_settings, load_settings, set_settings
from .core.constants import EPOCH, EPOCH_TICKS, U64_MAX
from .core.enums import OverflowPolicy
from .core.errors import (
    ConfigError,
    InvalidCalendarField,
    ParseError,
    TimestampError,
    TimestampOverflowError,
)
from .core.timestamp import TimestampNano

__version__ = "0.1.0"

__all__ = [
    "TimestampNano",
    "OverflowPolicy",
    "INanoClock",
    "WallClock",
    "SimClock",
    "utc_now",
    "Settings",
    "get_settings",
    "load_settings",
    "set_settings",
    "EPOCH",
    "EPOCH_TICKS",
    "U64_MAX",
    "TimestampError",
    "ParseError",
    "InvalidCalendarField",
    "TimestampOverflowError",
    "ConfigError",
]

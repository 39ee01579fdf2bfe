"""Enumerations used across timestamp-nano."""

from enum import Enum


class OverflowPolicy(str, Enum):
    """What nanosecond arithmetic does when it leaves the u64 range."""

    WRAP = "wrap"          # modulo 2**64, compatible with existing call sites
    CHECKED = "checked"    # raise TimestampOverflowError
    SATURATE = "saturate"  # clamp to [0, 2**64 - 1]


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"

"""Exception hierarchy for timestamp-nano."""


class TimestampError(Exception):
    """Base exception for all timestamp-nano errors."""


# --- Text ---
class ParseError(TimestampError):
    """Text does not match ``yyyy-MM-dd HH:mm:ss.fffffffff``."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"Invalid TimestampNano format {text!r}, "
            "expected yyyy-MM-dd HH:mm:ss.fffffffff"
        )


# --- Calendar ---
class InvalidCalendarField(TimestampError):
    """Calendar fields do not form a representable instant."""


# --- Range ---
class TimestampOverflowError(TimestampError):
    """Nanosecond count outside the unsigned 64-bit range."""

    def __init__(self, value: int, reason: str = ""):
        self.value = value
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Nanosecond count {value} out of range{detail}")


# --- Configuration ---
class ConfigError(TimestampError):
    """Invalid or unreadable configuration."""

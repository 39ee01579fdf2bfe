"""Canonical text form: ``yyyy-MM-dd HH:mm:ss.fffffffff``.

Parsing is lenient in the same ways existing feeds rely on:

- the date/time separator is any single non-digit character,
- the fraction may carry 0-9 digits, split greedily left to right into
  millisecond, microsecond and nanosecond groups of up to three digits
  (``.1`` is *one millisecond*, not a tenth of a second),
- the pattern is searched for, so surrounding text is ignored.

Fields are not range-checked here; the calendar constructor does that.
The one exception is a digit run too long to convert to ``int`` at all,
which raises :class:`InvalidCalendarField` directly.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import NamedTuple

from .errors import InvalidCalendarField, ParseError

logger = logging.getLogger(__name__)

_TIMESTAMP_RE = re.compile(
    r"(?P<year>\d+)-(?P<month>\d+)-(?P<day>\d+)\D"
    r"(?P<hour>\d+):(?P<minute>\d+):(?P<second>\d+)\.*"
    r"(?P<millisecond>\d{0,3})(?P<microsecond>\d{0,3})(?P<nanosecond>\d{0,3})"
)


class TimestampFields(NamedTuple):
    """Raw integer fields captured from a timestamp string."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int = 0
    microsecond: int = 0
    nanosecond: int = 0


def _group_int(match: re.Match[str], name: str) -> int:
    value = match.group(name)
    if not value:
        return 0
    try:
        return int(value)
    except ValueError as exc:
        # digit run longer than the interpreter's int conversion limit
        raise InvalidCalendarField(
            f"{name} field has {len(value)} digits, too large for a calendar value"
        ) from exc


def parse_fields(text: str) -> TimestampFields:
    """Extract calendar fields from *text* or raise :class:`ParseError`."""
    match = _TIMESTAMP_RE.search(text)
    if match is None:
        logger.debug("Rejected timestamp text %r", text)
        raise ParseError(text)
    return TimestampFields(*(_group_int(match, name) for name in TimestampFields._fields))


def format_timestamp(instant: datetime, sub_second_nanoseconds: int) -> str:
    """Render *instant* to the second plus a 9-digit nanosecond fraction."""
    return (
        f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d} "
        f"{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"
        f".{sub_second_nanoseconds:09d}"
    )

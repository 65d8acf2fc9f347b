"""Clock-string and minute-offset conversions."""

from __future__ import annotations

import re
from datetime import time

MINUTES_PER_DAY = 24 * 60

_CLOCK_RE = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")


class MalformedTimeError(ValueError):
    """Raised when a clock string is not a valid ``HH:MM`` value."""


def minutes_to_time(total_minutes: int) -> str:
    """Format a minute offset as ``HH:MM``, wrapping around midnight."""

    normalized = total_minutes % MINUTES_PER_DAY
    hours, mins = divmod(normalized, 60)
    return f"{hours:02d}:{mins:02d}"


def time_to_minutes(clock: str) -> int:
    """Parse ``HH:MM`` into minutes since midnight."""

    match = _CLOCK_RE.fullmatch(clock) if isinstance(clock, str) else None
    if match is None:
        raise MalformedTimeError(f"Malformed clock time {clock!r}, expected HH:MM")
    return int(match.group(1)) * 60 + int(match.group(2))


def normalize_time(value: time | str) -> str:
    """Return canonical ``HH:MM`` for a ``datetime.time`` or clock string."""

    if isinstance(value, time):
        return f"{value.hour:02d}:{value.minute:02d}"
    return minutes_to_time(time_to_minutes(value))

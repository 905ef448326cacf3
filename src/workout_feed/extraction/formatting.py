"""Display formatting for workout times, dates and durations.

Weekday and month names are fixed English abbreviations so output does
not depend on the process locale.
"""

from __future__ import annotations

import math
from datetime import datetime, tzinfo

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def to_local(dt: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert an aware *dt* to *tz*; naive datetimes are returned as-is."""
    if tz is not None and dt.tzinfo is not None:
        return dt.astimezone(tz)
    return dt


def format_time(dt: datetime | None) -> str:
    """12-hour clock time. e.g. 08:05 -> '8:05 AM', 13:30 -> '1:30 PM'."""
    if dt is None:
        return ""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def format_date(dt: datetime | None) -> str:
    """Short date. e.g. 2025-03-17 -> 'Mon Mar 17'."""
    if dt is None:
        return ""
    return f"{_DAY_NAMES[dt.weekday()]} {_MONTH_NAMES[dt.month - 1]} {dt.day}"


def duration_minutes(start: datetime | None, end: datetime | None) -> int | None:
    """Whole minutes between *start* and *end*, rounded half up.

    Returns None when either timestamp is missing.
    """
    if start is None or end is None:
        return None
    minutes = (end - start).total_seconds() / 60
    return int(math.floor(minutes + 0.5))


def format_duration(start: datetime | None, end: datetime | None) -> str:
    """Duration as '<N> min', or '' when it cannot be computed."""
    minutes = duration_minutes(start, end)
    if minutes is None:
        return ""
    return f"{minutes} min"


def epoch_millis(dt: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return int(round(dt.timestamp() * 1000))

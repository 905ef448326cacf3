"""Pure functions mapping Google Calendar event dicts to RawEvent.

No I/O — takes raw items from the ``events().list`` response and returns
RawEvent instances. Missing or malformed fields become None / "".
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from workout_feed.models.raw_event import RawEvent


def map_event(item: dict[str, Any], calendar_name: str = "") -> RawEvent:
    """Map one Google Calendar event resource to a RawEvent."""
    return RawEvent(
        id=str(item.get("id") or ""),
        title=item.get("summary") or "",
        notes=item.get("description") or None,
        location=item.get("location") or None,
        start_time=_extract_time(item.get("start")),
        end_time=_extract_time(item.get("end")),
        calendar_name=calendar_name or "",
    )


def map_events(items: list[dict[str, Any]], calendar_name: str = "") -> list[RawEvent]:
    """Map a page of event items, skipping cancelled instances."""
    return [
        map_event(item, calendar_name)
        for item in items
        if item.get("status") != "cancelled"
    ]


# ---------------------------------------------------------------------------
# Internal extractors, each tolerating None input
# ---------------------------------------------------------------------------


def _extract_time(data: Any) -> Optional[datetime]:
    """Parse an event start/end object.

    Timed events carry ``dateTime`` (RFC 3339); all-day events carry
    ``date`` (YYYY-MM-DD) and map to local midnight.
    """
    if not isinstance(data, dict):
        return None

    value = data.get("dateTime") or data.get("date")
    if not value:
        return None

    try:
        return _parse_iso(str(value))
    except ValueError:
        return None


def _parse_iso(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)

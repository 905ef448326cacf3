"""Source platform detection and ClassPass location refinement."""

from __future__ import annotations

from workout_feed.models.enums import HOME_WORKOUT_LOCATION, NO_LOCATION
from workout_feed.models.keywords import PLATFORM_IDENTIFIERS
from workout_feed.models.raw_event import RawEvent

CLASSPASS = "ClassPass"


def detect_platform(event: RawEvent) -> str | None:
    """Return the first platform whose keywords appear in the event text.

    Title, notes and location are searched together, case-insensitively.
    """
    text = f"{event.title or ''} {event.notes or ''} {event.location or ''}".lower()
    for name, keywords in PLATFORM_IDENTIFIERS:
        if any(keyword in text for keyword in keywords):
            return name
    return None


def extract_location(event: RawEvent, platform: str | None) -> str:
    """Derive the display location for *event*.

    ClassPass bookings are titled "<Class> at <Studio> - <Area>"; for those
    the studio name replaces the calendar location.
    """
    location = event.location or NO_LOCATION

    title = event.title or ""
    if platform == CLASSPASS:
        parts = title.split(" at ")
        if len(parts) > 1:
            location = parts[1].split(" - ")[0].strip()

    return location or HOME_WORKOUT_LOCATION

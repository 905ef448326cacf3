"""Raw calendar event — read-only input to the feed pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RawEvent:
    """An unprocessed calendar entry as delivered by a CalendarSource.

    Any text field may be missing on real calendars; the classifier and
    the extractor treat ``None`` and ``""`` alike.
    """

    id: str
    title: str = ""
    notes: str | None = None
    location: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    calendar_name: str = ""

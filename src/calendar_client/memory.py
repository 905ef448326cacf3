"""In-memory calendar source for demo mode and tests."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from calendar_client.exceptions import CalendarPermissionError
from workout_feed.models.raw_event import RawEvent

logger = logging.getLogger(__name__)


class InMemoryCalendarSource:
    """CalendarSource over a fixed list of events.

    Events without a start time are always listed. Comparing aware and
    naive datetimes is avoided by passing either all-aware or all-naive
    values.
    """

    def __init__(
        self, events: Iterable[RawEvent] = (), permission_granted: bool = True
    ) -> None:
        self._events: list[RawEvent] = list(events)
        self.permission_granted = permission_granted

    @property
    def events(self) -> list[RawEvent]:
        return list(self._events)

    def add(self, event: RawEvent) -> None:
        self._events.append(event)

    async def list_events(self, start: datetime, end: datetime) -> list[RawEvent]:
        self._check_permission()
        return [
            event
            for event in self._events
            if event.start_time is None or start <= event.start_time <= end
        ]

    async def delete_event(self, event_id: str) -> bool:
        self._check_permission()
        remaining = [e for e in self._events if e.id != event_id]
        if len(remaining) == len(self._events):
            logger.warning("Cannot delete event %s: not found", event_id)
            return False
        self._events = remaining
        logger.info("Deleted calendar event %s", event_id)
        return True

    def _check_permission(self) -> None:
        if not self.permission_granted:
            raise CalendarPermissionError("Calendar permission not granted", status_code=403)

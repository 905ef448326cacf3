"""The calendar source port consumed by the SessionCache."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from workout_feed.models.raw_event import RawEvent


@runtime_checkable
class CalendarSource(Protocol):
    """Anything that can list and delete calendar events.

    Implementations raise ``PermissionDenied`` (or a subclass) when
    calendar access is not granted. Any other exception counts as a fetch
    or delete failure.
    """

    async def list_events(self, start: datetime, end: datetime) -> list[RawEvent]:
        ...

    async def delete_event(self, event_id: str) -> bool:
        ...

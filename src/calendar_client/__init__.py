"""Calendar clients — all calendar network I/O lives here."""

from calendar_client.client import GoogleCalendarClient
from calendar_client.event_mapper import map_event, map_events
from calendar_client.exceptions import (
    CalendarAPIError,
    CalendarAuthError,
    CalendarClientError,
    CalendarPermissionError,
    CalendarRateLimitError,
)
from calendar_client.memory import InMemoryCalendarSource

__all__ = [
    "CalendarAPIError",
    "CalendarAuthError",
    "CalendarClientError",
    "CalendarPermissionError",
    "CalendarRateLimitError",
    "GoogleCalendarClient",
    "InMemoryCalendarSource",
    "map_event",
    "map_events",
]

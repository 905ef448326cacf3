"""High-level Google Calendar client facade.

Implements the workout feed's CalendarSource port. All methods wrap raw
google-api-python-client calls with error handling and retry logic; the
blocking HTTP calls run in the event loop's default executor.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from googleapiclient.discovery import build  # type: ignore[import-untyped]

from calendar_client.auth import create_credentials, resume_credentials
from calendar_client.event_mapper import map_events
from calendar_client.exceptions import (
    CalendarAPIError,
    CalendarPermissionError,
    CalendarRateLimitError,
)
from workout_feed.models.raw_event import RawEvent

logger = logging.getLogger(__name__)

_DEFAULT_TOKEN_PATH = Path("~/.workout_feed/token.json").expanduser()
_DEFAULT_CALENDAR_ID = "primary"
_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2
_PAGE_SIZE = 250
_PERMISSION_STATUSES = (401, 403)
_GONE_STATUSES = (404, 410)


class GoogleCalendarClient:
    """Facade for listing and deleting events across the user's calendars."""

    def __init__(
        self,
        credentials: Any = None,
        client_secrets_file: Path | str | None = None,
        token_path: Path | str = _DEFAULT_TOKEN_PATH,
        calendar_ids: list[str] | None = None,
    ) -> None:
        if credentials is None:
            if client_secrets_file is not None:
                credentials = create_credentials(client_secrets_file, token_path)
            else:
                credentials = resume_credentials(token_path)
        self._service = build(
            "calendar", "v3", credentials=credentials, cache_discovery=False
        )
        self._calendar_ids = calendar_ids
        self._event_calendars: dict[str, str] = {}

    @classmethod
    def from_service(
        cls, service: Any, calendar_ids: list[str] | None = None
    ) -> "GoogleCalendarClient":
        """Construct from an already-built Calendar API service object."""
        obj = cls.__new__(cls)
        obj._service = service
        obj._calendar_ids = calendar_ids
        obj._event_calendars = {}
        return obj

    # ------------------------------------------------------------------
    # Calendars
    # ------------------------------------------------------------------

    async def list_calendars(self) -> list[dict[str, Any]]:
        """List the user's calendars, restricted to ``calendar_ids`` if set."""
        calendars: list[dict[str, Any]] = []
        page_token: str | None = None
        while True:
            kwargs: dict[str, Any] = {}
            if page_token:
                kwargs["pageToken"] = page_token
            resp = await self._run(
                lambda: self._service.calendarList().list(**kwargs).execute()
            )
            calendars.extend(resp.get("items", []))
            page_token = resp.get("nextPageToken")
            if not page_token:
                break

        if self._calendar_ids is not None:
            wanted = set(self._calendar_ids)
            calendars = [c for c in calendars if c.get("id") in wanted]
        logger.info("Found %d calendars", len(calendars))
        return calendars

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def list_events(self, start: datetime, end: datetime) -> list[RawEvent]:
        """Return all events between *start* and *end* across calendars.

        Recurring events are expanded into single occurrences. Each event
        carries its calendar's display name for classification.
        """
        time_min = _rfc3339(start)
        time_max = _rfc3339(end)

        events: list[RawEvent] = []
        event_calendars: dict[str, str] = {}
        for calendar in await self.list_calendars():
            calendar_id = calendar.get("id") or _DEFAULT_CALENDAR_ID
            name = calendar.get("summaryOverride") or calendar.get("summary") or ""
            items = await self._list_calendar_events(calendar_id, time_min, time_max)
            mapped = map_events(items, name)
            for event in mapped:
                event_calendars[event.id] = calendar_id
            events.extend(mapped)

        # Replaced per listing so events outside the latest window are forgotten.
        self._event_calendars = event_calendars

        logger.info("Found %d events between %s and %s", len(events), time_min, time_max)
        return events

    async def delete_event(self, event_id: str) -> bool:
        """Delete an event. Returns False if it no longer exists.

        The owning calendar is remembered from the last list_events();
        unknown ids are looked up in the primary calendar.
        """
        if not event_id:
            logger.error("Cannot delete event: no event ID provided")
            return False

        calendar_id = self._event_calendars.get(event_id, _DEFAULT_CALENDAR_ID)
        try:
            await self._run(
                lambda: self._service.events()
                .delete(calendarId=calendar_id, eventId=event_id)
                .execute()
            )
        except CalendarAPIError as exc:
            if exc.status_code in _GONE_STATUSES:
                logger.warning("Event %s already gone (%s)", event_id, exc.status_code)
                self._event_calendars.pop(event_id, None)
                return False
            raise

        self._event_calendars.pop(event_id, None)
        logger.info("Deleted calendar event %s from %s", event_id, calendar_id)
        return True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _list_calendar_events(
        self, calendar_id: str, time_min: str, time_max: str
    ) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        page_token: str | None = None
        while True:
            kwargs: dict[str, Any] = {
                "calendarId": calendar_id,
                "timeMin": time_min,
                "timeMax": time_max,
                "singleEvents": True,
                "orderBy": "startTime",
                "maxResults": _PAGE_SIZE,
            }
            if page_token:
                kwargs["pageToken"] = page_token
            resp = await self._run(
                lambda: self._service.events().list(**kwargs).execute()
            )
            items.extend(resp.get("items", []))
            page_token = resp.get("nextPageToken")
            if not page_token:
                return items

    async def _run(self, fn: Callable[[], Any]) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._safe_call, fn)

    def _safe_call(self, fn: Callable[[], Any]) -> Any:
        """Call *fn* with retry + exponential backoff on 429."""
        last_exc: Exception | None = None
        for attempt in range(_MAX_RETRIES):
            try:
                return fn()
            except Exception as exc:
                last_exc = exc
                status = _status_of(exc)
                if status == 429:
                    wait = _BASE_BACKOFF_S * (2 ** attempt)
                    logger.warning(
                        "Rate limited (attempt %d/%d), retrying in %ds",
                        attempt + 1,
                        _MAX_RETRIES,
                        wait,
                    )
                    time.sleep(wait)
                    continue
                if status in _PERMISSION_STATUSES:
                    raise CalendarPermissionError(str(exc), status_code=status) from exc
                # Non-retryable error
                raise CalendarAPIError(str(exc), status_code=status) from exc

        raise CalendarRateLimitError(
            f"Rate limited after {_MAX_RETRIES} retries: {last_exc}"
        )


def _status_of(exc: Exception) -> int | None:
    """HTTP status of an API exception, if it carries one."""
    status = getattr(exc, "status_code", None)
    if status is None:
        resp = getattr(exc, "resp", None)
        status = getattr(resp, "status", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


def _rfc3339(dt: datetime) -> str:
    """Timezone-aware ISO timestamp; naive values are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()

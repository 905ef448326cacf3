"""End-to-end integration tests: Google Calendar items → SessionCache → Workout feed.

Covers the fetch pipeline across calendars, duplicate collapsing,
deletion routed back to the owning calendar, and access failures.
"""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from calendar_client.client import GoogleCalendarClient
from calendar_client.event_mapper import map_event
from workout_feed.classifier import EventClassifier
from workout_feed.exceptions import FetchFailure
from workout_feed.models.enums import RefreshStatus, Verdict
from workout_feed.session import SessionCache

NOW = datetime(2025, 3, 17, 7, 0, tzinfo=timezone.utc)


def _item(id: str, summary: str, start: str, end: str, **extra) -> dict:
    return {
        "id": id,
        "status": "confirmed",
        "summary": summary,
        "start": {"dateTime": start},
        "end": {"dateTime": end},
        **extra,
    }


@pytest.fixture
def service() -> MagicMock:
    service = MagicMock()
    service.calendarList.return_value.list.return_value.execute.return_value = {
        "items": [
            {"id": "primary-id", "summary": "me@example.com", "summaryOverride": "Personal"},
            {"id": "gym-id", "summary": "Gym"},
        ]
    }
    service.events.return_value.list.return_value.execute.side_effect = [
        {
            "items": [
                _item("soul", "SoulCycle Ride", "2025-03-17T12:00:00Z", "2025-03-17T12:45:00Z"),
                _item("sync", "Team Sync", "2025-03-17T14:00:00Z", "2025-03-17T14:30:00Z"),
                _item("yoga-p", "Morning Yoga", "2025-03-18T12:00:00Z", "2025-03-18T13:00:00Z",
                      description="Bring a mat."),
                {"id": "old", "status": "cancelled"},
            ]
        },
        {
            "items": [
                _item("yoga-g", "Morning Yoga", "2025-03-18T12:00:00Z", "2025-03-18T13:00:00Z"),
                _item("legs", "Legs & Glutes", "2025-03-19T22:00:00Z", "2025-03-19T23:15:00Z"),
            ]
        },
    ]
    return service


@pytest.fixture
def cache(service) -> SessionCache:
    client = GoogleCalendarClient.from_service(service)
    return SessionCache(client, clock=lambda: NOW)


class TestEndToEndIntegration:
    @pytest.mark.asyncio
    async def test_google_calendar_to_feed(self, cache) -> None:
        workouts = await cache.refresh()

        assert [w.source_event_id for w in workouts] == ["soul", "yoga-p", "legs"]
        assert cache.status == RefreshStatus.OK

        soul, yoga, legs = workouts
        assert soul.platforms == ("SoulCycle",)
        assert soul.type == "Cycling"
        assert soul.duration == "45 min"
        assert soul.time == "12:00 PM"
        assert soul.date == "Mon Mar 17"

        assert yoga.description == "Bring a mat."
        assert yoga.intensity == "Light"

        assert legs.type == "Legs"
        assert legs.duration == "75 min"
        assert legs.description == (
            "Legs workout scheduled for Wed Mar 19. "
            "This is a moderate-intensity session lasting 75 min."
        )

    @pytest.mark.asyncio
    async def test_delete_routes_to_owning_calendar(self, cache, service) -> None:
        workouts = await cache.refresh()
        legs = workouts[-1]

        await cache.delete_workout(legs.id)

        service.events.return_value.delete.assert_called_once_with(
            calendarId="gym-id", eventId="legs"
        )
        assert [w.source_event_id for w in cache.get_current()] == ["soul", "yoga-p"]

    @pytest.mark.asyncio
    async def test_permission_denied_surfaces_as_status(self, service) -> None:
        exc = Exception("Forbidden")
        exc.status_code = 403
        service.calendarList.return_value.list.return_value.execute.side_effect = exc
        cache = SessionCache(GoogleCalendarClient.from_service(service), clock=lambda: NOW)

        assert await cache.refresh() == []
        assert cache.status == RefreshStatus.PERMISSION_DENIED

    @pytest.mark.asyncio
    async def test_api_failure_raises_fetch_failure(self, service) -> None:
        exc = Exception("Backend Error")
        exc.status_code = 503
        service.calendarList.return_value.list.return_value.execute.side_effect = exc
        cache = SessionCache(GoogleCalendarClient.from_service(service), clock=lambda: NOW)

        with pytest.raises(FetchFailure):
            await cache.refresh()
        assert cache.status == RefreshStatus.NOT_LOADED

    def test_explain_reports_deciding_rule(self) -> None:
        event = map_event(
            _item("sync", "Team Sync", "2025-03-17T14:00:00Z", "2025-03-17T14:30:00Z"),
            "Personal",
        )
        trace = EventClassifier().explain(event)
        assert trace.verdict == Verdict.EXCLUDE
        assert trace.deciding_rule_id == "business_event"

"""Shared test fixtures: calendar events, classifier, fixed clock."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from workout_feed.classifier import EventClassifier
from workout_feed.models.raw_event import RawEvent

# Monday 17 March 2025, 07:00 UTC
NOW = datetime(2025, 3, 17, 7, 0, tzinfo=timezone.utc)


def make_event(
    title: str = "Workout",
    *,
    id: str = "evt-1",
    notes: str | None = None,
    location: str | None = None,
    start: datetime | None = None,
    minutes: float | None = 60,
    calendar_name: str = "Personal",
) -> RawEvent:
    """Build a RawEvent starting at *start* (default: NOW + 1h)."""
    if start is None:
        start = NOW + timedelta(hours=1)
    end = start + timedelta(minutes=minutes) if minutes is not None else None
    return RawEvent(
        id=id,
        title=title,
        notes=notes,
        location=location,
        start_time=start,
        end_time=end,
        calendar_name=calendar_name,
    )


@pytest.fixture
def event_factory() -> Callable[..., RawEvent]:
    return make_event


@pytest.fixture
def classifier() -> EventClassifier:
    return EventClassifier()


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return lambda: NOW


@pytest.fixture
def week_of_events() -> list[RawEvent]:
    """A mixed calendar: workouts, duplicates, meetings and meals."""
    day = NOW.replace(hour=0)
    return [
        make_event("SoulCycle Ride", id="soul", start=day + timedelta(hours=8), minutes=45),
        make_event("Team Sync", id="sync", start=day + timedelta(hours=10),
                   minutes=30, calendar_name="Work"),
        make_event("Morning Yoga", id="yoga-a", start=day + timedelta(days=1, hours=8)),
        make_event("Morning Yoga", id="yoga-b", start=day + timedelta(days=1, hours=8),
                   calendar_name="Family"),
        make_event("Lunch run-through", id="lunch", start=day + timedelta(days=1, hours=12)),
        make_event("Leg Day", id="legs", start=day + timedelta(days=2, hours=18),
                   calendar_name="Gym"),
        make_event("Dentist", id="dentist", start=day + timedelta(days=3, hours=9)),
    ]

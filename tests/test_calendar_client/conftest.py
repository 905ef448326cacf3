"""Fixtures with realistic Google Calendar API response dicts for testing."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def google_timed_event() -> dict:
    """A single timed event from ``events().list``."""
    return {
        "kind": "calendar#event",
        "id": "7h2k9abc",
        "status": "confirmed",
        "summary": "SoulCycle Ride",
        "description": "Bring cycling shoes",
        "location": "SoulCycle Union Square",
        "start": {"dateTime": "2025-03-17T08:00:00-04:00", "timeZone": "America/New_York"},
        "end": {"dateTime": "2025-03-17T08:45:00-04:00", "timeZone": "America/New_York"},
        "organizer": {"email": "me@example.com", "self": True},
    }


@pytest.fixture
def google_all_day_event() -> dict:
    """An all-day event: start/end carry ``date`` only."""
    return {
        "id": "allday1",
        "status": "confirmed",
        "summary": "Half marathon",
        "start": {"date": "2025-03-22"},
        "end": {"date": "2025-03-23"},
    }


@pytest.fixture
def google_cancelled_event() -> dict:
    """A cancelled occurrence of a recurring series."""
    return {
        "id": "series_20250318T120000Z",
        "status": "cancelled",
        "recurringEventId": "series",
    }


@pytest.fixture
def google_calendar_list() -> dict:
    """``calendarList().list`` response with two calendars."""
    return {
        "items": [
            {"id": "primary-id", "summary": "me@example.com", "summaryOverride": "Personal"},
            {"id": "gym-id", "summary": "Gym"},
        ]
    }


@pytest.fixture
def mock_service():
    """A MagicMock standing in for the built Calendar v3 service."""
    return MagicMock()

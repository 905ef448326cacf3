"""Tests for calendar_client.client — mock-based, no real network calls."""

from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock, call, patch

import pytest

from calendar_client.client import GoogleCalendarClient, _rfc3339, _status_of
from calendar_client.exceptions import (
    CalendarAPIError,
    CalendarPermissionError,
    CalendarRateLimitError,
)
from workout_feed.exceptions import PermissionDenied

START = datetime(2025, 3, 16, 7, 0, tzinfo=timezone.utc)
END = datetime(2025, 3, 31, 7, 0, tzinfo=timezone.utc)


def _api_error(status: int, message: str = "API error") -> Exception:
    exc = Exception(message)
    exc.status_code = status
    return exc


@pytest.fixture
def client(mock_service):
    """Create a GoogleCalendarClient around a mocked service."""
    return GoogleCalendarClient.from_service(mock_service)


@pytest.fixture
def populated_service(
    mock_service,
    google_calendar_list,
    google_timed_event,
    google_cancelled_event,
    google_all_day_event,
):
    """Service returning two calendars; the first pages its events."""
    mock_service.calendarList.return_value.list.return_value.execute.return_value = (
        google_calendar_list
    )
    mock_service.events.return_value.list.return_value.execute.side_effect = [
        {"items": [google_timed_event], "nextPageToken": "page-2"},
        {"items": [google_cancelled_event]},
        {"items": [google_all_day_event]},
    ]
    return mock_service


# ---------------------------------------------------------------------------
# construction
# ---------------------------------------------------------------------------


class TestConstruction:
    @patch("calendar_client.client.build")
    def test_builds_service_from_credentials(self, mock_build):
        creds = MagicMock()
        client = GoogleCalendarClient(credentials=creds)
        mock_build.assert_called_once_with(
            "calendar", "v3", credentials=creds, cache_discovery=False
        )
        assert client._service is mock_build.return_value

    @patch("calendar_client.client.build")
    @patch("calendar_client.client.resume_credentials")
    def test_resumes_saved_token(self, mock_resume, mock_build, tmp_path):
        GoogleCalendarClient(token_path=tmp_path / "token.json")
        mock_resume.assert_called_once_with(tmp_path / "token.json")
        assert mock_build.call_args.kwargs["credentials"] is mock_resume.return_value

    @patch("calendar_client.client.build")
    @patch("calendar_client.client.create_credentials")
    def test_runs_login_with_client_secrets(self, mock_create, mock_build, tmp_path):
        GoogleCalendarClient(client_secrets_file="secrets.json", token_path=tmp_path / "t.json")
        mock_create.assert_called_once_with("secrets.json", tmp_path / "t.json")


# ---------------------------------------------------------------------------
# list_calendars / list_events
# ---------------------------------------------------------------------------


class TestListCalendars:
    @pytest.mark.asyncio
    async def test_returns_all(self, client, mock_service, google_calendar_list):
        mock_service.calendarList.return_value.list.return_value.execute.return_value = (
            google_calendar_list
        )
        calendars = await client.list_calendars()
        assert [c["id"] for c in calendars] == ["primary-id", "gym-id"]

    @pytest.mark.asyncio
    async def test_filters_by_calendar_ids(self, mock_service, google_calendar_list):
        mock_service.calendarList.return_value.list.return_value.execute.return_value = (
            google_calendar_list
        )
        client = GoogleCalendarClient.from_service(mock_service, calendar_ids=["gym-id"])
        calendars = await client.list_calendars()
        assert [c["id"] for c in calendars] == ["gym-id"]

    @pytest.mark.asyncio
    async def test_follows_page_tokens(self, client, mock_service):
        mock_service.calendarList.return_value.list.return_value.execute.side_effect = [
            {"items": [{"id": "a"}], "nextPageToken": "next"},
            {"items": [{"id": "b"}]},
        ]
        calendars = await client.list_calendars()
        assert [c["id"] for c in calendars] == ["a", "b"]
        mock_service.calendarList.return_value.list.assert_called_with(pageToken="next")


class TestListEvents:
    @pytest.mark.asyncio
    async def test_maps_events_across_calendars(self, client, populated_service):
        events = await client.list_events(START, END)
        assert [e.id for e in events] == ["7h2k9abc", "allday1"]
        assert [e.calendar_name for e in events] == ["Personal", "Gym"]

    @pytest.mark.asyncio
    async def test_requests_expanded_occurrences(self, client, populated_service):
        await client.list_events(START, END)
        calls = populated_service.events.return_value.list.call_args_list
        assert len(calls) == 3
        first = calls[0].kwargs
        assert first["calendarId"] == "primary-id"
        assert first["timeMin"] == "2025-03-16T07:00:00+00:00"
        assert first["timeMax"] == "2025-03-31T07:00:00+00:00"
        assert first["singleEvents"] is True
        assert first["orderBy"] == "startTime"
        assert "pageToken" not in first
        assert calls[1].kwargs["pageToken"] == "page-2"
        assert calls[2].kwargs["calendarId"] == "gym-id"

    @pytest.mark.asyncio
    async def test_forbidden_raises_permission_error(self, client, mock_service):
        mock_service.calendarList.return_value.list.return_value.execute.side_effect = (
            _api_error(403, "Forbidden")
        )
        with pytest.raises(CalendarPermissionError) as exc_info:
            await client.list_events(START, END)
        assert isinstance(exc_info.value, PermissionDenied)
        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_server_error_raises_api_error(self, client, mock_service):
        mock_service.calendarList.return_value.list.return_value.execute.side_effect = (
            _api_error(500, "Backend Error")
        )
        with pytest.raises(CalendarAPIError) as exc_info:
            await client.list_events(START, END)
        assert not isinstance(exc_info.value, PermissionDenied)
        assert exc_info.value.status_code == 500


# ---------------------------------------------------------------------------
# delete_event
# ---------------------------------------------------------------------------


class TestDeleteEvent:
    @pytest.mark.asyncio
    async def test_deletes_from_owning_calendar(self, client, populated_service):
        await client.list_events(START, END)
        assert await client.delete_event("allday1") is True
        populated_service.events.return_value.delete.assert_called_once_with(
            calendarId="gym-id", eventId="allday1"
        )

    @pytest.mark.asyncio
    async def test_relisting_forgets_events_outside_window(
        self, client, populated_service, google_timed_event, google_all_day_event
    ):
        populated_service.events.return_value.list.return_value.execute.side_effect = [
            {"items": [google_timed_event]},
            {"items": [google_all_day_event]},
            {"items": [google_timed_event]},
            {"items": []},
        ]
        await client.list_events(START, END)
        await client.list_events(START, END)

        assert client._event_calendars == {"7h2k9abc": "primary-id"}
        assert await client.delete_event("allday1") is True
        populated_service.events.return_value.delete.assert_called_once_with(
            calendarId="primary", eventId="allday1"
        )

    @pytest.mark.asyncio
    async def test_unknown_event_uses_primary(self, client, mock_service):
        assert await client.delete_event("elsewhere") is True
        mock_service.events.return_value.delete.assert_called_once_with(
            calendarId="primary", eventId="elsewhere"
        )

    @pytest.mark.asyncio
    async def test_already_gone_returns_false(self, client, mock_service):
        mock_service.events.return_value.delete.return_value.execute.side_effect = (
            _api_error(410, "Resource has been deleted")
        )
        assert await client.delete_event("gone") is False

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, client, mock_service):
        mock_service.events.return_value.delete.return_value.execute.side_effect = (
            _api_error(500)
        )
        with pytest.raises(CalendarAPIError):
            await client.delete_event("evt")

    @pytest.mark.asyncio
    async def test_empty_id_returns_false(self, client, mock_service):
        assert await client.delete_event("") is False
        mock_service.events.return_value.delete.assert_not_called()


# ---------------------------------------------------------------------------
# _safe_call retry logic
# ---------------------------------------------------------------------------


class TestSafeCall:
    @patch("calendar_client.client.time.sleep")
    def test_retries_on_429(self, mock_sleep, client):
        fn = MagicMock(side_effect=[_api_error(429), {"ok": True}])
        assert client._safe_call(fn) == {"ok": True}
        mock_sleep.assert_called_once_with(2)

    @patch("calendar_client.client.time.sleep")
    def test_gives_up_after_max_retries(self, mock_sleep, client):
        fn = MagicMock(side_effect=_api_error(429))
        with pytest.raises(CalendarRateLimitError):
            client._safe_call(fn)
        assert fn.call_count == 3
        assert mock_sleep.call_args_list == [call(2), call(4), call(8)]

    @patch("calendar_client.client.time.sleep")
    def test_no_retry_on_other_errors(self, mock_sleep, client):
        fn = MagicMock(side_effect=_api_error(400))
        with pytest.raises(CalendarAPIError):
            client._safe_call(fn)
        mock_sleep.assert_not_called()

    def test_unauthorized_maps_to_permission_error(self, client):
        fn = MagicMock(side_effect=_api_error(401))
        with pytest.raises(CalendarPermissionError):
            client._safe_call(fn)


class TestHelpers:
    def test_status_from_response_object(self):
        exc = Exception("Not Found")
        exc.resp = SimpleNamespace(status="404")
        assert _status_of(exc) == 404

    def test_status_missing(self):
        assert _status_of(ValueError("bad")) is None

    def test_rfc3339_naive_is_utc(self):
        assert _rfc3339(datetime(2025, 3, 17, 8, 0)) == "2025-03-17T08:00:00+00:00"

"""Custom exception hierarchy for the calendar client."""

from __future__ import annotations

from workout_feed.exceptions import PermissionDenied


class CalendarClientError(Exception):
    """Base exception for all calendar_client errors."""


class CalendarAuthError(CalendarClientError):
    """Authentication failed (missing, expired or revoked credentials)."""


class CalendarAPIError(CalendarClientError):
    """A Calendar API call returned an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CalendarRateLimitError(CalendarAPIError):
    """HTTP 429 — too many requests."""

    def __init__(self, message: str = "Rate limited by the Calendar API") -> None:
        super().__init__(message, status_code=429)


class CalendarPermissionError(CalendarAPIError, PermissionDenied):
    """HTTP 401/403 — calendar access was not granted."""

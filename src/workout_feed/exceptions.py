"""Error taxonomy for the workout feed.

Only the I/O boundary (fetching and deleting calendar events) raises;
classification and extraction degrade to defaults instead.
"""

from __future__ import annotations


class WorkoutFeedError(Exception):
    """Base exception for all workout_feed errors."""


class PermissionDenied(WorkoutFeedError):
    """Calendar access has not been granted."""


class FetchFailure(WorkoutFeedError):
    """The calendar source failed while listing events."""


class DeleteFailure(WorkoutFeedError):
    """The calendar source did not confirm an event deletion."""

    def __init__(self, message: str, workout_id: str | None = None) -> None:
        super().__init__(message)
        self.workout_id = workout_id

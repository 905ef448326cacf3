"""Workout feed — turns calendar events into a deduplicated workout list."""

from workout_feed.classifier import EventClassifier
from workout_feed.dedup import dedup_key, dedupe
from workout_feed.exceptions import (
    DeleteFailure,
    FetchFailure,
    PermissionDenied,
    WorkoutFeedError,
)
from workout_feed.extraction import WorkoutExtractor, extract
from workout_feed.models import RawEvent, RefreshStatus, Workout
from workout_feed.session import SessionCache
from workout_feed.source import CalendarSource

__all__ = [
    "CalendarSource",
    "DeleteFailure",
    "EventClassifier",
    "FetchFailure",
    "PermissionDenied",
    "RawEvent",
    "RefreshStatus",
    "SessionCache",
    "Workout",
    "WorkoutExtractor",
    "WorkoutFeedError",
    "dedup_key",
    "dedupe",
    "extract",
]

"""Workout — the normalized, display-ready form of a calendar event."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from workout_feed.models.enums import (
    DEFAULT_PLATFORM,
    SELF_AVATAR_REF,
    SELF_PARTICIPANT_ID,
    SELF_PARTICIPANT_NAME,
)


@dataclass(frozen=True)
class Participant:
    """Someone attending a workout."""

    id: str
    name: str
    avatar_ref: str


SELF_PARTICIPANT = Participant(
    id=SELF_PARTICIPANT_ID,
    name=SELF_PARTICIPANT_NAME,
    avatar_ref=SELF_AVATAR_REF,
)


@dataclass(frozen=True)
class Workout:
    """Feed entry produced by the WorkoutExtractor.

    ``id`` is unique per occurrence (source event id plus start time), so
    recurring events sharing one calendar id stay distinguishable.
    ``source_event_id`` points back at the RawEvent and is only used to
    ask the calendar to delete it.
    """

    id: str
    title: str
    time: str
    date: str
    raw_date: datetime | None
    location: str
    type: str
    intensity: str
    duration: str
    description: str
    source_event_id: str
    participants: tuple[Participant, ...] = (SELF_PARTICIPANT,)
    platforms: tuple[str, ...] = (DEFAULT_PLATFORM,)

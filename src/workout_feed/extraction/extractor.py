"""WorkoutExtractor — turns an included RawEvent into a display Workout."""

from __future__ import annotations

from datetime import tzinfo

from workout_feed.extraction.description_builder import build_description
from workout_feed.extraction.formatting import (
    epoch_millis,
    format_date,
    format_duration,
    format_time,
    to_local,
)
from workout_feed.extraction.intensity import infer_intensity
from workout_feed.extraction.platform import detect_platform, extract_location
from workout_feed.extraction.workout_type import infer_workout_type
from workout_feed.models.enums import DEFAULT_PLATFORM, WORKOUT_ID_PREFIX
from workout_feed.models.raw_event import RawEvent
from workout_feed.models.workout import SELF_PARTICIPANT, Workout


def workout_id_for(event: RawEvent) -> str:
    """Feed id for an event occurrence: source id plus start time."""
    if event.start_time is None:
        return f"{WORKOUT_ID_PREFIX}-{event.id}"
    return f"{WORKOUT_ID_PREFIX}-{event.id}-{epoch_millis(event.start_time)}"


class WorkoutExtractor:
    """Derives every Workout display field from a classified event.

    Usage::

        extractor = WorkoutExtractor()
        workout = extractor.extract(event)
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz

    def extract(self, event: RawEvent) -> Workout:
        """Build the Workout for *event*.

        Algorithm:
        1. Detect the source platform from title, notes and location
        2. Derive the location (ClassPass titles carry the studio name)
        3. Infer the workout type from the title
        4. Compute the duration from start and end, if both are known
        5. Infer intensity from keywords, else from the workout type
        6. Use the notes as description, else generate one
        7. Format the start time and date for display

        Pure: never mutates *event* and never raises on missing fields.
        """
        platform = detect_platform(event)
        location = extract_location(event, platform)
        workout_type = infer_workout_type(event.title)
        duration = format_duration(event.start_time, event.end_time)
        intensity = infer_intensity(event.title, event.notes, workout_type)

        start = to_local(event.start_time, self.tz) if event.start_time else None
        date_str = format_date(start)

        return Workout(
            id=workout_id_for(event),
            title=event.title or "",
            time=format_time(start),
            date=date_str,
            raw_date=event.start_time,
            location=location,
            type=workout_type,
            intensity=intensity.value,
            duration=duration,
            description=build_description(
                event.notes, workout_type, date_str, intensity, duration
            ),
            source_event_id=event.id,
            participants=(SELF_PARTICIPANT,),
            platforms=(platform or DEFAULT_PLATFORM,),
        )


_default_extractor = WorkoutExtractor()


def extract(event: RawEvent) -> Workout:
    """Extract a Workout with the default (no timezone conversion) extractor."""
    return _default_extractor.extract(event)

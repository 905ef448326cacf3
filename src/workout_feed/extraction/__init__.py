"""Field extraction — derives Workout display fields from calendar events."""

from workout_feed.extraction.extractor import WorkoutExtractor, extract, workout_id_for

__all__ = ["WorkoutExtractor", "extract", "workout_id_for"]

"""Workout type inference from an event title."""

from __future__ import annotations

from workout_feed.models.enums import DEFAULT_WORKOUT_TYPE
from workout_feed.models.keywords import WORKOUT_TYPE_FALLBACKS, WORKOUT_TYPES


def infer_workout_type(title: str | None) -> str:
    """Return the category label for a workout title.

    The first WORKOUT_TYPES entry contained in the title wins; otherwise a
    few activity stems are tried ("run" -> Running, ...), then "Workout".
    """
    lowered = (title or "").lower()

    for workout_type in WORKOUT_TYPES:
        if workout_type.lower() in lowered:
            return workout_type

    for stems, workout_type in WORKOUT_TYPE_FALLBACKS:
        if any(stem in lowered for stem in stems):
            return workout_type

    return DEFAULT_WORKOUT_TYPE

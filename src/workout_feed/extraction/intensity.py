"""Intensity inference from keywords, with a per-type fallback."""

from __future__ import annotations

from workout_feed.models.enums import Intensity
from workout_feed.models.keywords import (
    INTENSE_WORKOUT_TYPES,
    INTENSITY_KEYWORDS,
    LIGHT_WORKOUT_TYPES,
)


def default_intensity(workout_type: str) -> Intensity:
    """Intensity implied by the workout type alone."""
    if workout_type in INTENSE_WORKOUT_TYPES:
        return Intensity.INTENSE
    if workout_type in LIGHT_WORKOUT_TYPES:
        return Intensity.LIGHT
    return Intensity.MODERATE


def infer_intensity(title: str | None, notes: str | None, workout_type: str) -> Intensity:
    """Return the intensity bucket for a workout.

    Buckets are checked light, moderate, intense against title and notes;
    the first bucket with a keyword hit wins.
    """
    text = f"{title or ''} {notes or ''}".lower()
    for intensity, keywords in INTENSITY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return intensity
    return default_intensity(workout_type)

"""Description builder — the text shown on the workout detail screen."""

from __future__ import annotations

from workout_feed.models.enums import Intensity


def build_description(
    notes: str | None,
    workout_type: str,
    date: str,
    intensity: Intensity,
    duration: str,
) -> str:
    """Return the event notes, or a generated summary when there are none.

    The generated form reads "<Type> workout scheduled for <date>. This is
    a <intensity>-intensity session lasting <duration>." and drops the
    duration clause when the duration is unknown.
    """
    if notes:
        return notes

    session = f"This is a {intensity.value.lower()}-intensity session"
    if duration:
        session += f" lasting {duration}"
    return f"{workout_type} workout scheduled for {date}. {session}."

"""Deduplicator — collapses repeated feed entries and drops deleted ones.

Calendars often return one real-world event several times (shared and
personal calendars, overlapping subscriptions), each with its own id. The
feed therefore keys on what the user sees, title plus date plus time.
Two genuinely different sessions with the same title and start are merged
too; that is accepted behaviour.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable

from workout_feed.models.workout import Workout


def dedup_key(workout: Workout) -> str:
    """Composite key: lower-cased title + display date + display time."""
    return workout.title.lower() + workout.date + workout.time


def dedupe(
    workouts: Iterable[Workout], deleted: AbstractSet[str] = frozenset()
) -> list[Workout]:
    """Drop deleted workouts and all but the first entry per dedup key.

    Single stable pass: output order follows input order.

    Args:
        workouts: Workouts in feed order.
        deleted: Ids the user has removed this session.

    Returns:
        The surviving workouts.
    """
    seen: set[str] = set()
    kept: list[Workout] = []
    for workout in workouts:
        if workout.id in deleted:
            continue
        key = dedup_key(workout)
        if key in seen:
            continue
        seen.add(key)
        kept.append(workout)
    return kept

"""SessionCache — the feed's only stateful component.

Holds the last fetched workout list and the ids the user deleted for the
lifetime of one app session. Deletions are not persisted.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Callable

from workout_feed.classifier import EventClassifier
from workout_feed.dedup import dedupe
from workout_feed.exceptions import DeleteFailure, FetchFailure, PermissionDenied
from workout_feed.extraction.extractor import WorkoutExtractor
from workout_feed.models.enums import (
    DEFAULT_LOOKAHEAD_DAYS,
    DEFAULT_LOOKBACK_DAYS,
    RefreshStatus,
)
from workout_feed.models.raw_event import RawEvent
from workout_feed.models.workout import Workout
from workout_feed.source import CalendarSource

logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class SessionCache:
    """Owns the current workout feed for one session.

    State moves from empty to populated on the first successful refresh
    and never back; a failed or denied refresh leaves the previous list in
    place.

    Usage:
        cache = SessionCache(source)
        workouts = await cache.refresh()
        await cache.delete_workout(workouts[0].id)
    """

    def __init__(
        self,
        source: CalendarSource,
        classifier: EventClassifier | None = None,
        extractor: WorkoutExtractor | None = None,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        lookahead_days: int = DEFAULT_LOOKAHEAD_DAYS,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.source = source
        self.classifier = classifier or EventClassifier()
        self.extractor = extractor or WorkoutExtractor()
        self.lookback_days = lookback_days
        self.lookahead_days = lookahead_days
        self._clock = clock or _local_now

        self.deleted: set[str] = set()
        self.status = RefreshStatus.NOT_LOADED
        self._workouts: list[Workout] = []
        self._inflight: asyncio.Future[list[Workout]] | None = None

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    def fetch_window(self) -> tuple[datetime, datetime]:
        """Return the (start, end) range the next refresh will request."""
        now = self._clock()
        return (
            now - timedelta(days=self.lookback_days),
            now + timedelta(days=self.lookahead_days),
        )

    async def refresh(self) -> list[Workout]:
        """Fetch, classify, extract and dedupe calendar events.

        A call made while another refresh is still running joins it and
        returns the same result; only one fetch is issued.

        Returns:
            The new workout list, or ``[]`` when calendar access is denied
            (``status`` is then PERMISSION_DENIED and the cached list is
            kept).

        Raises:
            FetchFailure: the calendar source failed; state is unchanged.
        """
        if self._inflight is not None and not self._inflight.done():
            logger.debug("Refresh already in flight, joining it")
        else:
            self._inflight = asyncio.ensure_future(self._refresh())
        # Cancelling one caller must not cancel the fetch the others share.
        return list(await asyncio.shield(self._inflight))

    async def _refresh(self) -> list[Workout]:
        start, end = self.fetch_window()
        logger.info("Fetching calendar events from %s to %s", start, end)
        try:
            events = await self.source.list_events(start, end)
        except PermissionDenied as exc:
            logger.warning("Calendar permission denied: %s", exc)
            self.status = RefreshStatus.PERMISSION_DENIED
            return []
        except Exception as exc:
            logger.error("Failed to fetch calendar events: %s", exc)
            raise FetchFailure(f"Failed to fetch calendar events: {exc}") from exc

        workouts = self.build_workouts(events)
        self._workouts = workouts
        self.status = RefreshStatus.OK if workouts else RefreshStatus.NO_WORKOUTS
        logger.info("Found %d workouts in %d calendar events", len(workouts), len(events))
        return list(workouts)

    def build_workouts(self, events: list[RawEvent]) -> list[Workout]:
        """Run classify -> extract -> dedupe over *events* without storing."""
        included = [
            self.extractor.extract(event)
            for event in events
            if self.classifier.classify(event, event.calendar_name)
        ]
        return dedupe(included, self.deleted)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_current(self) -> list[Workout]:
        """Return a copy of the current workout list."""
        return list(self._workouts)

    def get(self, workout_id: str) -> Workout | None:
        """Look up a current workout by id."""
        for workout in self._workouts:
            if workout.id == workout_id:
                return workout
        return None

    # ------------------------------------------------------------------
    # Deletion
    # ------------------------------------------------------------------

    def mark_deleted(self, workout_id: str) -> None:
        """Remember *workout_id* as deleted and drop it from the feed.

        Does not touch the calendar; call only after the calendar confirmed
        the deletion (see delete_workout()).
        """
        self.deleted.add(workout_id)
        self._workouts = [w for w in self._workouts if w.id != workout_id]
        logger.info("Marked workout %s as deleted", workout_id)

    async def delete_workout(self, workout_id: str) -> None:
        """Delete a workout's calendar event, then remove it from the feed.

        Raises:
            KeyError: *workout_id* is not in the current feed.
            DeleteFailure: the calendar did not confirm the deletion; the
                workout stays in the feed.
        """
        workout = self.get(workout_id)
        if workout is None:
            raise KeyError(workout_id)

        try:
            deleted = await self.source.delete_event(workout.source_event_id)
        except Exception as exc:
            logger.error("Failed to delete calendar event %s: %s", workout.source_event_id, exc)
            raise DeleteFailure(
                f"Failed to delete calendar event: {exc}", workout_id=workout_id
            ) from exc

        if not deleted:
            logger.warning("Calendar did not delete event %s", workout.source_event_id)
            raise DeleteFailure(
                f"Calendar did not delete event {workout.source_event_id}",
                workout_id=workout_id,
            )

        self.mark_deleted(workout_id)

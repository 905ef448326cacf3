"""INCLUDE rule: events on a fitness-dedicated calendar.

A calendar the user named "Gym" or "Training" holds workouts by
definition, so this rule outranks every exclusion.
"""

from __future__ import annotations

from workout_feed.models.decision_trace import RuleMatch
from workout_feed.models.enums import RuleStage, Verdict
from workout_feed.models.keywords import FITNESS_CALENDAR_NAMES
from workout_feed.models.raw_event import RawEvent
from workout_feed.rules.base import ClassifierRule, first_contained, normalize


class FitnessCalendarRule(ClassifierRule):
    """Includes every event whose calendar name looks fitness related."""

    rule_id = "fitness_calendar"
    version = "1.0.0"
    stage = RuleStage.FITNESS_CALENDAR
    verdict = Verdict.INCLUDE

    def evaluate(self, event: RawEvent, calendar_name: str) -> RuleMatch | None:
        term = first_contained(normalize(calendar_name), FITNESS_CALENDAR_NAMES)
        if term is None:
            return None
        return self._match(
            term, f"Calendar '{calendar_name}' is a fitness calendar ('{term}')."
        )

"""INCLUDE rule: titles that say outright they are a workout."""

from __future__ import annotations

from workout_feed.models.decision_trace import RuleMatch
from workout_feed.models.enums import RuleStage, Verdict
from workout_feed.models.keywords import WORKOUT_TERMS
from workout_feed.models.raw_event import RawEvent
from workout_feed.rules.base import ClassifierRule, first_contained, normalize


class WorkoutTermRule(ClassifierRule):
    """Includes events whose title contains an explicit workout term."""

    rule_id = "workout_term"
    version = "1.0.0"
    stage = RuleStage.WORKOUT_TERM
    verdict = Verdict.INCLUDE

    def evaluate(self, event: RawEvent, calendar_name: str) -> RuleMatch | None:
        term = first_contained(normalize(event.title), WORKOUT_TERMS)
        if term is None:
            return None
        return self._match(term, f"Workout term '{term}' in title.")

"""EXCLUDE rule: meals, social plans, appointments and travel."""

from __future__ import annotations

from workout_feed.models.decision_trace import RuleMatch
from workout_feed.models.enums import RuleStage, Verdict
from workout_feed.models.keywords import PERSONAL_EVENT_TERMS
from workout_feed.models.raw_event import RawEvent
from workout_feed.rules.base import ClassifierRule, first_contained, normalize


class PersonalEventRule(ClassifierRule):
    """Excludes events whose title contains a personal-life term."""

    rule_id = "personal_event"
    version = "1.0.0"
    stage = RuleStage.PERSONAL_EXCLUSION
    verdict = Verdict.EXCLUDE

    def evaluate(self, event: RawEvent, calendar_name: str) -> RuleMatch | None:
        term = first_contained(normalize(event.title), PERSONAL_EVENT_TERMS)
        if term is None:
            return None
        return self._match(term, f"Personal event: title contains '{term}'.")

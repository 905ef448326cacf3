"""EXCLUDE rule: meetings, reviews, interviews and other work events."""

from __future__ import annotations

from workout_feed.models.decision_trace import RuleMatch
from workout_feed.models.enums import RuleStage, Verdict
from workout_feed.models.keywords import BUSINESS_EVENT_TERMS
from workout_feed.models.raw_event import RawEvent
from workout_feed.rules.base import ClassifierRule, first_contained, normalize


class BusinessEventRule(ClassifierRule):
    """Excludes events whose title contains a business term."""

    rule_id = "business_event"
    version = "1.0.0"
    stage = RuleStage.BUSINESS_EXCLUSION
    verdict = Verdict.EXCLUDE

    def evaluate(self, event: RawEvent, calendar_name: str) -> RuleMatch | None:
        term = first_contained(normalize(event.title), BUSINESS_EVENT_TERMS)
        if term is None:
            return None
        return self._match(term, f"Business event: title contains '{term}'.")

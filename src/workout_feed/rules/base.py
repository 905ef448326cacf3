"""Abstract base class for all classifier rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from workout_feed.models.decision_trace import RuleMatch
from workout_feed.models.enums import RuleStage, Verdict
from workout_feed.models.raw_event import RawEvent


def normalize(text: str | None) -> str:
    """Lower-case *text*, treating None as empty."""
    return (text or "").lower()


def first_contained(haystack: str, terms: Iterable[str]) -> str | None:
    """Return the first term contained in *haystack*, or None."""
    for term in terms:
        if term in haystack:
            return term
    return None


class ClassifierRule(ABC):
    """Base class for the event classifier's rules.

    Each rule inspects one aspect of a calendar event and either returns a
    RuleMatch carrying its verdict or None. Rules are discovered by the
    RuleRegistry and evaluated in ``stage`` order; the first match decides.

    Subclasses must define:
        rule_id: unique identifier (e.g. "business_event")
        version: semantic version string
        stage: RuleStage position in the evaluation order
        verdict: Verdict returned when the rule matches
        evaluate(): the rule's matching logic
    """

    rule_id: str
    version: str
    stage: RuleStage
    verdict: Verdict

    @abstractmethod
    def evaluate(self, event: RawEvent, calendar_name: str) -> RuleMatch | None:
        """Match this rule against an event.

        Args:
            event: The calendar event being classified.
            calendar_name: Name of the calendar owning the event.

        Returns:
            A RuleMatch if the rule applies, otherwise None.
        """
        ...

    def _match(self, term: str, explanation: str) -> RuleMatch:
        return RuleMatch(
            rule_id=self.rule_id,
            stage=self.stage,
            verdict=self.verdict,
            matched_term=term,
            explanation=explanation,
        )

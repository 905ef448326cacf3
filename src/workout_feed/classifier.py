"""EventClassifier — decides whether a calendar event is a workout."""

from __future__ import annotations

import logging

from workout_feed.models.decision_trace import (
    ClassificationTrace,
    RuleResult,
    RuleStatus,
)
from workout_feed.models.enums import Verdict
from workout_feed.models.raw_event import RawEvent
from workout_feed.registry import RuleRegistry

logger = logging.getLogger(__name__)

DEFAULT_VERDICT = Verdict.EXCLUDE


class EventClassifier:
    """Evaluates the ordered classifier rules against calendar events.

    Rules run in RuleStage order and the first one that matches decides;
    when none match the event is excluded. Classification never raises on
    missing fields.

    Usage:
        classifier = EventClassifier()
        if classifier.classify(event):
            ...
        trace = classifier.explain(event)
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or RuleRegistry()

        # Auto-discover rules if using default registry
        if registry is None:
            self.registry.discover_rules()

    def classify(self, event: RawEvent, calendar_name: str | None = None) -> bool:
        """Return True when *event* should appear in the workout feed.

        Args:
            event: The calendar event to classify.
            calendar_name: Owning calendar's name. Defaults to
                ``event.calendar_name``.
        """
        return self.explain(event, calendar_name).included

    def explain(
        self, event: RawEvent, calendar_name: str | None = None
    ) -> ClassificationTrace:
        """Classify *event* and return the full decision trace."""
        if calendar_name is None:
            calendar_name = event.calendar_name or ""

        results: list[RuleResult] = []
        decided_by = None
        verdict = DEFAULT_VERDICT

        for rule in self.registry.get_all_rules():
            if decided_by is not None:
                results.append(RuleResult(rule_id=rule.rule_id, status=RuleStatus.SKIPPED))
                continue

            match = rule.evaluate(event, calendar_name)
            if match is None:
                results.append(RuleResult(rule_id=rule.rule_id, status=RuleStatus.NO_MATCH))
                continue

            results.append(
                RuleResult(rule_id=rule.rule_id, status=RuleStatus.FIRED, match=match)
            )
            decided_by = rule.rule_id
            verdict = match.verdict
            logger.debug(
                "%s %r: %s",
                "Included" if verdict == Verdict.INCLUDE else "Excluded",
                event.title,
                match.explanation,
            )

        if decided_by is None:
            logger.debug("Excluded %r by default: no rule matched", event.title)

        return ClassificationTrace(
            event_id=event.id,
            verdict=verdict,
            rule_results=tuple(results),
            deciding_rule_id=decided_by,
        )

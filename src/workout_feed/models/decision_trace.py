"""Classification trace — audit trail of how an event was classified."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from workout_feed.models.enums import RuleStage, Verdict


class RuleStatus(IntEnum):
    """Whether a rule decided the event, matched nothing, or never ran."""

    FIRED = auto()
    NO_MATCH = auto()
    SKIPPED = auto()


@dataclass(frozen=True)
class RuleMatch:
    """What a single rule says about an event when it matches."""

    rule_id: str
    stage: RuleStage
    verdict: Verdict
    matched_term: str
    explanation: str = ""


@dataclass(frozen=True)
class RuleResult:
    """Record of one rule's evaluation during a classification."""

    rule_id: str
    status: RuleStatus
    match: RuleMatch | None = None


@dataclass(frozen=True)
class ClassificationTrace:
    """Complete record of one EventClassifier.explain() call.

    ``deciding_rule_id`` is None when no rule matched and the default
    verdict (EXCLUDE) applied.
    """

    event_id: str
    verdict: Verdict
    rule_results: tuple[RuleResult, ...] = field(default_factory=tuple)
    deciding_rule_id: str | None = None

    @property
    def included(self) -> bool:
        return self.verdict == Verdict.INCLUDE

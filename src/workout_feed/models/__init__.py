"""Data models for the workout feed."""

from workout_feed.models.decision_trace import (
    ClassificationTrace,
    RuleMatch,
    RuleResult,
    RuleStatus,
)
from workout_feed.models.enums import Intensity, RefreshStatus, RuleStage, Verdict
from workout_feed.models.raw_event import RawEvent
from workout_feed.models.workout import SELF_PARTICIPANT, Participant, Workout

__all__ = [
    "ClassificationTrace",
    "Intensity",
    "Participant",
    "RawEvent",
    "RefreshStatus",
    "RuleMatch",
    "RuleResult",
    "RuleStage",
    "RuleStatus",
    "SELF_PARTICIPANT",
    "Verdict",
    "Workout",
]

"""INCLUDE rule: short activity titles such as "Spin", "Morning run" or
"Upper Body Set".

For each name, in table order, the title is tried as an exact match, a
"<name> ..." prefix, a time-of-day prefix ("morning <name>") and finally
as a plain substring. The first name with any kind of hit decides.
"""

from __future__ import annotations

from workout_feed.models.decision_trace import RuleMatch
from workout_feed.models.enums import RuleStage, Verdict
from workout_feed.models.keywords import SIMPLE_WORKOUT_NAMES, TIME_PREFIXES
from workout_feed.models.raw_event import RawEvent
from workout_feed.rules.base import ClassifierRule, normalize


def match_kind(title: str, name: str) -> str | None:
    """Describe how *name* occurs in the lower-cased *title*, or None."""
    if title == name:
        return "exact"
    if title.startswith(name + " "):
        return "prefix"
    for prefix in TIME_PREFIXES:
        phrase = f"{prefix} {name}"
        if title == phrase or title.startswith(phrase + " "):
            return "time-prefixed"
    if name in title:
        return "compound"
    return None


class SimpleWorkoutNameRule(ClassifierRule):
    """Includes events titled with a plain activity or body-part name."""

    rule_id = "simple_workout_name"
    version = "1.0.0"
    stage = RuleStage.SIMPLE_WORKOUT_NAME
    verdict = Verdict.INCLUDE

    def evaluate(self, event: RawEvent, calendar_name: str) -> RuleMatch | None:
        title = normalize(event.title)
        if not title:
            return None
        for name in SIMPLE_WORKOUT_NAMES:
            kind = match_kind(title, name)
            if kind is not None:
                return self._match(name, f"Simple workout name '{name}' ({kind} match).")
        return None

"""INCLUDE rule: gym chains, boutique studios and class formats.

Checked against both title and location, since studio bookings often
carry the venue only in the location field.
"""

from __future__ import annotations

from workout_feed.models.decision_trace import RuleMatch
from workout_feed.models.enums import RuleStage, Verdict
from workout_feed.models.keywords import FITNESS_VENUES
from workout_feed.models.raw_event import RawEvent
from workout_feed.rules.base import ClassifierRule, normalize


class FitnessVenueRule(ClassifierRule):
    """Includes events held at (or named after) a known fitness venue."""

    rule_id = "fitness_venue"
    version = "1.0.0"
    stage = RuleStage.FITNESS_VENUE
    verdict = Verdict.INCLUDE

    def evaluate(self, event: RawEvent, calendar_name: str) -> RuleMatch | None:
        title = normalize(event.title)
        location = normalize(event.location)
        for venue in FITNESS_VENUES:
            if venue in title:
                return self._match(venue, f"Fitness venue '{venue}' in title.")
            if venue in location:
                return self._match(venue, f"Fitness venue '{venue}' in location.")
        return None

"""Enumerations and constants for the workout feed.

Window sizes and display defaults match the mobile app the feed was built
for.
"""

from enum import Enum, IntEnum, auto


class Verdict(IntEnum):
    """Outcome of classifying a calendar event."""

    INCLUDE = auto()
    EXCLUDE = auto()


class RuleStage(IntEnum):
    """Classifier rule positions — lower value is evaluated first.

    Exclusion stages sit ahead of the weaker inclusion heuristics so that a
    meeting or a meal is never mistaken for a workout.
    """

    FITNESS_CALENDAR = 1
    BUSINESS_EXCLUSION = 2
    PERSONAL_EXCLUSION = 3
    FITNESS_VENUE = 4
    WORKOUT_TERM = 5
    SIMPLE_WORKOUT_NAME = 6


class Intensity(str, Enum):
    """Display intensity of a workout."""

    LIGHT = "Light"
    MODERATE = "Moderate"
    INTENSE = "Intense"


class RefreshStatus(IntEnum):
    """Outcome of the most recent SessionCache.refresh() call."""

    NOT_LOADED = auto()
    OK = auto()
    NO_WORKOUTS = auto()
    PERMISSION_DENIED = auto()


# ---------------------------------------------------------------------------
# Fetch window
# ---------------------------------------------------------------------------
# One day of slack before "now" so today's early events survive timezone
# rounding on the calendar side.
DEFAULT_LOOKBACK_DAYS = 1
DEFAULT_LOOKAHEAD_DAYS = 14

# ---------------------------------------------------------------------------
# Display defaults
# ---------------------------------------------------------------------------
DEFAULT_PLATFORM = "Calendar"
DEFAULT_WORKOUT_TYPE = "Workout"
NO_LOCATION = "No location"
HOME_WORKOUT_LOCATION = "Home Workout"
WORKOUT_ID_PREFIX = "cal"

SELF_PARTICIPANT_ID = "1"
SELF_PARTICIPANT_NAME = "You"
SELF_AVATAR_REF = "https://i.pravatar.cc/150?img=1"

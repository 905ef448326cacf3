"""Static keyword tables used by the classifier and the field extractor.

All matching against these tables is case-insensitive substring
containment. Order matters wherever a table is scanned for a first match.
"""

from __future__ import annotations

from workout_feed.models.enums import Intensity

# ---------------------------------------------------------------------------
# Classifier tables
# ---------------------------------------------------------------------------

FITNESS_CALENDAR_NAMES: tuple[str, ...] = (
    "fitness", "workout", "gym", "exercise", "training", "health",
)

BUSINESS_EVENT_TERMS: tuple[str, ...] = (
    # Regular meetings
    "weeklies", "weekly", "meeting", "sync", "1:1", "one-on-one", "standup",
    "scrum", "sprint", "huddle", "check-in", "alignment", "status",
    # Communication
    "interview", "call", "chat", "discussion", "conversation", "debrief",
    "presentation", "demo", "workshop", "training", "onboarding",
    # Planning and review
    "brand", "tasting", "review", "planning", "retro", "retrospective",
    "strategy", "roadmap", "brainstorm", "ideation", "kickoff",
    # General business terms
    "deadline", "project", "client", "stakeholder", "vendor", "partner",
)

PERSONAL_EVENT_TERMS: tuple[str, ...] = (
    # Meals and social gatherings
    "lunch", "dinner", "breakfast", "brunch", "coffee", "drinks", "happy hour",
    "party", "celebration", "gathering", "meetup", "hangout", "date", "social",
    # Personal appointments
    "birthday", "anniversary", "doctor", "dentist", "appointment", "haircut",
    "salon", "spa", "massage", "therapy", "counseling",
    # Travel and events
    "flight", "trip", "vacation", "concert", "movie", "show", "theater",
    # General social terms
    "catch-up", "hang", "meet", "visit",
)

FITNESS_VENUES: tuple[str, ...] = (
    # Gym chains
    "equinox", "soulcycle", "peloton", "orangetheory", "barry's", "barrys",
    "f45", "crunch", "lifetime", "ymca", "planet fitness", "la fitness",
    "24 hour fitness", "gold's gym", "anytime fitness", "fitness first",
    # Boutique studios
    "solidcore", "pure barre", "club pilates", "corepower", "rumble",
    "flywheel", "cyclebar", "row house", "boxing", "kickboxing",
    # Activities and classes
    "yoga", "pilates", "cycling", "run club", "crossfit", "zumba",
    "bootcamp", "hiit class", "spin class", "barre", "reformer",
    "trx", "circuit training", "personal training", "pt session",
)

WORKOUT_TERMS: tuple[str, ...] = (
    "workout", "class", "training", "gym", "fitness", "exercise",
)

SIMPLE_WORKOUT_NAMES: tuple[str, ...] = (
    "spin", "run", "running", "swim", "swimming", "hike", "hiking",
    "walk", "walking", "bike", "biking", "cycle", "cycling", "lift",
    "lifting", "weights", "cardio", "hiit", "yoga", "pilates",
    # Body part specific
    "upper body", "lower body", "core", "abs", "leg day", "arm day",
    "chest", "back", "shoulders", "arms", "legs", "glutes",
    # Workout styles
    "set", "circuit", "strength", "conditioning", "mobility", "stretch",
    "functional", "bodyweight", "resistance", "endurance",
)

TIME_PREFIXES: tuple[str, ...] = (
    "morning", "evening", "afternoon", "night", "daily", "weekly",
)

# ---------------------------------------------------------------------------
# Extractor tables
# ---------------------------------------------------------------------------

# (display name, keywords) pairs; the first platform with a keyword hit wins.
PLATFORM_IDENTIFIERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("ClassPass", ("classpass", "class pass")),
    ("Strava", ("strava",)),
    ("MindBody", ("mindbody", "mind body")),
    ("Peloton", ("peloton",)),
    ("Nike Training Club", ("nike", "ntc")),
    ("Equinox+", ("equinox",)),
    ("Barry's", ("barry", "barrys")),
    ("SoulCycle", ("soul", "soulcycle")),
)

WORKOUT_TYPES: tuple[str, ...] = (
    "Strength", "Cardio", "HIIT", "Yoga", "Running", "Cycling",
    "Swimming", "CrossFit", "Pilates", "Boxing", "Kickboxing",
    "Zumba", "Barre", "Stretching", "Core", "Abs", "Legs", "Arms",
    "Upper Body", "Lower Body", "Full Body",
)

# Secondary title keywords when no WORKOUT_TYPES entry matched.
WORKOUT_TYPE_FALLBACKS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("run",), "Running"),
    (("bike", "cycle"), "Cycling"),
    (("swim",), "Swimming"),
    (("lift", "weight"), "Strength"),
)

INTENSITY_KEYWORDS: tuple[tuple[Intensity, tuple[str, ...]], ...] = (
    (Intensity.LIGHT, ("light", "easy", "beginner", "recovery")),
    (Intensity.MODERATE, ("moderate", "medium", "intermediate")),
    (Intensity.INTENSE, ("intense", "hard", "advanced", "heavy", "power", "hiit")),
)

INTENSE_WORKOUT_TYPES = frozenset({"HIIT", "CrossFit", "Boxing", "Kickboxing"})
LIGHT_WORKOUT_TYPES = frozenset({"Yoga", "Stretching", "Barre"})

# ---------------------------------------------------------------------------
# Broad workout vocabulary
# ---------------------------------------------------------------------------
# Wider than the classifier tables; used by the presentation layer to
# highlight and filter the feed. The classifier deliberately ignores it.
WORKOUT_KEYWORDS: tuple[str, ...] = (
    # General
    "workout", "gym", "fitness", "exercise", "training", "class",
    # Cardio
    "spin", "spinning", "cycle", "cycling", "ride", "run", "running",
    "cardio", "hiit", "tread", "treadmill", "row", "rowing",
    "swim", "swimming", "elliptical", "stairmaster",
    # Strength
    "strength", "weights", "lifting", "powerlifting",
    "crossfit", "circuit", "bootcamp", "boot camp",
    "resistance", "conditioning", "functional",
    # Mind-body and flexibility
    "yoga", "pilates", "barre", "stretch", "flexibility",
    "meditation", "mindfulness", "recovery",
    # Dance and rhythm
    "zumba", "dance", "rhythm", "aerobics",
    # Combat sports
    "boxing", "kickboxing", "mma", "martial arts",
    "karate", "jiu jitsu", "muay thai",
    # Sports and recreation
    "tennis", "basketball", "volleyball", "soccer",
    "climbing", "rock climbing", "bouldering",
    # Studios
    "equinox", "soulcycle", "peloton", "orangetheory",
    "barry's", "barrys", "f45", "crunch", "24 hour",
    "lifetime", "ymca", "planet fitness", "la fitness",
    # Class types
    "beginner", "intermediate", "advanced",
    "express", "power", "flow", "core", "sculpt",
    "tone", "burn", "shred", "endurance",
)

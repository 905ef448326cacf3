"""Utility helpers bridging the Streamlit UI and the workout feed.

Pure functions for formatting, grouping, sample data generation and
table construction.
"""

from __future__ import annotations

import html
from collections import OrderedDict
from datetime import datetime, timedelta

import pandas as pd

from workout_feed.models.enums import Intensity
from workout_feed.models.keywords import WORKOUT_KEYWORDS
from workout_feed.models.raw_event import RawEvent
from workout_feed.models.workout import Workout

INTENSITY_COLORS: dict[str, str] = {
    Intensity.LIGHT.value: "#D1FAE5",
    Intensity.MODERATE.value: "#FEF3C7",
    Intensity.INTENSE.value: "#FEE2E2",
}

PLATFORM_ICONS: dict[str, str] = {
    "ClassPass": "🎟️",
    "Strava": "🧡",
    "MindBody": "🧘",
    "Peloton": "🚴",
    "Nike Training Club": "✔️",
    "Equinox+": "🏛️",
    "Barry's": "🔥",
    "SoulCycle": "🌀",
    "Calendar": "📅",
}


# ---------------------------------------------------------------------------
# Ordering and grouping
# ---------------------------------------------------------------------------


def sort_by_date(workouts: list[Workout]) -> list[Workout]:
    """Chronological order; workouts without a start time go last."""
    return sorted(
        workouts,
        key=lambda w: (w.raw_date is None, w.raw_date.timestamp() if w.raw_date else 0.0),
    )


def group_by_date(workouts: list[Workout]) -> "OrderedDict[str, list[Workout]]":
    """Group chronologically sorted workouts under their display date."""
    groups: "OrderedDict[str, list[Workout]]" = OrderedDict()
    for workout in sort_by_date(workouts):
        groups.setdefault(workout.date or "Unscheduled", []).append(workout)
    return groups


def matches_search(workout: Workout, query: str) -> bool:
    """Case-insensitive search over title, type, location and platforms."""
    query = query.strip().lower()
    if not query:
        return True
    haystack = " ".join(
        [workout.title, workout.type, workout.location, *workout.platforms]
    ).lower()
    return query in haystack


def workout_keywords(workout: Workout) -> list[str]:
    """Vocabulary terms found in a workout title, for tag chips."""
    title = workout.title.lower()
    return [kw for kw in WORKOUT_KEYWORDS if kw in title]


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def workouts_to_frame(workouts: list[Workout]) -> pd.DataFrame:
    """Tabular view of the feed, one row per workout."""
    rows = [
        {
            "Date": w.date,
            "Time": w.time,
            "Workout": w.title,
            "Type": w.type,
            "Intensity": w.intensity,
            "Duration": w.duration,
            "Location": w.location,
            "Platform": ", ".join(w.platforms),
        }
        for w in sort_by_date(workouts)
    ]
    columns = ["Date", "Time", "Workout", "Type", "Intensity", "Duration", "Location", "Platform"]
    return pd.DataFrame(rows, columns=columns)


def format_platforms(platforms: tuple[str, ...]) -> str:
    """e.g. ('SoulCycle',) -> '🌀 SoulCycle'."""
    return " · ".join(f"{PLATFORM_ICONS.get(p, '')} {p}".strip() for p in platforms)


def card_html(workout: Workout) -> str:
    """HTML for one feed card. All event text is HTML-escaped."""
    color = INTENSITY_COLORS.get(workout.intensity, "#F3F4F6")
    details = " · ".join(
        html.escape(part) for part in (workout.time, workout.duration or "--", workout.location)
    )
    return (
        f'<div style="background:{color};padding:10px 14px;border-radius:8px;">'
        f"<strong>{html.escape(workout.title)}</strong><br>"
        f"{details}<br>"
        f"<small>{html.escape(format_platforms(workout.platforms))}</small></div>"
    )


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


def build_sample_events(now: datetime | None = None) -> list[RawEvent]:
    """A realistic two-week calendar mixing workouts with everyday noise."""
    now = now or datetime.now().astimezone()
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)

    def at(day: int, hour: int, minute: int = 0) -> datetime:
        return today + timedelta(days=day, hours=hour, minutes=minute)

    return [
        RawEvent(id="evt-1", title="SoulCycle Ride", location="SoulCycle NoHo",
                 start_time=at(0, 7), end_time=at(0, 7, 45), calendar_name="Personal"),
        RawEvent(id="evt-2", title="Team Sync", start_time=at(0, 10),
                 end_time=at(0, 10, 30), calendar_name="Work"),
        RawEvent(id="evt-3", title="Morning Yoga", start_time=at(1, 8),
                 end_time=at(1, 9), calendar_name="Personal"),
        RawEvent(id="evt-4", title="Morning Yoga", start_time=at(1, 8),
                 end_time=at(1, 9), calendar_name="Family"),
        RawEvent(id="evt-5", title="Lunch with Sam", start_time=at(1, 12),
                 end_time=at(1, 13), calendar_name="Personal"),
        RawEvent(id="evt-6", title="Power Pilates at Studio Zen - Midtown",
                 notes="Booked via ClassPass", start_time=at(2, 18),
                 end_time=at(2, 18, 50), calendar_name="Personal"),
        RawEvent(id="evt-7", title="Long run", notes="Easy pace along the river",
                 start_time=at(3, 6, 30), end_time=at(3, 8), calendar_name="Personal"),
        RawEvent(id="evt-8", title="Leg Day", start_time=at(4, 17, 30),
                 end_time=at(4, 18, 30), calendar_name="Gym"),
        RawEvent(id="evt-9", title="Dentist", start_time=at(5, 9),
                 end_time=at(5, 10), calendar_name="Personal"),
        RawEvent(id="evt-10", title="HIIT Class", location="Barry's Chelsea",
                 start_time=at(6, 7), end_time=at(6, 7, 50), calendar_name="Personal"),
        RawEvent(id="evt-11", title="Sprint Planning", start_time=at(7, 11),
                 end_time=at(7, 12), calendar_name="Work"),
        RawEvent(id="evt-12", title="Evening Swim", start_time=at(9, 19),
                 end_time=at(9, 19, 45), calendar_name="Personal"),
    ]

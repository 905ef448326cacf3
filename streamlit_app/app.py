"""Workout Feed — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py

Set FEED_DEMO_MODE=0 and point GOOGLE_CLIENT_SECRETS at an OAuth client
file to read your Google calendars instead of the sample calendar.
"""

from __future__ import annotations

import asyncio
import logging

import streamlit as st

from calendar_client import (
    CalendarAuthError,
    GoogleCalendarClient,
    InMemoryCalendarSource,
)
from calendar_client.auth import clear_tokens
from workout_feed import DeleteFailure, FetchFailure, RefreshStatus, SessionCache

import config
from helpers import (
    build_sample_events,
    card_html,
    group_by_date,
    matches_search,
    workout_keywords,
    workouts_to_frame,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Workout Feed",
    page_icon="🏋️",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Session cache
# ---------------------------------------------------------------------------


def _make_cache() -> SessionCache:
    if config.FEED_DEMO_MODE:
        source = InMemoryCalendarSource(build_sample_events())
    else:
        source = GoogleCalendarClient(
            client_secrets_file=config.GOOGLE_CLIENT_SECRETS,
            token_path=config.GOOGLE_TOKEN_PATH,
        )
    return SessionCache(
        source,
        lookback_days=config.FEED_LOOKBACK_DAYS,
        lookahead_days=config.FEED_LOOKAHEAD_DAYS,
    )


def get_cache() -> SessionCache | None:
    if "cache" not in st.session_state:
        try:
            st.session_state.cache = _make_cache()
        except CalendarAuthError as exc:
            st.error(f"Google sign-in failed: {exc}")
            return None
    return st.session_state.cache


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _render_card(cache: SessionCache, workout) -> None:
    st.markdown(card_html(workout), unsafe_allow_html=True)

    with st.expander("Details"):
        st.markdown(f"**Type:** {workout.type}  \n**Intensity:** {workout.intensity}")
        st.markdown(
            "**Participants:** " + ", ".join(p.name for p in workout.participants)
        )
        tags = workout_keywords(workout)
        if tags:
            st.caption(" ".join(f"#{t.replace(' ', '')}" for t in tags))
        st.write(workout.description)

        confirm = st.checkbox("Also remove from my calendar", key=f"confirm-{workout.id}")
        if st.button("Delete workout", key=f"delete-{workout.id}", disabled=not confirm):
            try:
                asyncio.run(cache.delete_workout(workout.id))
            except DeleteFailure as exc:
                st.error(f"Could not delete this workout: {exc}")
            else:
                st.success("Workout deleted")
                st.rerun()


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

cache = get_cache()

with st.sidebar:
    st.header("Calendar")
    st.caption("Demo calendar" if config.FEED_DEMO_MODE else "Google Calendar")
    refresh_clicked = st.button("Load workouts from calendar", type="primary")
    query = st.text_input("Search workouts")
    if not config.FEED_DEMO_MODE and st.button("Sign out"):
        clear_tokens(config.GOOGLE_TOKEN_PATH)
        st.session_state.pop("cache", None)
        st.rerun()

if cache is None:
    st.stop()

if refresh_clicked:
    try:
        with st.spinner("Reading calendar..."):
            asyncio.run(cache.refresh())
    except FetchFailure as exc:
        st.error(f"Failed to fetch workouts: {exc}")

# ---------------------------------------------------------------------------
# Feed
# ---------------------------------------------------------------------------

st.title("Upcoming Workouts")

if cache.status == RefreshStatus.PERMISSION_DENIED:
    st.warning(
        "Calendar access is not granted. Allow calendar access and load "
        "your workouts again."
    )
elif cache.status == RefreshStatus.NOT_LOADED:
    st.info("Load your calendar to see upcoming workouts.")
elif cache.status == RefreshStatus.NO_WORKOUTS:
    st.info("No workouts found in the next two weeks.")

workouts = [w for w in cache.get_current() if matches_search(w, query)]

feed_tab, table_tab = st.tabs(["Feed", "Table"])

with feed_tab:
    for date_label, day_workouts in group_by_date(workouts).items():
        st.subheader(date_label)
        for workout in day_workouts:
            _render_card(cache, workout)

with table_tab:
    st.dataframe(workouts_to_frame(workouts), use_container_width=True, hide_index=True)

"""
Main application entry for the Matchday Hub Streamlit app.

This module defines the match schedule page users see when they open the
app. It handles:
    - application configuration (`st.set_page_config`),
    - environment variable loading via `python-dotenv` and logging setup,
    - rendering the text / status / date filters and applying them through
        `controllers.filter_controller.filter_matches`,
    - a card grid or a table (`controllers.data_controller.matches_to_frame`),
    - the per-match favorite star (persisted in browser cookies via
        `controllers.favorites_controller.FavoritesStore`),
    - navigation to the match detail page.

This file only composes logic from helper modules; filtering, storage and
data loading live under `controllers/` and `common/`.
"""

# Import libraries
import streamlit as st

from common.logging_setup import setup_logging
from common.ui import sidebar_header, status_badge, star_label, empty_state, open_match_details
from common.utils import format_match_date, safe_rerun
from controllers.data_controller import load_matches, get_favorites_store, matches_to_frame
from controllers.favorites_controller import FavoriteKind
from controllers.filter_controller import MatchFilter, filter_matches

# Configure Streamlit page
st.set_page_config(page_title="Matchday Hub — Matches", layout="wide")
setup_logging()

STATUS_OPTIONS = {"all": "All Matches", "scheduled": "Scheduled", "live": "Live", "completed": "Completed"}
DATE_OPTIONS = {"all": "All Dates", "today": "Today", "tomorrow": "Tomorrow", "week": "This Week"}
CARDS_PER_ROW = 3
VIEW_OPTIONS = ["Cards", "Table"]


def _filters() -> MatchFilter:
    c1, c2, c3 = st.columns([2, 1, 1])
    with c1:
        text = st.text_input("Search teams", placeholder="Search teams...", key="match_search",
                             label_visibility="collapsed")
    with c2:
        status = st.selectbox("Status", list(STATUS_OPTIONS), format_func=STATUS_OPTIONS.get,
                              key="match_status", label_visibility="collapsed")
    with c3:
        bucket = st.selectbox("Date", list(DATE_OPTIONS), format_func=DATE_OPTIONS.get,
                              key="match_date", label_visibility="collapsed")
    return MatchFilter(text=text, status=status, date_bucket=bucket)


def _match_card(match, favorites, store):
    with st.container(border=True):
        top_l, top_r = st.columns([4, 1])
        top_l.markdown(status_badge(match.status.value), unsafe_allow_html=True)
        if top_r.button(star_label(match.id in favorites), key=f"fav_match_{match.id}",
                        help="Toggle favorite"):
            store.toggle(FavoriteKind.MATCH, match.id)
            safe_rerun()

        st.markdown(f"#### {match.home_team} vs {match.away_team}")
        if match.has_score:
            st.markdown(f"<h2 style='text-align:center'>{match.home_score} - {match.away_score}</h2>",
                        unsafe_allow_html=True)
        st.caption(f"📅 {format_match_date(match.date)}  |  🕒 {match.time}")
        st.markdown(f"**{match.competition}**")
        if match.venue:
            st.caption(match.venue)
        if st.button("View Details", key=f"details_{match.id}", use_container_width=True):
            open_match_details(match.id)


def main():
    sidebar_header(show_custom_nav=True)

    st.title("Match Schedule")
    st.caption("Stay updated with the latest football matches and results")

    store = get_favorites_store()
    favorites = store.load(FavoriteKind.MATCH)

    criteria = _filters()
    matches = filter_matches(load_matches(), criteria)

    if not matches:
        empty_state("No matches found matching your criteria")
        return

    view = st.radio("View", VIEW_OPTIONS, horizontal=True, key="match_view", label_visibility="collapsed")
    if view == "Table":
        st.dataframe(matches_to_frame(matches).drop(columns=["MatchId"]), hide_index=True,
                     use_container_width=True)
        return

    for start in range(0, len(matches), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, match in zip(cols, matches[start:start + CARDS_PER_ROW]):
            with col:
                _match_card(match, favorites, store)


if __name__ == "__main__":
    main()

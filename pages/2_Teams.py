import streamlit as st

from common.logging_setup import setup_logging
from common.ui import (
    sidebar_header, star_label, team_avatar, outcome_badge, empty_state,
    submit_search, search_in_flight, take_pending_search, finish_search,
)
from common.utils import safe_rerun
from controllers.data_controller import (
    get_teams_catalog, set_teams_catalog, get_favorites_store, recent_matches_frame,
)
from controllers.favorites_controller import FavoriteKind
from controllers.filter_controller import filter_teams
from controllers.search_controller import search_outcome, upsert_team

st.set_page_config(page_title="Teams", layout="wide")
setup_logging()

SEARCH_PREFIX = "teams_search"
ERROR_KEY = f"{SEARCH_PREFIX}_error"
NOTICE_KEY = f"{SEARCH_PREFIX}_notice"
CARDS_PER_ROW = 3


def _run_pending_search():
    pending = take_pending_search(SEARCH_PREFIX)
    if not pending:
        return
    token, query = pending
    try:
        with st.spinner("Searching..."):
            results, error, notice = search_outcome(query)
    finally:
        # also runs when a click interrupts the spinner with a rerun
        latest = finish_search(SEARCH_PREFIX, token)

    if latest:
        st.session_state[ERROR_KEY] = error
        st.session_state[NOTICE_KEY] = notice
        if results:
            # only the first hit is merged; upsert keeps existing entries untouched
            set_teams_catalog(upsert_team(get_teams_catalog(), results[0]))
    # re-render with the search button enabled again
    safe_rerun()


def _team_card(team, favorites, store):
    with st.container(border=True):
        top_l, top_r = st.columns([4, 1])
        top_l.caption(team.league)
        if top_r.button(star_label(team.id in favorites), key=f"fav_team_{team.id}", help="Toggle favorite"):
            store.toggle(FavoriteKind.TEAM, team.id)
            safe_rerun()

        st.markdown(team_avatar(team.initial, team.color), unsafe_allow_html=True)
        st.markdown(f"<h4 style='text-align:center'>{team.name}</h4>", unsafe_allow_html=True)
        st.markdown(f"📅 Founded: {team.founded}  \n📍 {team.stadium}  \n🏆 {team.league}")
        st.caption(team.description[:220] + ("…" if len(team.description) > 220 else ""))

        recent = recent_matches_frame(team)
        if not recent.empty:
            st.markdown("**Recent Matches**")
            for row in recent.itertuples(index=False):
                c1, c2 = st.columns([3, 2])
                c1.caption(f"vs {row.Opponent}")
                c2.markdown(outcome_badge(row.Result, row.Outcome))


def main():
    sidebar_header(show_custom_nav=True)

    st.title("Teams")
    st.caption("Discover teams and their profiles")

    in_flight = search_in_flight(SEARCH_PREFIX)
    with st.form("teams_search_form", clear_on_submit=False):
        c1, c2 = st.columns([5, 1])
        term = c1.text_input("Search", placeholder="Search for teams (e.g., Arsenal, Barcelona)...",
                             key="teams_term", label_visibility="collapsed")
        submitted = c2.form_submit_button("Searching..." if in_flight else "Search", disabled=in_flight,
                                          use_container_width=True)
    if submitted and term.strip():
        st.session_state.pop(ERROR_KEY, None)
        st.session_state.pop(NOTICE_KEY, None)
        submit_search(SEARCH_PREFIX, term)
        safe_rerun()

    _run_pending_search()

    err = st.session_state.get(ERROR_KEY)
    notice = st.session_state.get(NOTICE_KEY)
    if err:
        st.error(err)
    elif notice:
        st.info(notice)

    store = get_favorites_store()
    favorites = store.load(FavoriteKind.TEAM)
    teams = filter_teams(get_teams_catalog(), term)

    if not teams and not search_in_flight(SEARCH_PREFIX):
        empty_state("No teams found", "Try searching for a team using the search bar above")
        return

    for start in range(0, len(teams), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, team in zip(cols, teams[start:start + CARDS_PER_ROW]):
            with col:
                _team_card(team, favorites, store)


if __name__ == "__main__":
    main()

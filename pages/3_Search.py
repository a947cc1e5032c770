import streamlit as st

from common.logging_setup import setup_logging
from common.ui import (
    sidebar_header, team_avatar, empty_state,
    submit_search, search_in_flight, take_pending_search, finish_search,
)
from common.utils import safe_rerun
from controllers.data_controller import get_favorites_store
from controllers.favorites_controller import FavoriteKind
from controllers.search_controller import search_outcome

st.set_page_config(page_title="Search Teams", layout="wide")
setup_logging()

SEARCH_PREFIX = "api_search"
RESULTS_KEY = f"{SEARCH_PREFIX}_results"
ERROR_KEY = f"{SEARCH_PREFIX}_error"
NOTICE_KEY = f"{SEARCH_PREFIX}_notice"
CARDS_PER_ROW = 3
SUGGESTIONS = ["Arsenal", "Barcelona", "Real Madrid", "Manchester United", "Liverpool"]
SEARCH_TIPS = """
**Search Tips**
- Try searching for popular team names like "Arsenal", "Barcelona", or "Real Madrid"
- Search works best with exact or partial team names
- Results are powered by TheSportsDB API and include teams from various leagues
- Click the star button to add teams to your favorites
"""


def _use_suggestion(name: str):
    st.session_state["api_term"] = name


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
        st.session_state[RESULTS_KEY] = results
        st.session_state[ERROR_KEY] = error
        st.session_state[NOTICE_KEY] = notice
        st.session_state[f"{SEARCH_PREFIX}_has_searched"] = True
    safe_rerun()


def _result_card(team, favorites, store):
    with st.container(border=True):
        st.caption(f"{team.league} · Team")
        st.markdown(team_avatar(team.initial, team.color, size=56), unsafe_allow_html=True)
        st.markdown(f"<h4 style='text-align:center'>{team.name}</h4>", unsafe_allow_html=True)
        st.markdown(f"📅 Founded: {team.founded}  \n📍 {team.stadium}")
        st.caption(team.description[:220] + ("…" if len(team.description) > 220 else ""))
        if team.id in favorites:
            st.button("★ In favorites", key=f"add_fav_{team.id}", disabled=True, use_container_width=True)
        elif st.button("☆ Add to favorites", key=f"add_fav_{team.id}", use_container_width=True):
            store.add(FavoriteKind.TEAM, team.id)
            safe_rerun()


def main():
    sidebar_header(show_custom_nav=True)

    st.title("Search Teams")
    st.caption("Search for teams from around the world using TheSportsDB API")

    in_flight = search_in_flight(SEARCH_PREFIX)
    with st.form("api_search_form", clear_on_submit=False):
        c1, c2 = st.columns([5, 1])
        term = c1.text_input("Search", placeholder="Search for teams (e.g., Arsenal, Barcelona, Real Madrid)...",
                             key="api_term", label_visibility="collapsed", disabled=in_flight)
        submitted = c2.form_submit_button("Searching..." if in_flight else "Search", disabled=in_flight,
                                          use_container_width=True)
    if submitted and term.strip():
        submit_search(SEARCH_PREFIX, term)
        safe_rerun()

    _run_pending_search()

    error = st.session_state.get(ERROR_KEY)
    notice = st.session_state.get(NOTICE_KEY)
    results = st.session_state.get(RESULTS_KEY) or []

    if error:
        st.error(error)
    elif notice:
        st.info(notice)
    elif not st.session_state.get(f"{SEARCH_PREFIX}_has_searched"):
        empty_state("Search for Teams",
                    "Use the search bar above to find teams from leagues around the world")
        for col, name in zip(st.columns(len(SUGGESTIONS)), SUGGESTIONS):
            col.button(name, key=f"suggest_{name}", on_click=_use_suggestion, args=(name,),
                       use_container_width=True)
        st.info(SEARCH_TIPS)
        return

    if not results:
        st.info(SEARCH_TIPS)
        return

    st.subheader(f"Search Results ({len(results)})")
    store = get_favorites_store()
    favorites = store.load(FavoriteKind.TEAM)
    for start in range(0, len(results), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, team in zip(cols, results[start:start + CARDS_PER_ROW]):
            with col:
                _result_card(team, favorites, store)


if __name__ == "__main__":
    main()

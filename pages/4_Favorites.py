import streamlit as st

from common.logging_setup import setup_logging
from common.ui import sidebar_header, status_badge, team_avatar, empty_state, open_match_details
from common.utils import format_match_date, safe_rerun
from controllers.data_controller import load_matches, get_teams_catalog, get_favorites_store
from controllers.favorites_controller import FavoriteKind
from controllers.filter_controller import resolve_favorites

st.set_page_config(page_title="Favorites", layout="wide")
setup_logging()

CARDS_PER_ROW = 3


def _match_card(match, store):
    with st.container(border=True):
        top_l, top_r = st.columns([4, 1])
        top_l.markdown(status_badge(match.status.value), unsafe_allow_html=True)
        if top_r.button("🗑️", key=f"rm_match_{match.id}", help="Remove from favorites"):
            store.remove(FavoriteKind.MATCH, match.id)
            safe_rerun()
        st.markdown(f"#### {match.home_team} vs {match.away_team}")
        if match.has_score:
            st.markdown(f"<h3 style='text-align:center'>{match.home_score} - {match.away_score}</h3>",
                        unsafe_allow_html=True)
        st.caption(f"📅 {format_match_date(match.date)}  |  🕒 {match.time}")
        st.markdown(f"**{match.competition}**")
        if st.button("View Details", key=f"fav_details_{match.id}", use_container_width=True):
            open_match_details(match.id)


def _team_card(team, store):
    with st.container(border=True):
        top_l, top_r = st.columns([4, 1])
        top_l.caption(team.league)
        if top_r.button("🗑️", key=f"rm_team_{team.id}", help="Remove from favorites"):
            store.remove(FavoriteKind.TEAM, team.id)
            safe_rerun()
        st.markdown(team_avatar(team.initial, team.color, size=56), unsafe_allow_html=True)
        st.markdown(f"<h4 style='text-align:center'>{team.name}</h4>", unsafe_allow_html=True)
        st.caption(f"📍 {team.stadium}")


def _grid(items, render, store):
    for start in range(0, len(items), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, item in zip(cols, items[start:start + CARDS_PER_ROW]):
            with col:
                render(item, store)


def main():
    sidebar_header(show_custom_nav=True)

    st.title("My Favorites")
    st.caption("Keep track of your favorite matches and teams")

    store = get_favorites_store()
    # stale ids (no catalog entry any more) are skipped, not errors
    matches = resolve_favorites(load_matches(), store.load(FavoriteKind.MATCH))
    teams = resolve_favorites(get_teams_catalog(), store.load(FavoriteKind.TEAM))

    tab_matches, tab_teams = st.tabs([f"Favorite Matches ({len(matches)})", f"Favorite Teams ({len(teams)})"])

    with tab_matches:
        if not matches:
            empty_state("No favorite matches yet",
                        "Start adding matches to your favorites by clicking the star icon on match cards")
            st.page_link("main.py", label="Browse Matches", icon="📅")
        else:
            _grid(matches, _match_card, store)

    with tab_teams:
        if not teams:
            empty_state("No favorite teams yet",
                        "Start adding teams to your favorites by clicking the star icon on team profiles")
            st.page_link("pages/2_Teams.py", label="Browse Teams", icon="🛡️")
        else:
            _grid(teams, _team_card, store)


if __name__ == "__main__":
    main()

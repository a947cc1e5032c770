import streamlit as st
import matplotlib.pyplot as plt

from common.logging_setup import setup_logging
from common.metrics import possession_widths
from common.plots import plot_stat_comparison, plot_possession
from common.ui import sidebar_header, status_badge, star_label, EVENT_ICONS
from common.utils import format_match_date, safe_rerun
from controllers.data_controller import get_match_detail, get_favorites_store
from controllers.favorites_controller import FavoriteKind
from controllers.stats_controller import compute_stat_comparison, compute_key_stats, goal_scorers
from models.match_model import MatchStatus

st.set_page_config(page_title="Match Details", layout="wide")
setup_logging()


def _selected_match_id():
    # ?id=... wins over the selection remembered from the list page
    qp = st.query_params.get("id")
    if qp:
        return str(qp)
    return st.session_state.get("selected_match_id")


def _not_found():
    st.header("Match not found")
    st.write("The requested match could not be found.")
    st.page_link("main.py", label="Back to Matches", icon="⬅️")


def _timeline(detail):
    st.subheader("Match Timeline")
    if not detail.events:
        st.info("No events recorded for this match.")
        return
    for ev in detail.events:
        c1, c2, c3 = st.columns([1, 4, 2])
        c1.markdown(f"**{ev.minute}'** {EVENT_ICONS.get(ev.kind.value, '•')}")
        c2.markdown(f"**{ev.player}**" + (f"  \nAssist: {ev.assist}" if ev.assist else ""))
        c3.caption(ev.team)


def main():
    sidebar_header(show_custom_nav=True)

    match_id = _selected_match_id()
    detail = get_match_detail(match_id) if match_id else None
    if detail is None:
        _not_found()
        st.stop()

    m = detail.match
    st.query_params["id"] = m.id
    store = get_favorites_store()
    is_fav = store.contains(FavoriteKind.MATCH, m.id)

    head_l, head_r = st.columns([6, 1])
    with head_l:
        st.title(f"{m.home_team} vs {m.away_team}")
        st.caption(f"📅 {format_match_date(m.date)}  |  🕒 {m.time}  |  📍 {m.venue or '—'}")
        st.markdown(f"{status_badge(m.status.value)} &nbsp; **{m.competition}**", unsafe_allow_html=True)
    if head_r.button(star_label(is_fav), key="fav_detail", help="Toggle favorite"):
        store.toggle(FavoriteKind.MATCH, m.id)
        safe_rerun()

    left, right = st.columns([2, 1])
    with left:
        st.subheader("Final Score" if m.status is MatchStatus.COMPLETED else "Score")
        if m.has_score:
            st.markdown(f"<h1 style='text-align:center'>{m.home_score} - {m.away_score}</h1>",
                        unsafe_allow_html=True)
        else:
            st.markdown("<h3 style='text-align:center'>vs</h3>", unsafe_allow_html=True)

        _timeline(detail)

        st.subheader("Match Statistics")
        comparison = compute_stat_comparison(detail)
        fig1, ax1 = plt.subplots(figsize=(5.2, 2.2))
        plot_stat_comparison(comparison, m.home_team, m.away_team, ax=ax1)
        st.pyplot(fig1, use_container_width=False)
        plt.close(fig1)

    with right:
        st.subheader("Possession")
        home_pct, away_pct = possession_widths(detail.stats.possession.home, detail.stats.possession.away)
        fig2, ax2 = plt.subplots(figsize=(5.2, 0.9))
        plot_possession(home_pct, away_pct, m.home_team, m.away_team, ax=ax2)
        st.pyplot(fig2, use_container_width=True)
        plt.close(fig2)

        st.subheader("Key Stats")
        st.dataframe(compute_key_stats(detail), hide_index=True, use_container_width=True)

        st.subheader("Goal Scorers")
        scorers = goal_scorers(detail)
        if scorers.empty:
            st.info("No goals in this match.")
        else:
            st.dataframe(scorers, hide_index=True, use_container_width=True)


if __name__ == "__main__":
    main()

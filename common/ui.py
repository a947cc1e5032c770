# common/ui.py
from __future__ import annotations
from html import escape

import streamlit as st

from common.colors import OUTCOME_COLORS, is_light_color, status_color

MATCH_DETAILS_PAGE = "pages/1_Match_Details.py"

EVENT_ICONS = {
    "goal": "⚽",
    "yellow_card": "🟨",
    "red_card": "🟥",
    "substitution": "🔁",
}


def sidebar_header(show_custom_nav: bool = True):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown("### ⚽ Matchday Hub")
        if show_custom_nav:
            st.divider()
            st.page_link("main.py", label="Matches", icon="📅")
            st.page_link("pages/2_Teams.py", label="Teams", icon="🛡️")
            st.page_link("pages/3_Search.py", label="Search", icon="🔎")
            st.page_link("pages/4_Favorites.py", label="Favorites", icon="⭐")


def star_label(is_favorite: bool) -> str:
    return "★" if is_favorite else "☆"


def status_badge(status: str) -> str:
    c = status_color(status)
    return (
        f'<span style="background:{c};color:white;padding:2px 8px;border-radius:8px;'
        f'font-size:0.8em">{escape(str(status))}</span>'
    )


def team_avatar(initial: str, color: str, size: int = 64) -> str:
    fg = "#111" if is_light_color(color) else "white"
    return (
        f'<div style="width:{size}px;height:{size}px;border-radius:50%;background:{color};'
        f'color:{fg};display:flex;align-items:center;justify-content:center;'
        f'font-size:{size // 2.5:.0f}px;font-weight:700;margin:auto">{escape(initial)}</div>'
    )


def outcome_badge(result: str, outcome: str) -> str:
    """Markdown badge for a recent result (green win, gray draw, red loss)."""
    return f":{OUTCOME_COLORS.get(outcome, 'red')}[**{result}**]"


def empty_state(message: str, hint: str = "") -> None:
    st.markdown(
        f"<div style='text-align:center;padding:3rem 0'><p style='font-size:1.1em'>{escape(message)}</p>"
        + (f"<p style='opacity:0.7'>{escape(hint)}</p>" if hint else "")
        + "</div>",
        unsafe_allow_html=True,
    )


def open_match_details(match_id: str) -> None:
    """Remember the selection and jump to the detail page."""
    st.session_state["selected_match_id"] = str(match_id)
    st.switch_page(MATCH_DETAILS_PAGE)


# --- Remote search bookkeeping (in-flight flag + stale-result guard) ---
# `state` defaults to st.session_state; any mutable mapping works.
def _state(state):
    return st.session_state if state is None else state


def submit_search(prefix: str, query: str, state=None) -> int:
    """Queue a search for the next rerun and mark it in flight."""
    s = _state(state)
    token = int(s.get(f"{prefix}_token", 0)) + 1
    s[f"{prefix}_token"] = token
    s[f"{prefix}_pending"] = (token, query)
    s[f"{prefix}_in_flight"] = True
    return token


def search_in_flight(prefix: str, state=None) -> bool:
    s = _state(state)
    if not s.get(f"{prefix}_in_flight", False):
        return False
    if f"{prefix}_pending" not in s:
        # an interrupted run took the search but never finished it
        s[f"{prefix}_in_flight"] = False
        return False
    return True


def take_pending_search(prefix: str, state=None):
    """Return (token, query) of the queued search, or None."""
    return _state(state).pop(f"{prefix}_pending", None)


def finish_search(prefix: str, token: int, state=None) -> bool:
    """Clear the in-flight flag; True when `token` is still the latest submission."""
    s = _state(state)
    s[f"{prefix}_in_flight"] = False
    return token == s.get(f"{prefix}_token")

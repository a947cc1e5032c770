"""
Data controller helpers that glue the catalog literals and the browser
storage to the Streamlit pages.

This module exposes:
    - `load_matches()` / `load_teams()` returning model lists built from
        `common.catalog`,
    - `get_match(id)` / `get_match_detail(id)`; both return `None` for an
        unknown id so pages can show a "not found" view,
    - `matches_to_frame(...)` / `recent_matches_frame(...)` DataFrames for
        table rendering,
    - `get_favorites_store()` creating the favorites store over browser
        cookies for the current run,
    - `get_teams_catalog()` / `set_teams_catalog()` holding the per-session
        team list that the Teams page may extend with a searched team.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional

import pandas as pd
import streamlit as st
from loguru import logger

from common.catalog import MATCHES, MATCH_DETAILS, TEAMS
from common.storage import get_browser_storage
from common.utils import format_match_date
from controllers.favorites_controller import FavoritesStore
from models.match_model import Match, MatchDetail, MatchEvent, MatchStats
from models.team_model import Team

TEAMS_STATE_KEY = "teams_catalog"


def build_matches(raw: Iterable[dict]) -> List[Match]:
    matches = []
    for d in raw:
        m = Match.from_dict(d)
        if not m.scores_consistent:
            logger.warning("Match {} ({}) has scores that do not fit status {}", m.id, m.name, m.status.value)
        matches.append(m)
    return matches


def build_details(matches: Iterable[Match], raw_details: Dict[str, dict]) -> Dict[str, MatchDetail]:
    """Join the fixture list with the per-match events and stats by id."""
    out = {}
    for m in matches:
        d = raw_details.get(m.id)
        if d is None:
            continue
        out[m.id] = MatchDetail(
            match=m,
            stats=MatchStats.from_dict(d.get("stats") or {}),
            events=[MatchEvent.from_dict(e) for e in d.get("events") or []],
        )
    return out


@st.cache_data(show_spinner=False)
def load_matches() -> List[Match]:
    return build_matches(MATCHES)


@st.cache_data(show_spinner=False)
def load_teams() -> List[Team]:
    return [Team.from_dict(d) for d in TEAMS]


def get_match(match_id: str, matches: Optional[List[Match]] = None) -> Optional[Match]:
    for m in matches if matches is not None else load_matches():
        if m.id == str(match_id):
            return m
    return None


def get_match_detail(match_id: str) -> Optional[MatchDetail]:
    m = get_match(match_id)
    if m is None:
        return None
    return build_details([m], MATCH_DETAILS).get(m.id)


def matches_to_frame(matches: Iterable[Match]) -> pd.DataFrame:
    rows = [{
        "MatchId": m.id,
        "MatchName": m.name,
        "Score": f"{m.home_score} - {m.away_score}" if m.has_score else "",
        "Date": format_match_date(m.date),
        "Time": m.time,
        "Status": m.status.value,
        "Competition": m.competition,
        "Venue": m.venue or "",
    } for m in matches]
    return pd.DataFrame(rows, columns=["MatchId", "MatchName", "Score", "Date", "Time",
                                       "Status", "Competition", "Venue"])


def recent_matches_frame(team: Team, limit: int = 3) -> pd.DataFrame:
    rows = [{"Opponent": r.opponent, "Result": r.result, "Outcome": r.outcome, "Date": r.date}
            for r in team.recent_matches[:limit]]
    return pd.DataFrame(rows, columns=["Opponent", "Result", "Outcome", "Date"])


def get_favorites_store() -> FavoritesStore:
    return FavoritesStore(get_browser_storage())


def get_teams_catalog() -> List[Team]:
    if TEAMS_STATE_KEY not in st.session_state:
        st.session_state[TEAMS_STATE_KEY] = load_teams()
    return st.session_state[TEAMS_STATE_KEY]


def set_teams_catalog(teams: List[Team]) -> None:
    st.session_state[TEAMS_STATE_KEY] = list(teams)

import pandas as pd

from common.metrics import COMPARISON_STATS, KEY_STATS, relative_widths
from models.match_model import MatchDetail


def compute_stat_comparison(detail: MatchDetail) -> pd.DataFrame:
    """One row per compared stat: Stat, Home, Away, HomePct, AwayPct."""
    rows = []
    for attr, label in COMPARISON_STATS:
        pair = getattr(detail.stats, attr)
        home_pct, away_pct = relative_widths(pair.home, pair.away)
        rows.append({
            "Stat": label,
            "Home": pair.home,
            "Away": pair.away,
            "HomePct": home_pct,
            "AwayPct": away_pct,
        })
    return pd.DataFrame(rows, columns=["Stat", "Home", "Away", "HomePct", "AwayPct"])


def compute_key_stats(detail: MatchDetail) -> pd.DataFrame:
    home, away = detail.match.home_team, detail.match.away_team
    rows = []
    for attr, label in KEY_STATS:
        pair = getattr(detail.stats, attr)
        rows.append({"Stat": label, home: pair.home, away: pair.away})
    # Ensure Home then Away ordering
    return pd.DataFrame(rows).reindex(columns=["Stat", home, away])


def goal_scorers(detail: MatchDetail) -> pd.DataFrame:
    goals = detail.goals
    return pd.DataFrame(
        {
            "Minute": [f"{g.minute}'" for g in goals],
            "Player": [g.player for g in goals],
            "Assist": [g.assist or "" for g in goals],
            "Team": [g.team for g in goals],
        },
        columns=["Minute", "Player", "Assist", "Team"],
    )

# common/plots.py
from __future__ import annotations
from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt

from common.colors import AWAY_COLOR, HOME_COLOR, is_light_color

DEFAULT_FIGSIZE = (5.2, 2.0)
TRACK_COLOR = "#E5E7EB"


def _new_ax(ax=None, figsize=DEFAULT_FIGSIZE):
    """Return a compact figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax


def _edge_kw_for(hexs: str) -> dict:
    """Return edgecolor/linewidth kwargs for bars when color is very light."""
    return {"edgecolor": "black", "linewidth": 1.0} if is_light_color(hexs) else {}


# --- Stat comparison (mirror bars, each side scaled to the larger value) ---
def plot_stat_comparison(comparison: pd.DataFrame,
                         home: str,
                         away: str,
                         col_home: str = HOME_COLOR,
                         col_away: str = AWAY_COLOR,
                         ax: Optional[plt.Axes] = None) -> plt.Axes:
    """
    `comparison` comes from `controllers.stats_controller.compute_stat_comparison`
    (Stat, Home, Away, HomePct, AwayPct). Home bars grow left, away bars right.
    """
    fig, ax = _new_ax(ax, figsize=(5.2, 0.5 + 0.45 * max(1, len(comparison))))
    y = list(range(len(comparison)))

    ax.barh(y, [-100] * len(y), color=TRACK_COLOR, height=0.6)
    ax.barh(y, [100] * len(y), color=TRACK_COLOR, height=0.6)
    ax.barh(y, -comparison["HomePct"], color=col_home, height=0.6, label=home, **_edge_kw_for(col_home))
    ax.barh(y, comparison["AwayPct"], color=col_away, height=0.6, label=away, **_edge_kw_for(col_away))

    for i, (_, r) in enumerate(comparison.iterrows()):
        ax.text(-102, i, f"{r['Home']}", va="center", ha="right", fontsize=7)
        ax.text(102, i, f"{r['Away']}", va="center", ha="left", fontsize=7)

    ax.axvline(0, color="black", linewidth=1)
    ax.set_yticks(y, comparison["Stat"].tolist())
    ax.set_xticks([])
    ax.set_xlim(-115, 115)
    ax.invert_yaxis()
    ax.tick_params(axis="both", labelsize=7)
    for side in ("top", "right", "bottom"):
        ax.spines[side].set_visible(False)
    return ax


# --- Possession (single stacked bar) ---
def plot_possession(home_pct: float,
                    away_pct: float,
                    home: str,
                    away: str,
                    col_home: str = HOME_COLOR,
                    col_away: str = AWAY_COLOR,
                    ax: Optional[plt.Axes] = None) -> plt.Axes:
    fig, ax = _new_ax(ax, figsize=(5.2, 0.9))
    ax.barh([0], [home_pct], color=col_home, height=0.5, **_edge_kw_for(col_home))
    ax.barh([0], [away_pct], left=[home_pct], color=col_away, height=0.5, **_edge_kw_for(col_away))
    ax.text(1, 0, f"{home} {home_pct:.0f}%", va="center", ha="left", fontsize=7, color="white")
    ax.text(99, 0, f"{away_pct:.0f}% {away}", va="center", ha="right", fontsize=7, color="white")
    ax.set_xlim(0, 100)
    ax.set_yticks([])
    ax.set_xticks([])
    for side in ("top", "right", "bottom", "left"):
        ax.spines[side].set_visible(False)
    return ax

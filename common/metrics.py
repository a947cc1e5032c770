"""
Numeric helpers for the match statistics views.

    - `relative_widths` turns a home/away pair into bar widths (percent of
        the larger value), which is how the comparison bars are drawn.
    - `possession_widths` clamps possession percentages into 0..100.
    - `COMPARISON_STATS` / `KEY_STATS` fix which stats are shown and in
        which order.
"""

#Import libraries
from __future__ import annotations
from typing import Tuple

# (attribute on MatchStats, label) in display order
COMPARISON_STATS = [
    ("shots", "Shots"),
    ("shots_on_target", "On Target"),
    ("fouls", "Fouls"),
    ("corners", "Corners"),
]

KEY_STATS = [
    ("shots", "Shots"),
    ("shots_on_target", "Shots on Target"),
    ("fouls", "Fouls"),
    ("corners", "Corners"),
    ("yellow_cards", "Yellow Cards"),
]


def relative_widths(home: float, away: float) -> Tuple[float, float]:
    """
    Width of each bar as a percentage of the larger side.
    The larger side is always 100; when both are 0 both bars are empty.
    """
    top = max(float(home), float(away))
    if top <= 0:
        return 0.0, 0.0
    return max(0.0, home / top * 100.0), max(0.0, away / top * 100.0)


def possession_widths(home: float, away: float) -> Tuple[float, float]:
    clamp = lambda v: min(100.0, max(0.0, float(v)))
    return clamp(home), clamp(away)

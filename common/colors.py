# common/colors.py
from __future__ import annotations
import random
from typing import Optional, Sequence, Tuple

# Fixed palette for teams that come from the remote search
TEAM_COLORS = ["#DC2626", "#1D4ED8", "#059669", "#7C3AED", "#EA580C", "#0891B2"]

HOME_COLOR = "#2563EB"
AWAY_COLOR = "#DC2626"

STATUS_COLORS = {
    "Live": "#EF4444",
    "Completed": "#22C55E",
    "Scheduled": "#3B82F6",
}

# result outcome -> streamlit markdown colour name
OUTCOME_COLORS = {"win": "green", "draw": "gray", "loss": "red"}

_rng = random.Random()


def pick_team_color(rng: Optional[random.Random] = None, palette: Sequence[str] = TEAM_COLORS) -> str:
    """
    Cosmetic colour for a searched team. Pass a seeded `random.Random` for a
    reproducible choice; by default repeated searches may differ.
    """
    return (rng or _rng).choice(list(palette))


def status_color(status: str) -> str:
    return STATUS_COLORS.get(str(status), STATUS_COLORS["Scheduled"])


def _hex_to_rgb(hexs: str) -> Tuple[float, float, float]:
    h = hexs.strip().lstrip("#")
    return int(h[0:2], 16) / 255.0, int(h[2:4], 16) / 255.0, int(h[4:6], 16) / 255.0


def is_light_color(hexs: str, thr: float = 0.90) -> bool:
    """Perceived luminance threshold (Y) to decide if a swatch needs a dark border."""
    try:
        r, g, b = _hex_to_rgb(hexs)
    except (ValueError, IndexError):
        return False
    return 0.2126 * r + 0.7152 * g + 0.0722 * b >= thr

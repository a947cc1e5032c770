from datetime import date

from common.colors import TEAM_COLORS, pick_team_color, status_color, is_light_color
from common.logging_setup import resolve_level
from common.utils import format_match_date, iso_day


def test_iso_day_offsets_cross_month_boundary():
    assert iso_day(date(2025, 1, 31)) == "2025-01-31"
    assert iso_day(date(2025, 1, 31), 1) == "2025-02-01"
    assert iso_day(date(2024, 12, 28), 7) == "2025-01-04"


def test_format_match_date():
    assert format_match_date("2025-01-07") == "Tue 07 Jan 2025"
    assert format_match_date("soon") == "soon"


def test_pick_team_color_from_palette():
    class First:
        def choice(self, seq):
            return seq[0]

    assert pick_team_color(First()) == TEAM_COLORS[0]
    assert pick_team_color() in TEAM_COLORS


def test_status_color_defaults_to_scheduled():
    assert status_color("Live") != status_color("Completed")
    assert status_color("whatever") == status_color("Scheduled")


def test_is_light_color():
    assert is_light_color("#FFFFFF")
    assert not is_light_color("#1D4ED8")
    assert not is_light_color("nope")


def test_resolve_level():
    assert resolve_level("debug") == "DEBUG"
    assert resolve_level("chatty") == "INFO"
    assert resolve_level(None) == "INFO"

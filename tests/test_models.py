import pytest

from common.errors import NoResults, RequestFailed
from models.match_model import Match, MatchStatus
from models.team_model import ExternalTeam, RecentMatch


def test_match_from_dict_optional_fields():
    m = Match.from_dict({"id": 9, "homeTeam": "A", "awayTeam": "B", "date": "2025-01-07",
                         "time": "15:00", "status": "scheduled", "competition": "Cup"})
    assert m.id == "9"
    assert m.status is MatchStatus.SCHEDULED
    assert m.home_score is None and m.venue is None
    assert m.scores_consistent


def test_scores_on_scheduled_match_are_flagged():
    m = Match.from_dict({"id": "1", "homeTeam": "A", "awayTeam": "B", "date": "2025-01-07",
                         "status": "Scheduled", "homeScore": 1, "awayScore": 0})
    assert not m.scores_consistent


def test_status_parse_rejects_unknown():
    with pytest.raises(ValueError):
        MatchStatus.parse("postponed")


@pytest.mark.parametrize("result,outcome", [("W 2-1", "win"), ("D 0-0", "draw"), ("L 0-3", "loss")])
def test_recent_match_outcome(result, outcome):
    assert RecentMatch("X", result, "2025-01-01").outcome == outcome


def test_external_team_blank_strings_become_none():
    ext = ExternalTeam.from_json({"idTeam": "1", "strTeam": " Arsenal ", "strStadium": "  "})
    assert ext.strTeam == "Arsenal"
    assert ext.strStadium is None
    assert ext.strLeague is None


def test_error_messages():
    assert "Manchester United" in NoResults("abc").user_message
    assert RequestFailed("boom").user_message.startswith("Failed to search")

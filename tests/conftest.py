from datetime import date

import pytest

from common.storage import MemoryStorage
from controllers.favorites_controller import FavoritesStore
from models.match_model import Match, MatchStatus
from models.team_model import Team


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return FavoritesStore(storage)


@pytest.fixture
def fixed_today():
    return date(2025, 1, 7)


def make_match(mid, home, away, day, status=MatchStatus.SCHEDULED, score=None):
    hs, as_ = score if score else (None, None)
    return Match(id=mid, home_team=home, away_team=away, date=day, time="15:00",
                 status=status, competition="Premier League", home_score=hs, away_score=as_)


@pytest.fixture
def matches():
    return [
        make_match("1", "Arsenal", "Chelsea", "2025-01-07", MatchStatus.COMPLETED, (2, 1)),
        make_match("2", "Manchester United", "Liverpool", "2025-01-08"),
        make_match("3", "Manchester City", "Tottenham", "2025-01-06", MatchStatus.COMPLETED, (3, 0)),
        make_match("4", "Newcastle", "Brighton", "2025-01-14", MatchStatus.LIVE),
        make_match("5", "Aston Villa", "West Ham", "2025-01-15"),
    ]


@pytest.fixture
def teams():
    def team(tid, name, league):
        return Team(id=tid, name=name, founded="1900", stadium="Ground", league=league,
                    description="", color="#000000")
    return [
        team("1", "Arsenal", "Premier League"),
        team("2", "Barcelona", "La Liga"),
        team("3", "Real Madrid", "La Liga"),
        team("4", "Liverpool", "Premier League"),
    ]

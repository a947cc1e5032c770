import random

import pytest
import requests

from common.colors import TEAM_COLORS
from common.errors import NoResults, RequestFailed, SearchError
from controllers import search_controller
from controllers.search_controller import map_external_team, search_outcome, search_teams, upsert_team
from models.team_model import ExternalTeam, Team

ARSENAL = {
    "idTeam": "133604",
    "strTeam": "Arsenal",
    "strLeague": "English Premier League",
    "intFormedYear": "1892",
    "strStadium": None,
    "strDescriptionEN": "Arsenal Football Club is a professional football club.",
}


class FakeFetch:
    def __init__(self, payload=None, exc=None):
        self.payload = payload
        self.exc = exc
        self.calls = []

    def __call__(self, path, params=None, timeout=None):
        self.calls.append((path, params, timeout))
        if self.exc:
            raise self.exc
        return self.payload


def test_blank_query_skips_network():
    fetch = FakeFetch({"teams": [ARSENAL]})
    assert search_teams("   ", fetch=fetch) == []
    assert fetch.calls == []


def test_single_get_with_query_param():
    fetch = FakeFetch({"teams": [ARSENAL]})
    search_teams("  Arsenal ", fetch=fetch, timeout=10)
    assert fetch.calls == [("/searchteams.php", {"t": "Arsenal"}, 10)]


def test_missing_stadium_gets_placeholder():
    teams = search_teams("Arsenal", fetch=FakeFetch({"teams": [ARSENAL]}))
    assert len(teams) == 1
    t = teams[0]
    assert t.id == "133604"
    assert t.name == "Arsenal"
    assert t.stadium == "Unknown Stadium"
    assert t.founded == "1892"
    assert t.league == "English Premier League"
    assert t.recent_matches == []
    assert t.color in TEAM_COLORS


def test_all_optional_fields_defaulted():
    t = map_external_team(ExternalTeam.from_json({"idTeam": 1, "strTeam": "X", "strLeague": ""}), "#000000")
    assert t.id == "1"
    assert t.league == "Unknown League"
    assert t.founded == "Unknown"
    assert t.stadium == "Unknown Stadium"
    assert t.description == "No description available"
    assert t.color == "#000000"


@pytest.mark.parametrize("payload", [{"teams": None}, {}, {"teams": []}])
def test_no_results_carries_query(payload):
    catalog = [Team(id="1", name="Arsenal", founded="1886", stadium="Emirates Stadium",
                    league="Premier League", description="", color="#DC2626")]
    before = list(catalog)
    with pytest.raises(NoResults) as exc:
        search_teams("xyz123", fetch=FakeFetch(payload))
    assert exc.value.query == "xyz123"
    assert '"xyz123"' in exc.value.user_message
    assert catalog == before


@pytest.mark.parametrize("exc", [
    requests.ConnectionError("offline"),
    requests.Timeout("slow"),
    requests.HTTPError("500 Server Error"),
    ValueError("Expecting value"),
])
def test_request_failures(exc):
    with pytest.raises(RequestFailed) as err:
        search_teams("Arsenal", fetch=FakeFetch(exc=exc))
    assert "connection" in err.value.user_message
    assert isinstance(err.value, SearchError)
    assert not isinstance(err.value, NoResults)


def test_unexpected_payload_is_request_failure():
    with pytest.raises(RequestFailed):
        search_teams("Arsenal", fetch=FakeFetch(["not", "a", "dict"]))


def test_outcome_separates_no_results_from_failure():
    results, error, notice = search_outcome("xyz123", fetch=FakeFetch({"teams": None}))
    assert results == [] and error is None
    assert notice == NoResults("xyz123").user_message

    results, error, notice = search_outcome("Arsenal", fetch=FakeFetch(exc=requests.Timeout("slow")))
    assert results == [] and notice is None
    assert error.startswith("Failed to search")


def test_outcome_passes_results_through():
    results, error, notice = search_outcome("Arsenal", fetch=FakeFetch({"teams": [ARSENAL]}))
    assert [t.name for t in results] == ["Arsenal"]
    assert error is None and notice is None


def test_records_without_id_are_skipped():
    payload = {"teams": [{"strTeam": "Ghost"}, ARSENAL]}
    teams = search_teams("a", fetch=FakeFetch(payload))
    assert [t.id for t in teams] == ["133604"]


def test_seeded_rng_gives_reproducible_colors():
    payload = {"teams": [ARSENAL, {**ARSENAL, "idTeam": "2"}, {**ARSENAL, "idTeam": "3"}]}
    a = search_teams("Arsenal", fetch=FakeFetch(payload), rng=random.Random(42))
    b = search_teams("Arsenal", fetch=FakeFetch(payload), rng=random.Random(42))
    assert [t.color for t in a] == [t.color for t in b]


def test_default_fetch_uses_tsdb_get(monkeypatch):
    calls = []

    def fake_get(path, params=None, timeout=None):
        calls.append(params)
        return {"teams": [ARSENAL]}

    monkeypatch.setattr(search_controller, "tsdb_get", fake_get)
    assert search_teams("Arsenal")[0].name == "Arsenal"
    assert calls == [{"t": "Arsenal"}]


def test_upsert_team_by_id():
    a = Team(id="1", name="Arsenal", founded="1886", stadium="S", league="L", description="", color="#fff")
    b = Team(id="2", name="Barcelona", founded="1899", stadium="S", league="L", description="", color="#fff")
    dup = Team(id="1", name="Arsenal FC", founded="?", stadium="?", league="?", description="", color="#000")

    assert upsert_team([a], b) == [a, b]
    out = upsert_team([a, b], dup)
    assert out == [a, b]
    assert out[0].name == "Arsenal"

from common.catalog import MATCHES, MATCH_DETAILS, TEAMS
from controllers.data_controller import (
    build_details, build_matches, get_match, get_match_detail, load_matches, load_teams,
    matches_to_frame, recent_matches_frame,
)
from models.match_model import EventKind, MatchStatus


def test_catalog_matches_load_in_order():
    matches = load_matches()
    assert [m.id for m in matches] == [d["id"] for d in MATCHES]
    assert matches[0].name == "Arsenal vs Chelsea"


def test_catalog_scores_only_on_completed_matches():
    for m in load_matches():
        assert m.scores_consistent, m.id
        assert m.has_score == (m.status is MatchStatus.COMPLETED)


def test_catalog_teams():
    teams = load_teams()
    assert len(teams) == len(TEAMS)
    arsenal = teams[0]
    assert arsenal.name == "Arsenal"
    assert arsenal.initial == "A"
    assert [r.outcome for r in arsenal.recent_matches[:3]] == ["win", "draw", "loss"]


def test_get_match_and_unknown_id():
    assert get_match("4").home_team == "Newcastle"
    assert get_match("404") is None


def test_match_detail_joined_with_fixture():
    detail = get_match_detail("1")
    assert detail is not None
    assert detail.match.home_team == "Arsenal"
    assert [e.minute for e in detail.events] == [23, 34, 56, 72, 78]
    assert detail.events[0].kind is EventKind.GOAL
    assert detail.events[0].assist == "Ødegaard"
    assert detail.events[1].assist is None
    assert detail.stats.possession.home == 58
    assert detail.stats.yellow_cards.away == 4
    assert [g.player for g in detail.goals] == ["Saka", "Sterling", "Jesus"]


def test_scheduled_fixture_joins_its_detail_record():
    detail = get_match_detail("2")
    assert detail is not None
    assert detail.match.status is MatchStatus.SCHEDULED
    assert not detail.match.has_score
    assert detail.stats.possession.away == 55
    assert [g.player for g in detail.goals] == ["Rashford", "Salah"]


def test_missing_detail_is_not_found():
    # match 4 exists in the fixture list but has no detail record
    assert get_match_detail("4") is None
    assert get_match_detail("does-not-exist") is None


def test_build_details_skips_unknown_fixtures():
    matches = build_matches(MATCHES[:1])
    details = build_details(matches, MATCH_DETAILS)
    assert list(details) == ["1"]


def test_matches_frame_columns_and_score():
    df = matches_to_frame(load_matches())
    assert list(df.columns) == ["MatchId", "MatchName", "Score", "Date", "Time", "Status", "Competition", "Venue"]
    assert df.loc[df["MatchId"] == "1", "Score"].iloc[0] == "2 - 1"
    assert df.loc[df["MatchId"] == "2", "Score"].iloc[0] == ""


def test_matches_frame_empty():
    df = matches_to_frame([])
    assert df.empty
    assert "MatchName" in df.columns


def test_recent_matches_frame_limits_rows():
    df = recent_matches_frame(load_teams()[0])
    assert len(df) == 3
    assert df["Outcome"].tolist() == ["win", "draw", "loss"]

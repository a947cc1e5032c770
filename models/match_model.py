"""
Small data models for match records.

The classes are frozen dataclasses so catalog entries can be passed around
pages without accidental modification. `from_dict` builders accept the
camelCase keys used by the catalog literals (same shape as the JSON the
pages historically rendered from).

    - `Match`: one fixture. Scores are only meaningful when the status is
        `Completed`; `scores_consistent` reports whether a record follows
        that rule.
    - `MatchDetail`: a `Match` plus its ordered event timeline and stats.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional


class MatchStatus(str, Enum):
    SCHEDULED = "Scheduled"
    LIVE = "Live"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, value: str) -> "MatchStatus":
        s = str(value or "").strip().lower()
        for m in cls:
            if m.value.lower() == s:
                return m
        raise ValueError(f"Unknown match status: {value!r}")


class EventKind(str, Enum):
    GOAL = "goal"
    YELLOW_CARD = "yellow_card"
    RED_CARD = "red_card"
    SUBSTITUTION = "substitution"


def _opt_int(val: Any) -> Optional[int]:
    return None if val is None else int(val)


@dataclass(frozen=True)
class Match:
    id: str
    home_team: str
    away_team: str
    date: str                     # YYYY-MM-DD
    time: str                     # HH:MM, local clock
    status: MatchStatus
    competition: str
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    venue: Optional[str] = None

    @property
    def name(self) -> str:
        return f"{self.home_team} vs {self.away_team}"

    @property
    def has_score(self) -> bool:
        return self.home_score is not None and self.away_score is not None

    @property
    def scores_consistent(self) -> bool:
        return self.has_score == (self.status is MatchStatus.COMPLETED)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Match":
        return cls(
            id=str(d["id"]),
            home_team=str(d["homeTeam"]),
            away_team=str(d["awayTeam"]),
            date=str(d["date"]),
            time=str(d.get("time", "")),
            status=MatchStatus.parse(d["status"]),
            competition=str(d.get("competition", "")),
            home_score=_opt_int(d.get("homeScore")),
            away_score=_opt_int(d.get("awayScore")),
            venue=d.get("venue") or None,
        )


@dataclass(frozen=True)
class MatchEvent:
    id: str
    kind: EventKind
    player: str
    team: str
    minute: int
    assist: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "MatchEvent":
        return cls(
            id=str(d["id"]),
            kind=EventKind(d["type"]),
            player=str(d["player"]),
            team=str(d["team"]),
            minute=int(d["minute"]),
            assist=d.get("assist") or None,
        )


@dataclass(frozen=True)
class StatPair:
    home: int
    away: int


@dataclass(frozen=True)
class MatchStats:
    possession: StatPair
    shots: StatPair
    shots_on_target: StatPair
    fouls: StatPair
    corners: StatPair
    yellow_cards: StatPair

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "MatchStats":
        def pair(key: str) -> StatPair:
            p = d.get(key) or {}
            return StatPair(home=int(p.get("home", 0)), away=int(p.get("away", 0)))

        return cls(
            possession=pair("possession"),
            shots=pair("shots"),
            shots_on_target=pair("shotsOnTarget"),
            fouls=pair("fouls"),
            corners=pair("corners"),
            yellow_cards=pair("yellowCards"),
        )


@dataclass(frozen=True)
class MatchDetail:
    match: Match
    stats: MatchStats
    events: List[MatchEvent] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.match.id

    @property
    def goals(self) -> List[MatchEvent]:
        return [e for e in self.events if e.kind is EventKind.GOAL]

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional


@dataclass(frozen=True)
class RecentMatch:
    opponent: str
    result: str          # e.g. "W 2-1", "D 1-1", "L 0-2"
    date: str

    @property
    def outcome(self) -> str:
        """'win', 'draw' or 'loss' from the result prefix."""
        r = self.result.strip().upper()
        if r.startswith("W"):
            return "win"
        if r.startswith("D"):
            return "draw"
        return "loss"


@dataclass(frozen=True)
class Team:
    id: str
    name: str
    founded: str
    stadium: str
    league: str
    description: str
    color: str
    recent_matches: List[RecentMatch] = field(default_factory=list)

    @property
    def initial(self) -> str:
        return self.name[:1].upper()

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Team":
        return cls(
            id=str(d["id"]),
            name=str(d["name"]),
            founded=str(d.get("founded", "")),
            stadium=str(d.get("stadium", "")),
            league=str(d.get("league", "")),
            description=str(d.get("description", "")),
            color=str(d.get("color", "")),
            recent_matches=[
                RecentMatch(opponent=str(m["opponent"]), result=str(m["result"]), date=str(m["date"]))
                for m in d.get("recentMatches") or []
            ],
        )


@dataclass(frozen=True)
class ExternalTeam:
    """
    One record of TheSportsDB `searchteams.php` response.

    Every field is optional because the provider omits or nulls them freely;
    defaulting happens in `controllers.search_controller.map_external_team`.
    """
    idTeam: Optional[str] = None
    strTeam: Optional[str] = None
    strLeague: Optional[str] = None
    intFormedYear: Optional[str] = None
    strStadium: Optional[str] = None
    strDescriptionEN: Optional[str] = None

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "ExternalTeam":
        def s(key: str) -> Optional[str]:
            v = raw.get(key)
            if v is None:
                return None
            v = str(v).strip()
            return v or None

        return cls(
            idTeam=s("idTeam"),
            strTeam=s("strTeam"),
            strLeague=s("strLeague"),
            intFormedYear=s("intFormedYear"),
            strStadium=s("strStadium"),
            strDescriptionEN=s("strDescriptionEN"),
        )

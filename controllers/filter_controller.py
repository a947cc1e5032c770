"""
Pure filtering helpers for the match and team lists.

Every function returns a new list that keeps the catalog order; nothing is
sorted. Date buckets compare ISO `YYYY-MM-DD` strings lexically, which only
works because the format is fixed width and zero padded. `today` can be
passed in so results are reproducible; otherwise the local calendar date is
used.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from common.constants import BUCKET_ALL, DATE_BUCKETS, STATUS_ALL, WEEK_DAYS
from common.utils import iso_day
from models.match_model import Match, MatchStatus
from models.team_model import Team

T = TypeVar("T")


@dataclass(frozen=True)
class MatchFilter:
    text: str = ""
    status: str = STATUS_ALL
    date_bucket: str = BUCKET_ALL


def _text_predicate(text: str) -> Optional[Callable[[Match], bool]]:
    needle = (text or "").strip().lower()
    if not needle:
        return None
    return lambda m: needle in m.home_team.lower() or needle in m.away_team.lower()


def _status_predicate(status: str) -> Optional[Callable[[Match], bool]]:
    s = (status or STATUS_ALL).strip().lower()
    if s == STATUS_ALL:
        return None
    wanted = MatchStatus.parse(s)   # ValueError on unknown status
    return lambda m: m.status is wanted


def _date_predicate(bucket: str, today: date) -> Optional[Callable[[Match], bool]]:
    b = (bucket or BUCKET_ALL).strip().lower()
    if b not in DATE_BUCKETS:
        raise ValueError(f"Unknown date bucket: {bucket!r}")
    if b == BUCKET_ALL:
        return None
    start = iso_day(today)
    if b == "today":
        return lambda m: m.date == start
    if b == "tomorrow":
        nxt = iso_day(today, 1)
        return lambda m: m.date == nxt
    end = iso_day(today, WEEK_DAYS)
    return lambda m: start <= m.date <= end


def filter_matches(catalog: Sequence[Match], criteria: Optional[MatchFilter] = None,
                   today: Optional[date] = None) -> List[Match]:
    """Return the matches satisfying text AND status AND date bucket, in catalog order."""
    criteria = criteria or MatchFilter()
    predicates = [
        p for p in (
            _text_predicate(criteria.text),
            _status_predicate(criteria.status),
            _date_predicate(criteria.date_bucket, today or date.today()),
        ) if p is not None
    ]
    return [m for m in catalog if all(p(m) for p in predicates)]


def filter_teams(catalog: Sequence[Team], text: str = "") -> List[Team]:
    """Case-insensitive substring match on team name or league."""
    needle = (text or "").strip().lower()
    if not needle:
        return list(catalog)
    return [t for t in catalog if needle in t.name.lower() or needle in t.league.lower()]


def resolve_favorites(catalog: Iterable[T], ids: Iterable[str]) -> List[T]:
    """Catalog entries whose id is a favorite, in catalog order. Unknown ids are skipped."""
    wanted = {str(i) for i in ids}
    return [item for item in catalog if item.id in wanted]

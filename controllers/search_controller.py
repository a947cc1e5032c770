"""
Remote team search against TheSportsDB `searchteams.php`.

    - `search_teams(query)` performs one GET and returns mapped `Team`s.
        A blank query returns `[]` without touching the network.
    - `map_external_team` is the pure mapping from the provider's record to
        the local `Team`, filling placeholders for missing fields.
    - `search_outcome` wraps `search_teams` for the pages, turning the two
        failures into an error or a notice message.
    - `upsert_team` adds a searched team to a catalog unless its id is
        already present.

Failures are raised as `common.errors.RequestFailed` (transport, timeout,
HTTP status, bad JSON) or `common.errors.NoResults` (the provider answered
but found nothing). Pages show a different message for each.
"""

from __future__ import annotations
import random
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import requests
from loguru import logger

from common.colors import pick_team_color
from common.constants import (
    HTTP_TIMEOUT_S, NO_DESCRIPTION, UNKNOWN_FOUNDED, UNKNOWN_LEAGUE, UNKNOWN_STADIUM,
)
from common.errors import NoResults, RequestFailed, SearchError
from common.utils import tsdb_get
from models.team_model import ExternalTeam, Team

SEARCH_PATH = "/searchteams.php"

Fetcher = Callable[..., Any]


def map_external_team(ext: ExternalTeam, color: str) -> Team:
    return Team(
        id=str(ext.idTeam),
        name=str(ext.strTeam),
        founded=ext.intFormedYear or UNKNOWN_FOUNDED,
        stadium=ext.strStadium or UNKNOWN_STADIUM,
        league=ext.strLeague or UNKNOWN_LEAGUE,
        description=ext.strDescriptionEN or NO_DESCRIPTION,
        color=color,
        recent_matches=[],
    )


def parse_search_response(data: Any) -> List[ExternalTeam]:
    if not isinstance(data, dict):
        raise RequestFailed(f"Unexpected response type: {type(data).__name__}")
    raw = data.get("teams") or []
    if not isinstance(raw, list):
        raise RequestFailed("Unexpected 'teams' field in response")

    out = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        ext = ExternalTeam.from_json(item)
        # id and name are the only fields without a placeholder
        if not ext.idTeam or not ext.strTeam:
            logger.warning("Skipping search record without id/name: {}", item.get("idTeam"))
            continue
        out.append(ext)
    return out


def search_teams(query: str, *, rng: Optional[random.Random] = None,
                 fetch: Optional[Fetcher] = None, timeout: float = HTTP_TIMEOUT_S) -> List[Team]:
    q = (query or "").strip()
    if not q:
        return []

    fetch = fetch or tsdb_get
    logger.info("Searching teams for {!r}", q)
    try:
        data = fetch(SEARCH_PATH, params={"t": q}, timeout=timeout)
    except requests.RequestException as e:
        logger.error("Team search request failed for {!r}: {}", q, e)
        raise RequestFailed(str(e)) from e
    except ValueError as e:
        # body was not JSON
        logger.error("Team search returned invalid JSON for {!r}: {}", q, e)
        raise RequestFailed(str(e)) from e

    records = parse_search_response(data)
    if not records:
        logger.info("No teams found for {!r}", q)
        raise NoResults(q)

    return [map_external_team(ext, pick_team_color(rng)) for ext in records]


def search_outcome(query: str, **kwargs) -> Tuple[List[Team], Optional[str], Optional[str]]:
    """Run `search_teams` for display as `(results, error, notice)`.

    `NoResults` becomes the notice and `RequestFailed` the error, each with
    its own user message.
    """
    try:
        return search_teams(query, **kwargs), None, None
    except NoResults as e:
        return [], None, e.user_message
    except SearchError as e:
        return [], e.user_message, None


def upsert_team(catalog: Sequence[Team], team: Team) -> List[Team]:
    if any(t.id == team.id for t in catalog):
        return list(catalog)
    return [*catalog, team]

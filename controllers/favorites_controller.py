"""
Favorites store: the sets of match ids and team ids a user has starred.

Each set lives under its own storage key (`favoriteMatches`,
`favoriteTeams`) as a JSON array of strings. The store never caches beyond
a single call: every operation reads the stored value, applies the change
and writes the whole array back, so a page can create a fresh store on
every rerun and still see the latest state.

Reading is fail-soft. Missing keys, malformed JSON and values of the wrong
shape all load as the empty set, because a corrupt cookie must never take
a page down.
"""

from __future__ import annotations
import json
from enum import Enum
from typing import Any, Iterable, Set, Union

from loguru import logger

from common.constants import FAVORITE_MATCHES_KEY, FAVORITE_TEAMS_KEY
from common.errors import StorageReadError
from common.storage import KeyValueStorage


class FavoriteKind(str, Enum):
    MATCH = "match"
    TEAM = "team"


STORAGE_KEYS = {
    FavoriteKind.MATCH: FAVORITE_MATCHES_KEY,
    FavoriteKind.TEAM: FAVORITE_TEAMS_KEY,
}


def _kind(kind: Union[FavoriteKind, str]) -> FavoriteKind:
    try:
        return FavoriteKind(kind)
    except ValueError:
        raise ValueError(f"Unknown favorites kind: {kind!r}") from None


def decode_ids(raw: Any) -> Set[str]:
    """Decode a stored value into a set of ids. Raises `StorageReadError` on bad data."""
    if raw is None or raw == "":
        raise StorageReadError("no stored value")
    value = raw
    if isinstance(raw, (str, bytes)):
        try:
            value = json.loads(raw)
        except ValueError as e:
            raise StorageReadError(f"not JSON: {e}") from e
    if not isinstance(value, list):
        raise StorageReadError(f"expected a JSON array, got {type(value).__name__}")
    ids = set()
    for item in value:
        # numbers are accepted and normalized, anything nested is not
        if isinstance(item, bool) or not isinstance(item, (str, int)):
            raise StorageReadError(f"unexpected item {item!r}")
        ids.add(str(item))
    return ids


def encode_ids(ids: Iterable[str]) -> str:
    return json.dumps(sorted(str(i) for i in ids))


class FavoritesStore:
    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    def load(self, kind: Union[FavoriteKind, str]) -> Set[str]:
        key = STORAGE_KEYS[_kind(kind)]
        try:
            return decode_ids(self.storage.get(key))
        except StorageReadError as e:
            logger.debug("Favorites {} unreadable, using empty set: {}", key, e)
            return set()

    def _save(self, kind: FavoriteKind, ids: Set[str]) -> Set[str]:
        self.storage.set(STORAGE_KEYS[kind], encode_ids(ids))
        return set(ids)

    def contains(self, kind: Union[FavoriteKind, str], item_id: str) -> bool:
        return str(item_id) in self.load(kind)

    def toggle(self, kind: Union[FavoriteKind, str], item_id: str) -> Set[str]:
        k = _kind(kind)
        ids = self.load(k)
        item_id = str(item_id)
        if item_id in ids:
            ids.discard(item_id)
            logger.info("Removed {} {} from favorites", k.value, item_id)
        else:
            ids.add(item_id)
            logger.info("Added {} {} to favorites", k.value, item_id)
        return self._save(k, ids)

    def add(self, kind: Union[FavoriteKind, str], item_id: str) -> Set[str]:
        k = _kind(kind)
        ids = self.load(k)
        ids.add(str(item_id))
        return self._save(k, ids)

    def remove(self, kind: Union[FavoriteKind, str], item_id: str) -> Set[str]:
        k = _kind(kind)
        ids = self.load(k)
        ids.discard(str(item_id))
        return self._save(k, ids)

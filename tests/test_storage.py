import json

from common.storage import CookieStorage, MemoryStorage
from controllers.favorites_controller import FavoriteKind, FavoritesStore


class FakeCookieManager:
    """Stands in for extra_streamlit_components.CookieManager (no browser)."""

    def __init__(self, cookies=None):
        self.cookies = dict(cookies or {})
        self.set_calls = []

    def get(self, cookie):
        return self.cookies.get(cookie)

    def set(self, cookie, val, **kwargs):
        self.set_calls.append((cookie, val, kwargs))


def test_memory_storage_shares_given_mapping():
    backing = {}
    MemoryStorage(backing).set("k", "v")
    assert backing == {"k": "v"}


def test_cookie_storage_reads_browser_value():
    cm = FakeCookieManager({"favoriteMatches": '["1"]'})
    store = FavoritesStore(CookieStorage(cm, mirror={}))
    assert store.load(FavoriteKind.MATCH) == {"1"}


def test_cookie_storage_accepts_auto_parsed_list():
    cm = FakeCookieManager({"favoriteTeams": ["4", "6"]})
    store = FavoritesStore(CookieStorage(cm, mirror={}))
    assert store.load(FavoriteKind.TEAM) == {"4", "6"}


def test_cookie_write_is_visible_before_browser_round_trip():
    cm = FakeCookieManager()
    mirror = {}
    store = FavoritesStore(CookieStorage(cm, mirror=mirror))
    store.toggle(FavoriteKind.MATCH, "2")
    store.toggle(FavoriteKind.MATCH, "3")

    assert store.load(FavoriteKind.MATCH) == {"2", "3"}
    assert json.loads(mirror["favoriteMatches"]) == ["2", "3"]
    # one cookie write per toggle, each with its own component key and an expiry
    keys = [kw["key"] for _, _, kw in cm.set_calls]
    assert len(set(keys)) == 2
    assert all("expires_at" in kw for _, _, kw in cm.set_calls)


def test_cookie_storage_missing_cookie_is_empty():
    store = FavoritesStore(CookieStorage(FakeCookieManager(), mirror={}))
    assert store.load(FavoriteKind.MATCH) == set()

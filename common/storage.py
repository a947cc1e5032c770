"""
Key-value storage backends used by the favorites store.

Two backends share the same tiny interface (`get(key)` / `set(key, value)`):
    - `MemoryStorage` keeps values in a plain dict. Tests use it, and pages
        fall back to it if the cookie component cannot be created.
    - `CookieStorage` persists values as browser cookies through
        `extra_streamlit_components.CookieManager`.

Notes:
    - The cookie component only reports browser cookies on the rerun *after*
        it is mounted, so the first read of a session may see nothing. The
        favorites store treats a missing value as the empty set.
    - Writes are mirrored into `st.session_state` so a toggle is visible in
        the same script run, before the browser round-trips the cookie.
    - The cookie component may hand back JSON-looking values already parsed
        (a list instead of a string); callers must accept both.
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Any, MutableMapping, Optional, Protocol

import streamlit as st
import extra_streamlit_components as stx
from loguru import logger

from common.constants import FAVORITES_COOKIE_DAYS

CM_KEY = "favorites_cookie_manager"
MIRROR_KEY = "_favorites_storage_mirror"


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Any: ...
    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    def __init__(self, data: Optional[MutableMapping[str, Any]] = None):
        self._data: MutableMapping[str, Any] = data if data is not None else {}

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def __repr__(self) -> str:
        return f"MemoryStorage({self._data!r})"


class CookieStorage:
    def __init__(self, manager: "stx.CookieManager", mirror: MutableMapping[str, Any],
                 max_age_days: int = FAVORITES_COOKIE_DAYS):
        self._cm = manager
        self._mirror = mirror
        self._days = max_age_days
        self._writes = 0

    def get(self, key: str) -> Any:
        if key in self._mirror:
            return self._mirror[key]
        try:
            return self._cm.get(key)
        except Exception as e:
            logger.debug("Cookie read failed for {}: {}", key, e)
            return None

    def set(self, key: str, value: str) -> None:
        self._mirror[key] = value
        # every component call in one run needs its own widget key
        self._writes += 1
        self._cm.set(
            key,
            value,
            expires_at=datetime.now() + timedelta(days=self._days),
            key=f"set_{key}_{self._writes}",
        )


def get_browser_storage() -> KeyValueStorage:
    """Build the cookie-backed storage for the current script run."""
    mirror = st.session_state.setdefault(MIRROR_KEY, {})
    try:
        cm = stx.CookieManager(key=CM_KEY)
    except Exception as e:
        logger.warning("Cookie manager unavailable, favorites will not persist: {}", e)
        return MemoryStorage(mirror)
    return CookieStorage(cm, mirror)

"""
Exception types shared by controllers and pages.

    - `StorageReadError` is raised while decoding a persisted favorites set
        and is always recovered inside the favorites store (empty set).
    - `SearchError` and its subclasses come out of the remote team search.
        Pages catch them and show `user_message` to the user.
"""

from __future__ import annotations
from common.constants import SEARCH_SUGGESTIONS


class StorageReadError(ValueError):
    """Persisted favorites value is absent or cannot be decoded."""


class SearchError(Exception):
    user_message = "Search failed."


class RequestFailed(SearchError):
    user_message = "Failed to search. Please check your connection and try again."


class NoResults(SearchError):
    def __init__(self, query: str):
        super().__init__(f"No teams found for {query!r}")
        self.query = query

    @property
    def user_message(self) -> str:
        sug = ", ".join(SEARCH_SUGGESTIONS[:-1]) + f", or {SEARCH_SUGGESTIONS[-1]}"
        return f'No results found for "{self.query}". Try searching for popular teams like {sug}.'

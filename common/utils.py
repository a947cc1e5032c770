"""
Common helpers shared by controllers and pages.

This module contains the network helper (a small requests.Session wrapper
around TheSportsDB v1 API), date helpers used by the date-bucket filter, and
a couple of Streamlit conveniences.

`tsdb_get` deliberately lets `requests` exceptions propagate; the search
controller decides how they are reported to the user.
"""

# Import libraries
from __future__ import annotations
from datetime import date, timedelta
from typing import Any, Dict, Optional

import requests
import streamlit as st

from .constants import TSDB_BASE_URL, HTTP_TIMEOUT_S, USER_AGENT

SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT})


def tsdb_get(path: str, params: Optional[Dict[str, Any]] = None, timeout: float = HTTP_TIMEOUT_S) -> Any:
    url = f"{TSDB_BASE_URL.rstrip('/')}/{path.lstrip('/')}"
    resp = SESSION.get(url, params=params or {}, timeout=timeout)
    resp.raise_for_status()
    return resp.json()


def iso_day(d: date, offset_days: int = 0) -> str:
    """`d + offset_days` as YYYY-MM-DD (fixed width, so strings compare like dates)."""
    return (d + timedelta(days=offset_days)).isoformat()


def format_match_date(iso: str) -> str:
    """'2025-01-07' -> 'Tue 07 Jan 2025'; returns the input unchanged if unparsable."""
    try:
        return date.fromisoformat(iso).strftime("%a %d %b %Y")
    except (TypeError, ValueError):
        return iso


def safe_rerun() -> None:
    if hasattr(st, "rerun"): st.rerun()
    elif hasattr(st, "experimental_rerun"): st.experimental_rerun()
    else: st.stop()

"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st


@dataclass(frozen=True)
class ViewModeConfig:
    key: str
    label: str


# Mutually exclusive renderings of the visible projects
VIEW_MODES: List[ViewModeConfig] = [
    ViewModeConfig("map", "Map View"),
    ViewModeConfig("list", "List View"),
]
DEFAULT_VIEW_MODE = "map"

# Geographic centroid of Nepal
MAP_CENTER = (28.3949, 84.124)
MAP_ZOOM = 7
MAP_HEIGHT = 620
TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)

SESSION_PREFIX = "nt_"
DEFAULT_TABLE = "projects"
DEFAULT_TIMEOUT_SECONDS = 30.0


def get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # No secrets.toml outside Streamlit Cloud
        pass
    return default


@dataclass(frozen=True)
class StoreSettings:
    """Connection settings for the Supabase REST endpoint."""

    url: Optional[str]
    api_key: Optional[str]
    table: str = DEFAULT_TABLE
    timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS

    @property
    def endpoint(self) -> str:
        base = (self.url or "").rstrip("/")
        return f"{base}/rest/v1/{self.table}"

    @classmethod
    def from_env(cls) -> "StoreSettings":
        raw_timeout = get_secret("SUPABASE_TIMEOUT")
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                timeout = DEFAULT_TIMEOUT_SECONDS
            if timeout is not None and timeout <= 0:
                timeout = None
        return cls(
            url=get_secret("SUPABASE_URL"),
            api_key=get_secret("SUPABASE_ANON_KEY") or get_secret("SUPABASE_KEY"),
            table=get_secret("SUPABASE_TABLE", DEFAULT_TABLE) or DEFAULT_TABLE,
            timeout=timeout,
        )

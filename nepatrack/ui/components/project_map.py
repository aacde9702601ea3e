"""
Folium map of projects, one status-colored pin per geolocated record.
"""

from __future__ import annotations

import html
import logging
import math
from typing import Any, Dict, List, Optional, Sequence

import folium
import streamlit as st
from streamlit_folium import st_folium

from nepatrack.config import MAP_CENTER, MAP_HEIGHT, MAP_ZOOM, TILE_ATTRIBUTION, TILE_URL
from nepatrack.data.models import ProjectRecord
from nepatrack.ui.components.formatting import status_badge_html, status_color

logger = logging.getLogger(__name__)

CLICK_TOLERANCE = 1e-6

PIN_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="32" height="32">'
    '<path fill="{color}" stroke="#fff" stroke-width="2" d="M12 2C8.13 2 5 5.13 5 9c0 5.25 7 13 '
    "7 13s7-7.75 7-13c0-3.87-3.13-7-7-7zm0 9.5c-1.38 0-2.5-1.12-2.5-2.5s1.12-2.5 2.5-2.5 2.5 "
    '1.12 2.5 2.5-1.12 2.5-2.5 2.5z"/></svg>'
)


def has_valid_coordinates(record: ProjectRecord) -> bool:
    lat, lon = record.latitude, record.longitude
    if lat is None or lon is None:
        return False
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0


def mappable_projects(records: Sequence[ProjectRecord]) -> List[ProjectRecord]:
    return [r for r in records if has_valid_coordinates(r)]


def popup_html(record: ProjectRecord) -> str:
    return (
        '<div style="padding:4px;min-width:160px;">'
        f'<div style="font-weight:600;font-size:0.9rem;">{html.escape(record.title)}</div>'
        f'<div style="color:#4b5563;font-size:0.75rem;margin:4px 0 6px;">{html.escape(record.location)}</div>'
        f"{status_badge_html(record.status, solid=True)}"
        "</div>"
    )


def _pin_icon(status: str) -> folium.DivIcon:
    return folium.DivIcon(
        html=PIN_SVG.format(color=status_color(status)),
        icon_size=(32, 32),
        icon_anchor=(16, 32),
        popup_anchor=(0, -32),
    )


def build_project_map(records: Sequence[ProjectRecord]) -> folium.Map:
    """Base map centered on Nepal with a marker for every mappable record."""
    m = folium.Map(
        location=list(MAP_CENTER),
        zoom_start=MAP_ZOOM,
        tiles=TILE_URL,
        attr=TILE_ATTRIBUTION,
        prefer_canvas=True,
    )

    skipped = 0
    for record in records:
        if not has_valid_coordinates(record):
            skipped += 1
            continue
        content = popup_html(record)
        folium.Marker(
            location=[record.latitude, record.longitude],
            icon=_pin_icon(record.status),
            tooltip=folium.Tooltip(content),
            popup=folium.Popup(content, max_width=280),
        ).add_to(m)

    if skipped:
        logger.debug("Skipped %d projects without usable coordinates", skipped)
    return m


def resolve_clicked_project(
    records: Sequence[ProjectRecord],
    click: Optional[Dict[str, Any]],
) -> Optional[ProjectRecord]:
    """Map a streamlit-folium click payload back to the first record at that spot."""
    if not click:
        return None
    try:
        lat = float(click["lat"])
        lng = float(click["lng"])
    except (KeyError, TypeError, ValueError):
        return None
    for record in mappable_projects(records):
        if abs(record.latitude - lat) <= CLICK_TOLERANCE and abs(record.longitude - lng) <= CLICK_TOLERANCE:
            return record
    return None


def render_project_map(records: Sequence[ProjectRecord], key: str) -> Optional[ProjectRecord]:
    """Draw the map and return the record clicked during this rerun, if any.

    streamlit-folium keeps reporting the last clicked object on every rerun,
    so a click is only acted on once per component key.
    """
    fmap = build_project_map(records)
    result = st_folium(
        fmap,
        key=key,
        height=MAP_HEIGHT,
        use_container_width=True,
        returned_objects=["last_object_clicked"],
    )
    click = (result or {}).get("last_object_clicked")
    handled_key = f"{key}_handled_click"
    if not click or click == st.session_state.get(handled_key):
        return None
    st.session_state[handled_key] = click
    return resolve_clicked_project(records, click)

"""
Layout helpers for the Streamlit application (page setup, header, filter bar).
"""

from __future__ import annotations

from typing import List

import streamlit as st

from nepatrack.config import SESSION_PREFIX, VIEW_MODES
from nepatrack.data.filters import ALL, ProjectFilters

SEARCH_PLACEHOLDER = "Search by project name, location, or details..."


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title="NepaTrack",
        layout="wide",
        page_icon=":world_map:",
    )


def render_header() -> None:
    st.markdown(
        "<h1 style='margin-bottom:0;'>"
        "<span style='color:#CE1126;'>Nepa</span><span style='color:#003893;'>Track</span>"
        "</h1>",
        unsafe_allow_html=True,
    )
    st.caption("Track Ongoing Projects Nationwide")


def _index_or_zero(options: List[str], value: str) -> int:
    return options.index(value) if value in options else 0


def view_mode_toggle(current: str) -> str:
    keys = [mode.key for mode in VIEW_MODES]
    labels = {mode.key: mode.label for mode in VIEW_MODES}
    return st.radio(
        "View",
        options=keys,
        index=_index_or_zero(keys, current),
        format_func=lambda k: labels[k],
        horizontal=True,
        key=f"{SESSION_PREFIX}view_mode",
        label_visibility="collapsed",
    )


def filter_bar(
    current: ProjectFilters,
    status_options: List[str],
    category_options: List[str],
) -> ProjectFilters:
    """
    Render the search box and the status/category selectors and return the
    selected values.
    """
    col_search, col_status, col_category = st.columns([3, 1, 1])
    with col_search:
        search_term = st.text_input(
            "Search",
            value=current.search_term,
            placeholder=SEARCH_PLACEHOLDER,
            key=f"{SESSION_PREFIX}search",
            label_visibility="collapsed",
        )
    with col_status:
        status = st.selectbox(
            "Status",
            options=status_options,
            index=_index_or_zero(status_options, current.status),
            format_func=lambda v: "All Status" if v == ALL else v,
            key=f"{SESSION_PREFIX}status",
            label_visibility="collapsed",
        )
    with col_category:
        category = st.selectbox(
            "Category",
            options=category_options,
            index=_index_or_zero(category_options, current.category),
            format_func=lambda v: "All Categories" if v == ALL else v,
            key=f"{SESSION_PREFIX}category",
            label_visibility="collapsed",
        )
    return ProjectFilters(search_term=search_term or "", status=status or ALL, category=category or ALL)

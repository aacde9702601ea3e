from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List, Optional, Tuple

import streamlit as st

from nepatrack.data.models import ProjectRecord
from nepatrack.ui.components.formatting import (
    DETAIL,
    NO_CONTRACTOR,
    NO_DESCRIPTION,
    NOT_SPECIFIED,
    category_badge_html,
    format_currency,
    format_date,
    status_badge_html,
)


@dataclass(frozen=True)
class ProjectDetail:
    title: str
    location: str
    status: str
    category: str
    description: str
    facts: List[Tuple[str, str]]


def _format_coordinates(record: ProjectRecord) -> str:
    if record.latitude is None or record.longitude is None:
        return NOT_SPECIFIED
    return f"{record.latitude:.4f}, {record.longitude:.4f}"


def build_detail(record: ProjectRecord) -> ProjectDetail:
    """Every attribute of the record with its detail-context fallback applied."""
    facts = [
        ("Budget", format_currency(record.budget, context=DETAIL)),
        ("Contractor", record.contractor or NO_CONTRACTOR),
        ("Start Date", format_date(record.start_date, context=DETAIL)),
        ("End Date", format_date(record.end_date, context=DETAIL)),
        ("Funding Source", record.funding_source or NOT_SPECIFIED),
        ("Coordinates", _format_coordinates(record)),
        ("Hash Value", record.id or NOT_SPECIFIED),
    ]
    return ProjectDetail(
        title=record.title,
        location=record.location,
        status=record.status,
        category=record.category,
        description=record.description or NO_DESCRIPTION,
        facts=facts,
    )


def render_project_details(record: Optional[ProjectRecord], key: str = "nt_close_details") -> bool:
    """Show the selected project; returns True when the user pressed Close.

    Nothing is rendered without a selection.
    """
    if record is None:
        return False

    detail = build_detail(record)
    with st.container(border=True):
        col_title, col_close = st.columns([5, 1])
        with col_title:
            st.subheader(detail.title)
            st.caption(f"📍 {detail.location}")
        with col_close:
            closed = st.button("✕ Close", key=key)

        st.markdown(
            f"{status_badge_html(detail.status)}&nbsp;{category_badge_html(detail.category)}",
            unsafe_allow_html=True,
        )
        st.write(detail.description)

        for idx in range(0, len(detail.facts), 2):
            cols = st.columns(2)
            for col, (label, value) in zip(cols, detail.facts[idx: idx + 2]):
                with col:
                    st.markdown(
                        f"<div style='font-size:0.7rem;font-weight:600;text-transform:uppercase;"
                        f"color:#334155;'>{html.escape(label)}</div>"
                        f"<div style='font-size:1.1rem;font-weight:700;'>{html.escape(value)}</div>",
                        unsafe_allow_html=True,
                    )
    return closed

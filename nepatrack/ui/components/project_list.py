"""
Vertical list of project cards with a CSV export of the visible rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from nepatrack.data.loader import records_to_frame
from nepatrack.data.models import ProjectRecord
from nepatrack.ui.components.formatting import (
    LIST,
    category_badge_html,
    format_currency,
    format_date_range,
    status_badge_html,
    truncate_text,
)

EMPTY_MESSAGE = "No projects found matching your criteria."


@dataclass(frozen=True)
class ProjectCard:
    project_id: str
    title: str
    location: str
    status: str
    category: str
    summary: str
    budget: str
    schedule: str


def build_card(record: ProjectRecord) -> ProjectCard:
    return ProjectCard(
        project_id=record.id,
        title=record.title,
        location=record.location,
        status=record.status,
        category=record.category,
        summary=truncate_text(record.description),
        budget=format_currency(record.budget, context=LIST),
        schedule=format_date_range(record.start_date, record.end_date),
    )


def _render_card(card: ProjectCard, key_prefix: str) -> bool:
    with st.container(border=True):
        col_title, col_status = st.columns([4, 1])
        with col_title:
            st.markdown(f"#### {card.title}")
        with col_status:
            st.markdown(status_badge_html(card.status), unsafe_allow_html=True)
        st.caption(f"📍 {card.location}")
        st.write(card.summary)
        col_budget, col_dates, col_category = st.columns([2, 2, 1])
        col_budget.markdown(f"💰 **{card.budget}**")
        col_dates.markdown(f"📅 **{card.schedule}**")
        col_category.markdown(category_badge_html(card.category), unsafe_allow_html=True)
        return st.button("View details", key=f"{key_prefix}_{card.project_id}")


def render_project_list(records: Sequence[ProjectRecord], key_prefix: str = "nt_card") -> Optional[ProjectRecord]:
    """Render one card per record and return the record whose button was pressed."""
    if not records:
        st.info(EMPTY_MESSAGE)
        return None

    clicked: Optional[ProjectRecord] = None
    for record in records:
        if _render_card(build_card(record), key_prefix) and clicked is None:
            clicked = record

    csv_bytes = records_to_frame(list(records)).to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name="projects_filtered.csv",
        mime="text/csv",
    )
    return clicked

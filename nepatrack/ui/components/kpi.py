from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

from nepatrack.data.filters import ProjectSummary


@dataclass
class KpiCard:
    label: str
    value: int
    help_text: Optional[str] = None


def summary_cards(summary: ProjectSummary) -> List[KpiCard]:
    return [
        KpiCard(
            "Total Projects",
            summary.total,
            help_text="Counts cover every project, not only the filtered ones.",
        ),
        KpiCard("In Progress", summary.in_progress),
        KpiCard("Completed", summary.completed),
    ]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 3) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(label=card.label, value=f"{card.value:,}")
                if card.help_text:
                    st.caption(card.help_text)

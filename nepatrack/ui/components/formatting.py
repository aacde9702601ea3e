"""
Utility helpers for formatting budgets, dates, status colors and badges.

List cards and the detail panel share the rules but differ in their
fallback literals, selected through the `context` argument.
"""

from __future__ import annotations

import datetime as dt
import html
from typing import Optional

DETAIL = "detail"
LIST = "list"

CURRENCY_CODE = "NPR"

MISSING_BUDGET = {DETAIL: "Not specified", LIST: "Budget not specified"}
MISSING_DATE = {DETAIL: "Not specified", LIST: "TBD"}
NO_DESCRIPTION = "No description available."
NO_CONTRACTOR = "Not assigned"
NOT_SPECIFIED = "Not specified"

STATUS_COLORS = {
    "Completed": "#10b981",
    "In Progress": "#3b82f6",
    "Planning": "#f59e0b",
    "On Hold": "#ef4444",
}
UNKNOWN_STATUS_COLOR = "#6b7280"

# (background, foreground) pairs for light badges
STATUS_BADGE_COLORS = {
    "Completed": ("#d1fae5", "#065f46"),
    "In Progress": ("#dbeafe", "#1e40af"),
    "Planning": ("#fef3c7", "#92400e"),
    "On Hold": ("#ffe4e6", "#9f1239"),
}
NEUTRAL_BADGE_COLORS = ("#f1f5f9", "#1e293b")


def format_currency(value: Optional[float], context: str = DETAIL) -> str:
    if not value:
        return MISSING_BUDGET[context]
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return MISSING_BUDGET[context]
    return f"{CURRENCY_CODE} {numeric:,.0f}"


def format_date(value: Optional[dt.date], context: str = DETAIL) -> str:
    if value is None:
        return MISSING_DATE[context]
    if context == LIST:
        return value.strftime("%b %Y")
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_date_range(start: Optional[dt.date], end: Optional[dt.date]) -> str:
    return f"{format_date(start, LIST)} - {format_date(end, LIST)}"


def truncate_text(text: Optional[str], max_chars: int = 180) -> str:
    """Shorten a description to roughly two card lines."""
    if not text:
        return NO_DESCRIPTION
    collapsed = " ".join(text.split())
    if len(collapsed) <= max_chars:
        return collapsed
    cut = collapsed[:max_chars].rsplit(" ", 1)[0] or collapsed[:max_chars]
    return cut.rstrip(" ,.;:") + "…"


def status_color(status: Optional[str]) -> str:
    return STATUS_COLORS.get(status or "", UNKNOWN_STATUS_COLOR)


def status_badge_html(status: Optional[str], solid: bool = False) -> str:
    """Inline badge markup; `solid` uses the marker color, as in map popups."""
    label = html.escape(status or "Unknown")
    if solid:
        background, foreground = status_color(status), "#ffffff"
    else:
        background, foreground = STATUS_BADGE_COLORS.get(status or "", NEUTRAL_BADGE_COLORS)
    return _badge(label, background, foreground)


def category_badge_html(category: Optional[str]) -> str:
    background, foreground = NEUTRAL_BADGE_COLORS
    return _badge(html.escape(category or "Uncategorized"), background, foreground)


def _badge(label: str, background: str, foreground: str) -> str:
    return (
        f'<span style="background-color:{background};color:{foreground};'
        "padding:2px 10px;border-radius:4px;font-size:0.75rem;font-weight:600;"
        f'text-transform:uppercase;letter-spacing:0.03em;">{label}</span>'
    )

"""Tests for shared display formatting rules."""

import datetime as dt

import pytest

from nepatrack.ui.components.formatting import (
    DETAIL,
    LIST,
    NO_DESCRIPTION,
    UNKNOWN_STATUS_COLOR,
    category_badge_html,
    format_currency,
    format_date,
    format_date_range,
    status_badge_html,
    status_color,
    truncate_text,
)


class TestCurrency:
    @pytest.mark.parametrize("value", [None, 0, 0.0])
    def test_missing_budget_literals(self, value):
        assert format_currency(value, DETAIL) == "Not specified"
        assert format_currency(value, LIST) == "Budget not specified"

    def test_whole_rupees_with_grouping(self):
        assert format_currency(1_500_000) == "NPR 1,500,000"
        assert format_currency(2_499.6, LIST) == "NPR 2,500"


class TestDates:
    def test_missing_date_literals(self):
        assert format_date(None, DETAIL) == "Not specified"
        assert format_date(None, LIST) == "TBD"

    def test_detail_uses_full_month(self):
        assert format_date(dt.date(2024, 3, 5), DETAIL) == "March 5, 2024"

    def test_list_uses_short_month_and_year(self):
        assert format_date(dt.date(2024, 3, 5), LIST) == "Mar 2024"

    def test_range(self):
        assert format_date_range(dt.date(2023, 7, 16), None) == "Jul 2023 - TBD"


class TestStatusStyling:
    @pytest.mark.parametrize("status,color", [
        ("Completed", "#10b981"),
        ("In Progress", "#3b82f6"),
        ("Planning", "#f59e0b"),
        ("On Hold", "#ef4444"),
    ])
    def test_known_status_colors(self, status, color):
        assert status_color(status) == color

    @pytest.mark.parametrize("status", ["Cancelled", "", None])
    def test_unknown_status_is_gray(self, status):
        assert status_color(status) == UNKNOWN_STATUS_COLOR

    def test_solid_badge_uses_marker_color(self):
        badge = status_badge_html("On Hold", solid=True)
        assert "#ef4444" in badge
        assert "On Hold" in badge

    def test_badges_escape_text(self):
        assert "&lt;b&gt;" in category_badge_html("<b>")
        assert "<b>" not in status_badge_html("<b>")


class TestTruncate:
    def test_missing_description(self):
        assert truncate_text(None) == NO_DESCRIPTION
        assert truncate_text("") == NO_DESCRIPTION

    def test_short_text_untouched(self):
        assert truncate_text("A short  note\nhere") == "A short note here"

    def test_long_text_cut_on_word(self):
        text = "word " * 100
        result = truncate_text(text, max_chars=40)
        assert result.endswith("…")
        assert len(result) <= 41
        assert "wor…" not in result

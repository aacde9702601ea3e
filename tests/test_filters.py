"""Tests for the project filter engine."""

import itertools

import pytest

from nepatrack.data.filters import (
    ALL,
    DEFAULT_FILTERS,
    STATUS_OPTIONS,
    ProjectFilters,
    apply_filters,
    category_options,
    filter_projects,
    serialize_filters,
    summarize,
)

SEARCH_TERMS = ["", "road", "KATHMANDU", "bridge", "zzz", "a"]
STATUSES = [ALL, "In Progress", "Completed", "Planning", "Archived"]
CATEGORIES = [ALL, "Road", "Bridge", "Water", "Missing"]


def _ids(records):
    return [r.id for r in records]


class TestScenario:
    def test_search_matches_title(self, scenario_records):
        assert _ids(filter_projects(scenario_records, "road", ALL, ALL)) == ["b"]

    def test_status_filter(self, scenario_records):
        assert _ids(filter_projects(scenario_records, "", "Completed", ALL)) == ["a"]

    def test_category_filter(self, scenario_records):
        assert _ids(filter_projects(scenario_records, "", ALL, "Bridge")) == ["a"]

    def test_search_matches_location(self, scenario_records):
        assert _ids(filter_projects(scenario_records, "pokh", ALL, ALL)) == ["b"]


class TestProperties:
    def test_noop_filters_are_identity(self, mixed_records):
        assert filter_projects(mixed_records, "", ALL, ALL) == mixed_records
        assert apply_filters(mixed_records, DEFAULT_FILTERS) == mixed_records

    @pytest.mark.parametrize("term,status,category", list(itertools.product(SEARCH_TERMS, STATUSES, CATEGORIES)))
    def test_result_is_ordered_subsequence_and_idempotent(self, mixed_records, term, status, category):
        result = filter_projects(mixed_records, term, status, category)

        positions = [mixed_records.index(r) for r in result]
        assert positions == sorted(positions)
        assert filter_projects(result, term, status, category) == result

    @pytest.mark.parametrize("status", ["In Progress", "Completed", "Archived"])
    def test_status_mismatch_always_excluded(self, mixed_records, status):
        for term, category in itertools.product(SEARCH_TERMS, CATEGORIES):
            result = filter_projects(mixed_records, term, status, category)
            assert all(r.status == status for r in result)

    def test_search_is_case_insensitive(self, mixed_records):
        lower = filter_projects(mixed_records, "kathmandu", ALL, ALL)
        assert lower == filter_projects(mixed_records, "KATHMANDU", ALL, ALL)
        assert lower == filter_projects(mixed_records, "KaThMaNdU", ALL, ALL)
        assert _ids(lower) == ["1", "4"]

    def test_missing_description_still_matches_title(self, mixed_records):
        assert _ids(filter_projects(mixed_records, "mid-hill", ALL, ALL)) == ["3"]

    def test_description_only_match(self, mixed_records):
        assert _ids(filter_projects(mixed_records, "tunnel", ALL, ALL)) == ["1"]

    def test_predicates_are_anded(self, mixed_records):
        assert _ids(filter_projects(mixed_records, "road", "In Progress", "Road")) == ["4"]
        assert filter_projects(mixed_records, "road", "Completed", "Road") == []

    def test_empty_input(self):
        assert filter_projects([], "anything", "Completed", "Road") == []


class TestOptionsAndSummary:
    def test_status_options_are_fixed(self):
        assert STATUS_OPTIONS == [ALL, "Planning", "In Progress", "Completed", "On Hold"]

    def test_category_options_first_seen_order(self, mixed_records):
        assert category_options(mixed_records) == [ALL, "Water", "Bridge", "Road", "Energy"]

    def test_category_options_without_records(self):
        assert category_options([]) == [ALL]

    def test_summary_counts(self, mixed_records):
        summary = summarize(mixed_records)
        assert (summary.total, summary.in_progress, summary.completed) == (5, 2, 1)
        assert summary.completed + summary.in_progress <= summary.total

    def test_serialize_filters(self):
        filters = ProjectFilters("road", "Planning", ALL)
        assert serialize_filters(filters) == {"search_term": "road", "status": "Planning", "category": ALL}

"""
Filter utilities that apply the dashboard's search, status and category
filters to the project snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from nepatrack.data.models import KNOWN_STATUSES, ProjectRecord, ProjectStatus

ALL = "all"

STATUS_OPTIONS: List[str] = [ALL] + KNOWN_STATUSES


@dataclass(frozen=True)
class ProjectFilters:
    search_term: str = ""
    status: str = ALL
    category: str = ALL


DEFAULT_FILTERS = ProjectFilters()


@dataclass(frozen=True)
class ProjectSummary:
    total: int
    in_progress: int
    completed: int


def _contains(haystack: Optional[str], needle: str) -> bool:
    if haystack is None:
        return False
    return needle in haystack.lower()


def matches_search(record: ProjectRecord, search_term: str) -> bool:
    needle = (search_term or "").lower()
    if not needle:
        return True
    return (
        _contains(record.title, needle)
        or _contains(record.location, needle)
        or _contains(record.description, needle)
    )


def matches_status(record: ProjectRecord, status: str) -> bool:
    return status == ALL or record.status == status


def matches_category(record: ProjectRecord, category: str) -> bool:
    return category == ALL or record.category == category


def filter_projects(
    records: Sequence[ProjectRecord],
    search_term: str = "",
    status: str = ALL,
    category: str = ALL,
) -> List[ProjectRecord]:
    """
    Return the records matching all three predicates, in input order.
    """
    return [
        record
        for record in records
        if matches_search(record, search_term)
        and matches_status(record, status)
        and matches_category(record, category)
    ]


def apply_filters(records: Sequence[ProjectRecord], filters: ProjectFilters) -> List[ProjectRecord]:
    return filter_projects(records, filters.search_term, filters.status, filters.category)


def category_options(records: Sequence[ProjectRecord]) -> List[str]:
    """The "all" sentinel followed by each observed category in first-seen order."""
    options = [ALL]
    for record in records:
        if record.category not in options:
            options.append(record.category)
    return options


def summarize(records: Sequence[ProjectRecord]) -> ProjectSummary:
    return ProjectSummary(
        total=len(records),
        in_progress=sum(1 for r in records if r.status == ProjectStatus.IN_PROGRESS),
        completed=sum(1 for r in records if r.status == ProjectStatus.COMPLETED),
    )


def serialize_filters(filters: ProjectFilters) -> Dict[str, Any]:
    """
    Convert the ProjectFilters dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "search_term": filters.search_term,
        "status": filters.status,
        "category": filters.category,
    }

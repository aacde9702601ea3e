"""
View state owned by the dashboard controller.

The state is an immutable dataclass kept in `st.session_state`; every change
goes through one of the transition functions below, which return a new
state instead of mutating the old one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Sequence, Tuple

from nepatrack.config import DEFAULT_VIEW_MODE, VIEW_MODES
from nepatrack.data.filters import (
    ALL,
    STATUS_OPTIONS,
    ProjectFilters,
    ProjectSummary,
    category_options,
    filter_projects,
    serialize_filters,
    summarize,
)
from nepatrack.data.loader import FetchError
from nepatrack.data.models import ProjectRecord

logger = logging.getLogger(__name__)

VIEW_MODE_KEYS = [mode.key for mode in VIEW_MODES]


@dataclass(frozen=True)
class ViewState:
    records: Tuple[ProjectRecord, ...] = ()
    loading: bool = False
    loaded: bool = False
    load_error: Optional[str] = None
    selected_id: Optional[str] = None
    view_mode: str = DEFAULT_VIEW_MODE
    search_term: str = ""
    status_filter: str = ALL
    category_filter: str = ALL
    # Bumped on close and on view switches so the map widget forgets its last click
    map_generation: int = 0

    @property
    def filters(self) -> ProjectFilters:
        return ProjectFilters(self.search_term, self.status_filter, self.category_filter)


def begin_loading(state: ViewState) -> ViewState:
    return replace(state, loading=True, load_error=None)


def finish_loading(state: ViewState, records: Sequence[ProjectRecord]) -> ViewState:
    return replace(state, records=tuple(records), loading=False, loaded=True, load_error=None)


def fail_loading(state: ViewState, error: Exception) -> ViewState:
    return replace(state, records=(), loading=False, loaded=True, load_error=str(error))


def load_initial_projects(
    state: ViewState,
    fetch: Callable[[], Sequence[ProjectRecord]],
) -> ViewState:
    """Run the one-time fetch; failures are logged and leave an empty snapshot."""
    if state.loaded:
        return state
    state = begin_loading(state)
    try:
        records = fetch()
    except FetchError as exc:
        logger.error("Error fetching projects (%s): %s", exc.kind, exc)
        return fail_loading(state, exc)
    return finish_loading(state, records)


def select_project(state: ViewState, record: Optional[ProjectRecord]) -> ViewState:
    if record is None:
        return state
    return replace(state, selected_id=record.id)


def clear_selection(state: ViewState) -> ViewState:
    return replace(state, selected_id=None, map_generation=state.map_generation + 1)


def set_view_mode(state: ViewState, view_mode: str) -> ViewState:
    if view_mode not in VIEW_MODE_KEYS:
        raise ValueError(f"Unknown view mode: {view_mode}")
    if view_mode == state.view_mode:
        return state
    # The map is remounted on return, so clicks from its previous mount are stale
    return replace(state, view_mode=view_mode, map_generation=state.map_generation + 1)


def set_filters(state: ViewState, filters: ProjectFilters) -> ViewState:
    if filters == state.filters:
        return state
    logger.debug("Filters changed: %s", serialize_filters(filters))
    return replace(
        state,
        search_term=filters.search_term,
        status_filter=filters.status,
        category_filter=filters.category,
    )


def visible_projects(state: ViewState) -> List[ProjectRecord]:
    return filter_projects(state.records, state.search_term, state.status_filter, state.category_filter)


def selected_project(state: ViewState) -> Optional[ProjectRecord]:
    if state.selected_id is None:
        return None
    return next((r for r in state.records if r.id == state.selected_id), None)


def category_choices(state: ViewState) -> List[str]:
    return category_options(state.records)


def status_choices() -> List[str]:
    return list(STATUS_OPTIONS)


def summary(state: ViewState) -> ProjectSummary:
    return summarize(state.records)

import nepatrack.bootstrap_env  # must be first to set env/secrets
import streamlit as st

from nepatrack.config import SESSION_PREFIX
from nepatrack.data.loader import load_projects
from nepatrack.logging_config import setup_logging
from nepatrack.ui import state as vs
from nepatrack.ui.components.kpi import render_kpi_cards, summary_cards
from nepatrack.ui.components.project_details import render_project_details
from nepatrack.ui.components.project_list import render_project_list
from nepatrack.ui.components.project_map import render_project_map
from nepatrack.ui.layout import filter_bar, render_header, setup_page, view_mode_toggle

STATE_KEY = f"{SESSION_PREFIX}view_state"


def _get_state() -> vs.ViewState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = vs.ViewState()
    return st.session_state[STATE_KEY]


def _commit(state: vs.ViewState) -> vs.ViewState:
    st.session_state[STATE_KEY] = state
    return state


def main() -> None:
    setup_logging()
    setup_page()

    state = _get_state()

    col_brand, col_mode = st.columns([3, 1])
    with col_brand:
        render_header()
    with col_mode:
        state = _commit(vs.set_view_mode(state, view_mode_toggle(state.view_mode)))

    if not state.loaded and not state.loading:
        state = _commit(vs.begin_loading(state))
    if state.loading:
        with st.spinner("Loading projects..."):
            state = _commit(vs.load_initial_projects(state, load_projects))

    filters = filter_bar(state.filters, vs.status_choices(), vs.category_choices(state))
    state = _commit(vs.set_filters(state, filters))
    render_kpi_cards(summary_cards(vs.summary(state)))

    if state.load_error:
        st.warning(f"Projects could not be loaded: {state.load_error}")

    if render_project_details(vs.selected_project(state)):
        _commit(vs.clear_selection(state))
        st.rerun()

    visible = vs.visible_projects(state)
    if state.view_mode == "map":
        clicked = render_project_map(visible, key=f"{SESSION_PREFIX}map_{state.map_generation}")
    else:
        clicked = render_project_list(visible)

    if clicked is not None and clicked.id != state.selected_id:
        _commit(vs.select_project(state, clicked))
        st.rerun()


if __name__ == "__main__":
    main()

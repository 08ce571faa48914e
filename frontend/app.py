import logging

import streamlit as st

from planner_ui.client import PlannerRequestError, fetch_journeys
from planner_ui.state import Event, Failed, Mode, Submitted, Succeeded, ViewState, update
from planner_ui.views import (
    IDLE_TEXT,
    LOADING_TEXT,
    render_error,
    render_journey_card,
    render_placeholder,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
logger = logging.getLogger("planner_ui.app")


def dispatch(event: Event) -> ViewState:
    state = update(st.session_state["view_state"], event)
    st.session_state["view_state"] = state
    return state


def render_results(state: ViewState) -> None:
    if state.mode is Mode.LOADING:
        render_placeholder(LOADING_TEXT)
    elif state.mode is Mode.ERROR:
        render_error(state.error)
    elif state.mode is Mode.RESULTS:
        for card in state.journeys:
            render_journey_card(card)
    else:
        render_placeholder(IDLE_TEXT)


st.set_page_config(page_title="Haulage Journey Planner", layout="wide")
st.title("Nigerian Haulage Journey Planner")
st.caption("Backend: FastAPI | UI: Streamlit | Routes planned by a hosted model")

if "view_state" not in st.session_state:
    st.session_state["view_state"] = ViewState()
state: ViewState = st.session_state["view_state"]

with st.sidebar.form("journey_form"):
    st.subheader("Plan Your Journeys")
    # inputs stay enabled: toggling `disabled` recreates keyed widgets and drops their text
    origin = st.text_input("Origin City", key="origin", placeholder="e.g., Lagos")
    destinations = st.text_area(
        "Destination Cities (one per line)",
        key="destinations",
        placeholder="e.g., Kano\nAbuja\nPort Harcourt",
    )
    submitted = st.form_submit_button(
        "Planning..." if state.is_loading else "Plan Journeys",
        disabled=state.is_loading,
    )

if submitted:
    state = dispatch(Submitted(origin=origin, destinations=destinations))
    if state.is_loading:
        # rerun so the submit button renders disabled while the request is in flight
        st.rerun()

render_results(state)

if state.is_loading:
    request = state.pending
    with st.spinner("Planning..."):
        try:
            outcome: Event = Succeeded(fetch_journeys(request.origin, request.destinations))
        except PlannerRequestError:
            logger.warning("Showing generic error for origin %s", request.origin)
            outcome = Failed()
    dispatch(outcome)
    st.rerun()

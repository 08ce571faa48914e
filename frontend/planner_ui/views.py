from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import streamlit as st

IDLE_TEXT = "Your journey plans will appear here."
LOADING_TEXT = "Generating your comprehensive journey plans..."

SUMMARY_LABELS = [
    ("Total Distance", "totalDistance"),
    ("Total Days", "totalDays"),
    ("Fuel Required", "fuelRequired"),
    ("Fuel Cost", "fuelCost"),
]
SEGMENT_COLUMNS = [
    ("Segment", "segment"),
    ("Drive Time", "driveTime"),
    ("Distance (km)", "distance"),
    ("Arrival Location", "arrivalLocation"),
    ("Stop Type", "stopType"),
    ("State", "state"),
    ("Safety", "safety"),
]


@dataclass(frozen=True)
class JourneyCard:
    title: str
    summary: Tuple[Tuple[str, str], ...]
    rows: Tuple[Dict[str, str], ...]


def format_number(value: Any) -> str:
    """en-US grouping: 1234 -> "1,234", 1234.5 -> "1,234.5" (at most 3 decimals)."""
    number = float(value)
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.3f}".rstrip("0").rstrip(".")


def journey_card(journey: Dict[str, Any]) -> JourneyCard:
    summary = journey["summary"]
    rows = []
    for segment in journey["segments"]:
        row = {label: str(segment[key]) for label, key in SEGMENT_COLUMNS}
        row["Segment"] = format_number(segment["segment"])
        row["Distance (km)"] = format_number(segment["distance"])
        rows.append(row)
    return JourneyCard(
        title=f"{journey['origin']} → {journey['destination']}",
        summary=tuple((label, str(summary[key])) for label, key in SUMMARY_LABELS),
        rows=tuple(rows),
    )


def parse_journeys(payload: Dict[str, Any]) -> Tuple[JourneyCard, ...]:
    return tuple(journey_card(j) for j in payload["journeys"])


def render_placeholder(text: str) -> None:
    st.info(text)


def render_error(message: str) -> None:
    st.error(message)


def render_journey_card(card: JourneyCard) -> None:
    with st.expander(card.title, expanded=True):
        st.subheader("Trip Summary")
        cols = st.columns(len(card.summary))
        for col, (label, value) in zip(cols, card.summary):
            col.metric(label, value)

        st.subheader("Route Plan")
        rows: List[Dict[str, str]] = list(card.rows)
        st.dataframe(rows, hide_index=True)

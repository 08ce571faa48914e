"""View state for the journey planner page.

The page shows exactly one of four modes. ``ViewState`` checks on construction
that its fields agree with its mode, and ``update`` is the only way the page
moves between modes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from planner_ui.views import JourneyCard

MISSING_INPUT_ERROR = "Please provide both an origin and at least one destination."
GENERIC_PLAN_ERROR = (
    "An error occurred while generating the journey plan. The model might be unable "
    "to find routes or has produced an invalid response. Please check your locations "
    "and try again."
)


class Mode(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULTS = "results"
    ERROR = "error"


@dataclass(frozen=True)
class PlanRequest:
    origin: str
    destinations: str


@dataclass(frozen=True)
class ViewState:
    mode: Mode = Mode.IDLE
    pending: Optional[PlanRequest] = None
    journeys: Tuple[JourneyCard, ...] = ()
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.pending is not None) != (self.mode is Mode.LOADING):
            raise ValueError(f"pending request is only allowed while loading, got {self.mode}")
        if (self.error is not None) != (self.mode is Mode.ERROR):
            raise ValueError(f"error message is only allowed in error mode, got {self.mode}")
        if self.journeys and self.mode is not Mode.RESULTS:
            raise ValueError(f"journeys are only allowed in results mode, got {self.mode}")

    @property
    def is_loading(self) -> bool:
        return self.mode is Mode.LOADING


@dataclass(frozen=True)
class Submitted:
    origin: str
    destinations: str


@dataclass(frozen=True)
class Succeeded:
    journeys: Tuple[JourneyCard, ...]


@dataclass(frozen=True)
class Failed:
    message: str = GENERIC_PLAN_ERROR


Event = Union[Submitted, Succeeded, Failed]


def update(state: ViewState, event: Event) -> ViewState:
    if isinstance(event, Submitted):
        if state.is_loading:
            # one request at a time
            return state
        if not event.origin.strip() or not event.destinations.strip():
            return ViewState(mode=Mode.ERROR, error=MISSING_INPUT_ERROR)
        request = PlanRequest(origin=event.origin.strip(), destinations=event.destinations)
        return ViewState(mode=Mode.LOADING, pending=request)

    if not state.is_loading:
        return state
    if isinstance(event, Succeeded):
        return ViewState(mode=Mode.RESULTS, journeys=tuple(event.journeys))
    if isinstance(event, Failed):
        return ViewState(mode=Mode.ERROR, error=event.message)
    raise TypeError(f"Unknown event: {event!r}")

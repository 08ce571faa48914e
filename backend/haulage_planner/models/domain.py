from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Summary:
    total_distance: str
    total_days: str
    fuel_required: str
    fuel_cost: str


@dataclass(frozen=True)
class Segment:
    segment: int
    drive_time: str
    distance: float
    arrival_location: str
    stop_type: str
    state: str
    safety: str


@dataclass(frozen=True)
class Journey:
    origin: str
    destination: str
    summary: Summary
    segments: Tuple[Segment, ...] = field(default_factory=tuple)

from typing import List

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from haulage_planner.core.errors import MISSING_INPUT_ERROR
from haulage_planner.models.domain import Journey, Segment, Summary


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JourneyRequest(BaseModel):
    origin: str
    destinations: str

    @field_validator("origin", "destinations")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(MISSING_INPUT_ERROR)
        return value

    @property
    def clean_origin(self) -> str:
        return self.origin.strip()


class SummarySchema(CamelModel):
    total_distance: str
    total_days: str
    fuel_required: str
    fuel_cost: str

    @classmethod
    def from_domain(cls, obj: Summary) -> "SummarySchema":
        return cls(
            total_distance=obj.total_distance,
            total_days=obj.total_days,
            fuel_required=obj.fuel_required,
            fuel_cost=obj.fuel_cost,
        )

    def to_domain(self) -> Summary:
        return Summary(
            total_distance=self.total_distance,
            total_days=self.total_days,
            fuel_required=self.fuel_required,
            fuel_cost=self.fuel_cost,
        )


class SegmentSchema(CamelModel):
    segment: int
    drive_time: str
    distance: float
    arrival_location: str
    stop_type: str
    state: str
    safety: str

    @classmethod
    def from_domain(cls, obj: Segment) -> "SegmentSchema":
        return cls(
            segment=obj.segment,
            drive_time=obj.drive_time,
            distance=obj.distance,
            arrival_location=obj.arrival_location,
            stop_type=obj.stop_type,
            state=obj.state,
            safety=obj.safety,
        )

    def to_domain(self) -> Segment:
        return Segment(
            segment=self.segment,
            drive_time=self.drive_time,
            distance=self.distance,
            arrival_location=self.arrival_location,
            stop_type=self.stop_type,
            state=self.state,
            safety=self.safety,
        )


class JourneySchema(CamelModel):
    origin: str
    destination: str
    summary: SummarySchema
    segments: List[SegmentSchema]

    @classmethod
    def from_domain(cls, obj: Journey) -> "JourneySchema":
        return cls(
            origin=obj.origin,
            destination=obj.destination,
            summary=SummarySchema.from_domain(obj.summary),
            segments=[SegmentSchema.from_domain(s) for s in obj.segments],
        )

    def to_domain(self) -> Journey:
        return Journey(
            origin=self.origin,
            destination=self.destination,
            summary=self.summary.to_domain(),
            segments=tuple(s.to_domain() for s in self.segments),
        )


class JourneyPlanPayload(CamelModel):
    """Shape the model is asked to produce, also used as the API response."""

    journeys: List[JourneySchema]

    @classmethod
    def from_domain(cls, journeys: List[Journey]) -> "JourneyPlanPayload":
        return cls(journeys=[JourneySchema.from_domain(j) for j in journeys])

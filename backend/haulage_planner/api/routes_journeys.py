from fastapi import APIRouter, Depends

from haulage_planner.api import get_app_settings, get_completion_backend, get_guard
from haulage_planner.core.config import Settings
from haulage_planner.llm.client import CompletionBackend
from haulage_planner.models.schemas import JourneyPlanPayload, JourneyRequest
from haulage_planner.services.journey_service import InFlightGuard, JourneyService

router = APIRouter()


def get_journey_service(
    backend: CompletionBackend = Depends(get_completion_backend),
    guard: InFlightGuard = Depends(get_guard),
    config: Settings = Depends(get_app_settings),
) -> JourneyService:
    return JourneyService(backend=backend, guard=guard, timeout=config.llm_timeout_seconds)


@router.post("", response_model=JourneyPlanPayload)
async def create_journeys(
    body: JourneyRequest,
    service: JourneyService = Depends(get_journey_service),
) -> JourneyPlanPayload:
    journeys = await service.plan_journeys(body)
    return JourneyPlanPayload.from_domain(journeys)

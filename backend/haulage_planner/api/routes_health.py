from fastapi import APIRouter, Depends

from haulage_planner.api import get_app_settings, get_guard
from haulage_planner.core.config import Settings
from haulage_planner.services.journey_service import InFlightGuard

router = APIRouter()


@router.get("/health")
def healthcheck(
    config: Settings = Depends(get_app_settings),
    guard: InFlightGuard = Depends(get_guard),
) -> dict:
    return {
        "status": "ok",
        "llm_provider": config.llm_provider,
        "planner_busy": guard.busy,
    }

import logging

from fastapi import Depends, HTTPException
from starlette.requests import Request

from haulage_planner.core.config import Settings
from haulage_planner.core.errors import CompletionError, PlanGenerationError
from haulage_planner.llm.client import CompletionBackend, build_backend
from haulage_planner.services.journey_service import InFlightGuard

logger = logging.getLogger(__name__)


def get_guard(request: Request) -> InFlightGuard:
    guard = getattr(request.app.state, "guard", None)
    if guard is None:
        raise HTTPException(status_code=500, detail="In-flight guard not initialized")
    return guard


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_completion_backend(config: Settings = Depends(get_app_settings)) -> CompletionBackend:
    try:
        return build_backend(config)
    except CompletionError as exc:
        logger.error("Cannot build completion backend: %s", exc)
        raise PlanGenerationError() from exc

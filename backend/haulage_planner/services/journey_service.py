import asyncio
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List

from haulage_planner.core.errors import (
    CompletionError,
    PlanGenerationError,
    PlannerBusyError,
    ResponseParseError,
)
from haulage_planner.llm.client import CompletionBackend, CompletionRequest
from haulage_planner.llm.parser import parse_journeys
from haulage_planner.llm.prompts import build_journey_prompt
from haulage_planner.models.domain import Journey
from haulage_planner.models.schemas import JourneyRequest

logger = logging.getLogger(__name__)

# Blocking model calls run here; the in-flight guard keeps it to one at a time per app.
_model_calls = ThreadPoolExecutor(max_workers=4, thread_name_prefix="model-call")


class InFlightGuard:
    """Single slot: at most one model call runs at a time.

    The slot is held until the worker thread is done, not just until the caller
    stops waiting, so a timed-out call still blocks new ones while it is on the wire.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def try_acquire(self) -> bool:
        return self._lock.acquire(blocking=False)

    def release(self) -> None:
        self._lock.release()


class JourneyService:
    def __init__(self, backend: CompletionBackend, guard: InFlightGuard, timeout: float):
        self.backend = backend
        self.guard = guard
        self.timeout = timeout

    async def plan_journeys(self, request: JourneyRequest) -> List[Journey]:
        prompt = build_journey_prompt(request.clean_origin, request.destinations)
        if not self.guard.try_acquire():
            raise PlannerBusyError()
        try:
            future = _model_calls.submit(self.backend.complete, CompletionRequest(prompt=prompt))
        except RuntimeError:
            self.guard.release()
            raise
        # fires once the thread returns, or at once if the call is cancelled before it starts
        future.add_done_callback(self._release_guard)
        return await self._collect(request, future)

    def _release_guard(self, _future: Future) -> None:
        self.guard.release()

    async def _collect(self, request: JourneyRequest, future: Future) -> List[Journey]:
        try:
            text = await asyncio.wait_for(asyncio.wrap_future(future), timeout=self.timeout)
            journeys = parse_journeys(text)
        except asyncio.TimeoutError as exc:
            logger.error("Model call exceeded %.1fs for origin %s", self.timeout, request.clean_origin)
            raise PlanGenerationError() from exc
        except (CompletionError, ResponseParseError) as exc:
            logger.error("Journey planning failed for origin %s: %s", request.clean_origin, exc)
            raise PlanGenerationError() from exc
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected failure while planning from %s", request.clean_origin)
            raise PlanGenerationError() from exc

        logger.info(
            "Generated %d journey plan(s) from %s",
            len(journeys),
            request.clean_origin,
        )
        return journeys

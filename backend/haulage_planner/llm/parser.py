import logging
from typing import List

from pydantic import ValidationError

from haulage_planner.core.errors import ResponseParseError
from haulage_planner.models.domain import Journey
from haulage_planner.models.schemas import JourneyPlanPayload

logger = logging.getLogger(__name__)


def parse_journeys(text: str) -> List[Journey]:
    """Validate a completion against the journey shape and build domain objects.

    Either every journey is accepted or a ResponseParseError is raised.
    """
    try:
        payload = JourneyPlanPayload.model_validate_json(text.strip())
    except ValidationError as exc:
        logger.error("Invalid journey JSON from model (%d errors): %s", exc.error_count(), text[:500])
        raise ResponseParseError("Model returned an invalid journey plan") from exc
    return [journey.to_domain() for journey in payload.journeys]

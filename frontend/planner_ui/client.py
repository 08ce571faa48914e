import logging
import os
from typing import Tuple

import requests

from planner_ui.views import JourneyCard, parse_journeys

logger = logging.getLogger(__name__)

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")
BACKEND_TIMEOUT = float(os.getenv("BACKEND_TIMEOUT", "120"))


class PlannerRequestError(Exception):
    """Planning failed; the cause is logged, never shown."""


def post_journeys(origin: str, destinations: str) -> dict:
    resp = requests.post(
        f"{BACKEND_URL}/journeys",
        json={"origin": origin, "destinations": destinations},
        timeout=BACKEND_TIMEOUT,
    )
    resp.raise_for_status()
    return resp.json()


def fetch_journeys(origin: str, destinations: str) -> Tuple[JourneyCard, ...]:
    try:
        payload = post_journeys(origin, destinations)
        return parse_journeys(payload)
    except requests.RequestException as exc:
        logger.error("Journey planner request failed: %s", exc)
        raise PlannerRequestError(str(exc)) from exc
    except (KeyError, TypeError, ValueError) as exc:
        logger.error("Journey planner returned an unexpected payload: %r", exc)
        raise PlannerRequestError("unexpected payload") from exc

from typing import Any, Dict, Optional

from fastapi import HTTPException, status

GENERIC_PLAN_ERROR = (
    "An error occurred while generating the journey plan. The model might be unable "
    "to find routes or has produced an invalid response. Please check your locations "
    "and try again."
)
MISSING_INPUT_ERROR = "Please provide both an origin and at least one destination."


class CompletionError(Exception):
    """The remote model could not produce a completion."""


class ResponseParseError(ValueError):
    """The completion text does not match the journey response shape."""


class APIError(HTTPException):
    def __init__(self, status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status_code, detail=message)
        self.code = code
        self.details = details


class PlanGenerationError(APIError):
    def __init__(self, message: str = GENERIC_PLAN_ERROR):
        super().__init__(status.HTTP_502_BAD_GATEWAY, "GENERATION_FAILED", message)


class PlannerBusyError(APIError):
    def __init__(self, message: str = "A journey plan is already being generated. Please wait."):
        super().__init__(status.HTTP_409_CONFLICT, "PLANNER_BUSY", message)


def error_content(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"error": {"code": code, "message": message, "details": details}}

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from haulage_planner.api import routes_health, routes_journeys
from haulage_planner.core.config import Settings, settings
from haulage_planner.core.errors import APIError, MISSING_INPUT_ERROR, error_content
from haulage_planner.core.logging import configure_logging
from haulage_planner.services.journey_service import InFlightGuard

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: HTTPException):
    if isinstance(exc, APIError):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_content(exc.code, str(exc.detail), exc.details),
        )
    code = "NOT_FOUND" if exc.status_code == status.HTTP_404_NOT_FOUND else "INTERNAL_ERROR"
    return JSONResponse(status_code=exc.status_code, content=error_content(code, str(exc.detail)))


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    first_error = exc.errors()[0] if exc.errors() else {}
    path = ".".join(str(item) for item in first_error.get("loc", []) if item != "body")
    details = {"field": path, "reason": first_error.get("msg")}
    # only the blank-field validator raises value_error
    blank_input = first_error.get("type") == "value_error"
    message = MISSING_INPUT_ERROR if blank_input else "Invalid request body"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_content("VALIDATION_ERROR", message, details),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled server error: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("INTERNAL_ERROR", "Internal server error"),
    )


def create_app(config: Settings = settings) -> FastAPI:
    configure_logging(config.log_level)
    app = FastAPI(title=config.app_name, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_journeys.router, prefix="/journeys", tags=["journeys"])

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # One guard per process: the model is asked for one plan at a time
    app.state.guard = InFlightGuard()
    app.state.settings = config
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)

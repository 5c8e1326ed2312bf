"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from filmes_api import __version__
from filmes_api.api import api_router
from filmes_api.config import get_settings
from filmes_api.database import engine
from filmes_api.services.base import ProblemError, ValidationProblemError, collect_errors

PROBLEM_MEDIA_TYPE = "application/problem+json"

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan - runs on startup and shutdown."""
    # Startup
    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("Debug mode: %s", settings.debug)
    logger.info("Database: %s", settings.database_url.split("@")[-1])  # Hide credentials

    # Validate and log warnings
    warnings = settings.validate_runtime_config()
    if warnings:
        logger.warning("Configuration warnings:")
        for warning in warnings:
            logger.warning("  - %s", warning)
    else:
        logger.info("Configuration validation passed - no warnings")

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Application shutting down")
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)


def problem_response(exc: ProblemError) -> JSONResponse:
    """Render a ProblemError as an RFC 7807 response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_problem().model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
    )


@app.exception_handler(ProblemError)
async def problem_error_handler(_request: Request, exc: ProblemError) -> JSONResponse:
    """Handle NotFoundError and ValidationProblemError globally."""
    return problem_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed requests with a 400 validation problem."""
    logger.debug("Request validation failed: %s", exc.errors())
    return problem_response(ValidationProblemError(collect_errors(list(exc.errors()))))


# Include API router
app.include_router(api_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the API is running."""
    return {"status": "healthy", "version": __version__}

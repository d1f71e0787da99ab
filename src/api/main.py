"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.adapters.repository.memory import InMemoryUserRepository
from src.api.auth import router as auth_router
from src.api.auth.routes import error_response
from src.api.models import HealthResponse
from src.config.settings import Settings, get_settings
from src.domain.validation import FieldError

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "auth",
        "description": "User registration - Gmail-only sign up with password rules",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Resets the store (seeding it per settings) on startup and clears it on
    shutdown, so every lifespan cycle starts from the same data.
    """
    repository: InMemoryUserRepository = app.state.repository
    repository.init(seed=app.state.seed_fixture_user)
    logger.info("Starting application with %s user(s)", len(repository.get_all()))

    yield

    logger.info("Shutting down application...")
    repository.clear()
    logger.info("User store cleared")


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies with the same 400 envelope as rule failures."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append(FieldError(field=".".join(loc) or "body", message=error.get("msg", "")))
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert unexpected faults to the generic 500 envelope."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(
    settings: Settings | None = None,
    repository: InMemoryUserRepository | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration; defaults to get_settings()
        repository: User store to serve; a new one (seeded per settings)
            is created when omitted

    Returns:
        Configured FastAPI instance with the store in app.state.repository
    """
    settings = settings or get_settings()
    logging.getLogger("src").setLevel(settings.log_level.upper())

    if repository is None:
        repository = InMemoryUserRepository()
        repository.init(seed=settings.seed_fixture_user)

    app = FastAPI(
        title="registration-api",
        description="User Registration API - Validates and stores Gmail-only sign ups",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    app.state.repository = repository
    app.state.seed_fixture_user = settings.seed_fixture_user

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(auth_router, prefix="/api/auth")

    @app.get("/api/health", response_model=HealthResponse, tags=["health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            message="API is running",
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    return app


app = create_app()

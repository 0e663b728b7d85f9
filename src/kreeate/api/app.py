"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kreeate.api.dependencies import (
    close_state_store,
    init_settings,
    init_state_store,
)
from kreeate.api.exceptions import BadRequestError, ForbiddenError, UnauthorizedError
from kreeate.api.models import APIResponse
from kreeate.api.routes import admin, preferences, projects
from kreeate.config import Settings
from kreeate.logging import get_logger, setup_logging
from kreeate.projects import InvalidProjectURLError, RemoteAPIError
from kreeate.state_store import StateStoreError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = get_logger("api")


def remote_error_status(message: str) -> int:
    """Pick the HTTP status for an upstream GitHub failure from its message."""
    lower = message.lower()
    if "access" in lower or "not found" in lower:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    setup_logging()
    init_settings(settings)
    init_state_store(settings.db_path)
    logger.info("Kreeate API started (db=%s)", settings.db_path)
    yield
    close_state_store()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Kreeate API",
        description="REST API for Kreeate - GitHub issue drafting and project boards",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings if settings is not None else Settings.from_env()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(_request: Request, _exc: UnauthorizedError) -> JSONResponse:
        return _error(status.HTTP_401_UNAUTHORIZED, "Unauthorized")

    @app.exception_handler(ForbiddenError)
    async def forbidden_handler(_request: Request, _exc: ForbiddenError) -> JSONResponse:
        return _error(status.HTTP_403_FORBIDDEN, "Forbidden")

    @app.exception_handler(BadRequestError)
    async def bad_request_handler(_request: Request, exc: BadRequestError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(InvalidProjectURLError)
    async def invalid_url_handler(_request: Request, exc: InvalidProjectURLError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RemoteAPIError)
    async def remote_api_handler(_request: Request, exc: RemoteAPIError) -> JSONResponse:
        message = str(exc) or "Failed to fetch project board"
        return _error(remote_error_status(message), message)

    @app.exception_handler(StateStoreError)
    async def state_store_error_handler(_request: Request, exc: StateStoreError) -> JSONResponse:
        logger.error("State store failure: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    app.include_router(projects.router, prefix="/api/v1")
    app.include_router(preferences.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()

"""
FastAPI application setup and configuration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import Config, get_config
from core import StorageError

from .middleware import RequestLoggingMiddleware
from .routes import register_routes
from .state import close_state, open_state

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

API_TITLE = "Plugin Feed"
API_VERSION = "1.0.0"


# =============================================================================
# Error Handlers
# =============================================================================


async def storage_error_handler(request: Request, exc: StorageError) -> PlainTextResponse:
    """Map store failures to 503 so clients can tell them from bad input."""
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return PlainTextResponse("Storage unavailable", status_code=503)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    fields = sorted({".".join(str(part) for part in error["loc"][1:]) for error in exc.errors()})
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return PlainTextResponse(f"Invalid request: {', '.join(fields)}", status_code=422)


# =============================================================================
# FastAPI App
# =============================================================================


def create_app(config: Config | None = None) -> FastAPI:
    """
    Build the application.

    The engine, store and event bus are created in the lifespan, so each
    running app owns its own instances.

    Args:
        config: Configuration override (defaults to get_config())
    """
    settings = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting plugin feed server")
        state = await open_state(settings)
        app.state.plugin_feed = state
        try:
            yield
        finally:
            await close_state(state)
            logger.info("Plugin feed server stopped")

    app = FastAPI(title=API_TITLE, version=API_VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging middleware (added after CORS so it runs first)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(StorageError, storage_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]

    register_routes(app)
    return app

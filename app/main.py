# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Drizzle API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   python -m app                      # startup checks, then serve on $PORT
#   uvicorn app.main:app --port 8080   # startup checks run in the lifespan
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from app import __version__
from app.config import Settings, settings as default_settings
from app.exceptions import (
    DrizzleException,
    drizzle_exception_handler,
    unexpected_exception_handler,
)
from app.logging_config import configure_logging
from app.middleware import RequestLoggingMiddleware
from app.routers import health, records
from app.startup import start_datastore
from core.readiness import ReadinessFlag
from lib.postgres_client import PostgresDatastore

# Configure logging
configure_logging(default_settings.LOG_LEVEL, default_settings.LOG_FORMAT)
logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    datastore: PostgresDatastore | None = None,
    readiness: ReadinessFlag | None = None,
) -> FastAPI:
    """
    Build the application.

    When no datastore is passed in, the app owns one: the lifespan opens and
    pings it on startup (raising StartupError on failure) and closes it on
    shutdown. A datastore passed in is assumed to be managed by the caller.
    """
    settings = settings or default_settings
    owns_datastore = datastore is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: connect to the database and mark the service ready
        - Shutdown: close the connection pool
        """
        logger.info("Starting Drizzle API service")

        if owns_datastore:
            result = await start_datastore(app.state.datastore, app.state.readiness)
            if not result.ok:
                raise result.error

        yield

        logger.info("Shutting down Drizzle API")
        if owns_datastore:
            await app.state.datastore.close()

    app = FastAPI(
        title="Drizzle API",
        description="Record ingestion service with liveness and readiness probes.",
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Health",
                "description": "Welcome message, liveness and readiness probes",
            },
            {
                "name": "Records",
                "description": "Create records in the database",
            },
        ],
    )

    app.state.settings = settings
    app.state.datastore = datastore or PostgresDatastore(settings.connection_params)
    app.state.readiness = readiness or ReadinessFlag()

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(DrizzleException, drizzle_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return await unexpected_exception_handler(request, exc)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        health.router,
        prefix=settings.route_prefix,
        tags=["Health"]
    )

    app.include_router(
        records.router,
        prefix=settings.route_prefix,
        tags=["Records"]
    )

    return app


# ASGI entrypoint (uvicorn app.main:app)
app = create_app()

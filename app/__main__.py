# =============================================================================
# app/__main__.py - Process Entry Point
# =============================================================================
# Runs the service the way an orchestrator expects:
#   read env -> connect + ping database -> mark ready -> serve on $PORT
#
# Exit codes:
#   0  server stopped normally
#   1  database unreachable at startup, or the listener could not bind
#
# Usage:
#   python -m app
#   drizzle-api
# =============================================================================

import asyncio
import logging
import sys

import uvicorn

from app.config import Settings, get_settings
from app.logging_config import configure_logging
from app.main import create_app
from app.startup import start_datastore
from core.readiness import ReadinessFlag
from lib.postgres_client import PostgresDatastore

logger = logging.getLogger("app")

EXIT_OK = 0
EXIT_STARTUP_FAILURE = 1


def log_defaults(settings: Settings) -> None:
    """Note which settings fell back to their defaults."""
    if "DB_PORT" not in settings.model_fields_set:
        logger.info(f"No DB_PORT specified, using default: {settings.DB_PORT}")
    if "PORT" not in settings.model_fields_set:
        logger.info(f"No PORT specified, using default: {settings.PORT}")


async def serve(settings: Settings) -> int:
    """
    Start the datastore, then run uvicorn until it is told to stop.

    Returns:
        Process exit code
    """
    datastore = PostgresDatastore(settings.connection_params)
    readiness = ReadinessFlag()

    result = await start_datastore(datastore, readiness)
    if not result.ok:
        logger.critical("Startup failed, exiting", extra=result.error.log_fields())
        return EXIT_STARTUP_FAILURE

    app = create_app(settings, datastore=datastore, readiness=readiness)
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host="0.0.0.0",
            port=settings.PORT,
            log_config=None,
            access_log=False,
        )
    )

    logger.info("Server starting", extra={"port": settings.PORT})
    try:
        await server.serve()
    finally:
        await datastore.close()

    return EXIT_OK if server.started else EXIT_STARTUP_FAILURE


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    log_defaults(settings)
    sys.exit(asyncio.run(serve(settings)))


if __name__ == "__main__":
    main()

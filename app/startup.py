# =============================================================================
# app/startup.py - Startup Routine
# =============================================================================
# Brings the datastore up before any traffic is served:
#   open pool -> ping -> mark ready
#
# Failures are returned, not raised, so the entry point decides how the
# process exits and tests can exercise the failure paths directly.
# =============================================================================

import logging
from dataclasses import dataclass

from app.exceptions import StartupError
from core.readiness import ReadinessFlag
from lib.postgres_client import DatastoreError, PostgresDatastore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartupResult:
    """Outcome of start_datastore. `error` is None on success."""
    error: StartupError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def start_datastore(
    datastore: PostgresDatastore,
    readiness: ReadinessFlag,
) -> StartupResult:
    """
    Open and verify the database connection, then flip the readiness flag.

    The flag is only set after a successful ping. If the ping fails the
    pool is closed again so nothing is left half-open.
    """
    params = datastore.params
    logger.info(
        "Attempting database connection",
        extra={"host": params.host, "port": params.port, "db_name": params.database},
    )

    try:
        await datastore.open()
    except DatastoreError as e:
        logger.error("Failed to open database connection", extra=e.log_fields())
        return StartupResult(error=StartupError(e.message, stage="open"))

    try:
        await datastore.ping()
    except DatastoreError as e:
        logger.error("Failed to ping database", extra=e.log_fields())
        await datastore.close()
        return StartupResult(error=StartupError(e.message, stage="ping"))

    logger.info("Successfully connected to database")
    readiness.set_ready(True)
    return StartupResult()

# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and orchestrators:
# - /isActive: static welcome message
# - /health/live: process is up, no dependency checks
# - /health/ready: startup finished and the database answers a ping
# =============================================================================

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.dependencies import DatastoreDep, ReadinessDep
from lib.postgres_client import DatastoreError

logger = logging.getLogger(__name__)

router = APIRouter()

WELCOME_MESSAGE = "Welcome to Drizzle"


# =============================================================================
# Response Models
# =============================================================================

class WelcomeResponse(BaseModel):
    """Welcome message response."""
    message: str


class StatusResponse(BaseModel):
    """Probe response."""
    status: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/isActive", response_model=WelcomeResponse)
async def is_active():
    """
    Welcome endpoint.

    Always answers, independent of database state.
    """
    logger.debug("Health check called")
    return WelcomeResponse(message=WELCOME_MESSAGE)


@router.get("/health/live", response_model=StatusResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    Used by Kubernetes/Docker for restart decisions.
    """
    logger.debug("Liveness check called")
    return StatusResponse(status="alive")


@router.get(
    "/health/ready",
    response_model=StatusResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": StatusResponse}},
)
async def readiness_check(readiness: ReadinessDep, datastore: DatastoreDep):
    """
    Readiness check endpoint.

    503 "not ready" until startup has completed, 503 "database not ready"
    when the database stops answering, 200 "ready" otherwise.
    """
    if not readiness.is_ready():
        logger.warning("Readiness check failed: application not ready")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not ready"},
        )

    try:
        await datastore.ping()
    except DatastoreError as e:
        logger.error(
            "Readiness check failed: database not responding",
            extra={"error": e.message},
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "database not ready"},
        )

    logger.debug("Readiness check passed")
    return StatusResponse(status="ready")

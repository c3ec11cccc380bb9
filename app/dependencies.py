# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The datastore, readiness flag and settings live on app.state; create_app()
# puts them there, so tests can swap in their own objects.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.readiness import ReadinessFlag
from lib.postgres_client import PostgresDatastore


def get_datastore(request: Request) -> PostgresDatastore:
    """Get the shared datastore handle."""
    return request.app.state.datastore


def get_readiness(request: Request) -> ReadinessFlag:
    """Get the process readiness flag."""
    return request.app.state.readiness


def get_app_settings(request: Request) -> Settings:
    """Get the settings the app was created with."""
    return request.app.state.settings


# Type aliases for dependency injection
DatastoreDep = Annotated[PostgresDatastore, Depends(get_datastore)]
ReadinessDep = Annotated[ReadinessFlag, Depends(get_readiness)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]

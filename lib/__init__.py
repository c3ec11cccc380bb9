# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - postgres_client.py: asyncpg pool wrapper (open / ping / execute / close)
# - utils.py: Shared utilities (error base class, command status parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.postgres_client import (
    ConnectionParameters,
    DatastoreConnectionError,
    DatastoreError,
    DatastoreQueryError,
    DatastoreUnreachableError,
    PostgresDatastore,
)
from lib.utils import ApplicationError, rows_affected

__all__ = [
    # Datastore
    "ConnectionParameters",
    "PostgresDatastore",
    "DatastoreError",
    "DatastoreConnectionError",
    "DatastoreUnreachableError",
    "DatastoreQueryError",
    # Utils
    "ApplicationError",
    "rows_affected",
]

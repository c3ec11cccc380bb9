# =============================================================================
# lib/postgres_client.py - PostgreSQL Datastore Connector
# =============================================================================
# This module wraps an asyncpg connection pool behind the three operations
# the API needs:
# - open: create the pool from connection parameters
# - ping: verify the database answers a trivial query
# - execute: run one parameterized statement, return rows affected
#
# Driver errors are translated into DatastoreError subclasses so route
# handlers never have to know about asyncpg.
#
# Usage:
#   from lib.postgres_client import ConnectionParameters, PostgresDatastore
#   datastore = PostgresDatastore(ConnectionParameters(user="app", ...))
#   await datastore.open()
#   await datastore.ping()
#   count = await datastore.execute("INSERT INTO t (id) VALUES ($1)", "a")
# =============================================================================

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import asyncpg

from lib.utils import ApplicationError, rows_affected

# Set up logging for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================

class DatastoreError(ApplicationError):
    """Base error for datastore operations."""

    def __init__(self, message: str, code: str = "DATASTORE_ERROR", **kwargs):
        super().__init__(message, code=code, **kwargs)


class DatastoreConnectionError(DatastoreError):
    """Raised when the connection pool cannot be created."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message,
            code="CONNECTION_FAILED",
            suggestion="Check DB_USER, DB_PASSWORD, DB_NAME and DB_PORT, and that PostgreSQL is running",
            **kwargs,
        )


class DatastoreUnreachableError(DatastoreError):
    """Raised when the database does not answer a ping."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, code="DATABASE_UNREACHABLE", **kwargs)


class DatastoreQueryError(DatastoreError):
    """Raised when a statement fails to execute."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, code="QUERY_FAILED", **kwargs)


# =============================================================================
# Connection Parameters
# =============================================================================

@dataclass(frozen=True)
class ConnectionParameters:
    """
    Everything needed to reach the database.

    Values are passed through untouched: empty strings are legal and the
    server decides whether they are acceptable. The port stays a string
    because that is how it arrives from the environment.
    """

    host: str = "127.0.0.1"
    port: str = "5432"
    user: str = ""
    password: str = ""
    database: str = ""

    def as_pool_kwargs(self) -> dict[str, Any]:
        """
        Convert to keyword arguments for asyncpg.create_pool.

        Raises:
            ValueError: If the port is not an integer
        """
        return {
            "host": self.host,
            "port": int(self.port),
            "user": self.user,
            "password": self.password,
            "database": self.database,
            "ssl": False,
        }


# =============================================================================
# Datastore
# =============================================================================

class PostgresDatastore:
    """
    Pooled PostgreSQL handle shared by every request.

    The pool is safe for concurrent use, so one instance is created at
    startup and passed to the route handlers through app.state.

    Example:
        datastore = PostgresDatastore(params)
        await datastore.open()
        await datastore.execute(
            "INSERT INTO tablea (id, name) VALUES ($1, $2)", "1", "Ada"
        )
        await datastore.close()
    """

    def __init__(self, params: ConnectionParameters):
        self.params = params
        self._pool: asyncpg.Pool | None = None

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    async def open(self) -> None:
        """
        Create the connection pool.

        Raises:
            DatastoreConnectionError: If the pool cannot be created
        """
        try:
            self._pool = await asyncpg.create_pool(**self.params.as_pool_kwargs())
        except (OSError, ValueError, asyncio.TimeoutError, asyncpg.PostgresError, asyncpg.InterfaceError) as e:
            raise DatastoreConnectionError(
                str(e),
                details={"host": self.params.host, "port": self.params.port, "db_name": self.params.database},
            ) from e
        logger.debug("Connection pool created")

    async def ping(self) -> None:
        """
        Check that the database answers.

        Raises:
            DatastoreUnreachableError: If the pool is not open or the query fails
        """
        if self._pool is None:
            raise DatastoreUnreachableError("connection pool is not open")
        try:
            async with self._pool.acquire() as conn:
                await conn.execute("SELECT 1")
        except (OSError, asyncio.TimeoutError, asyncpg.PostgresError, asyncpg.InterfaceError) as e:
            raise DatastoreUnreachableError(str(e)) from e

    async def execute(self, statement: str, *params: Any) -> int:
        """
        Run a single parameterized statement.

        Args:
            statement: SQL using $1, $2, ... placeholders
            *params: Values bound to the placeholders

        Returns:
            Number of rows affected

        Raises:
            DatastoreQueryError: If the pool is not open or the statement fails
        """
        if self._pool is None:
            raise DatastoreQueryError("connection pool is not open")
        try:
            status = await self._pool.execute(statement, *params)
        except (OSError, asyncio.TimeoutError, asyncpg.PostgresError, asyncpg.InterfaceError) as e:
            raise DatastoreQueryError(str(e)) from e
        return rows_affected(status)

    async def close(self) -> None:
        """Close the pool. Safe to call more than once."""
        if self._pool is None:
            return
        pool, self._pool = self._pool, None
        await pool.close()
        logger.info("Database connection pool closed")

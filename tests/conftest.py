# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - FakeDatastore: in-memory stand-in with the PostgresDatastore interface
# - API client fixtures wired to the fake datastore
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("DB_USER", "drizzle")
os.environ.setdefault("DB_PASSWORD", "test-password")
os.environ.setdefault("DB_NAME", "drizzle_test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.readiness import ReadinessFlag
from lib.postgres_client import (
    ConnectionParameters,
    DatastoreConnectionError,
    DatastoreQueryError,
    DatastoreUnreachableError,
)


# =============================================================================
# Fake Datastore
# =============================================================================

class FakeDatastore:
    """
    In-memory datastore keyed by record id.

    Behaves like a table with a primary key on `id`: inserting an existing
    id fails the way PostgreSQL reports a unique violation.
    """

    def __init__(self):
        self.params = ConnectionParameters(user="drizzle", database="drizzle_test")
        self.rows: dict[str, str] = {}
        self.statements: list[tuple[str, tuple]] = []
        self.reachable = True
        self.fail_open = False
        self.opened = False
        self.closed = False

    async def open(self) -> None:
        if self.fail_open:
            raise DatastoreConnectionError("connection refused")
        self.opened = True

    async def ping(self) -> None:
        if not self.reachable:
            raise DatastoreUnreachableError("connection refused")

    async def execute(self, statement: str, *params) -> int:
        self.statements.append((statement, params))
        if not self.reachable:
            raise DatastoreQueryError("connection refused")
        record_id, name = params
        if record_id in self.rows:
            raise DatastoreQueryError(
                'duplicate key value violates unique constraint "tablea_pkey"'
            )
        self.rows[record_id] = name
        return 1

    async def close(self) -> None:
        self.closed = True


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable Settings reads."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def fake_datastore():
    """Reachable, empty datastore."""
    return FakeDatastore()


@pytest.fixture
def readiness():
    """Readiness flag as it is after a successful startup."""
    return ReadinessFlag(ready=True)


@pytest.fixture
def settings():
    """Settings read from the test environment."""
    return Settings()


@pytest.fixture
def client(settings, fake_datastore, readiness):
    """TestClient for an app wired to the fake datastore."""
    app = create_app(settings, datastore=fake_datastore, readiness=readiness)
    with TestClient(app) as test_client:
        yield test_client

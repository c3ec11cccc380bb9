# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Drizzle API:
# - test_health.py: Welcome, liveness and readiness endpoints
# - test_records.py: POST /data behaviour against a fake datastore
# - test_postgres_client.py: asyncpg wrapper with a mocked pool
# - test_startup.py: Startup routine and process entry point
# - test_models.py / test_config.py / test_utils.py: Unit tests
# - test_logging.py: Formatters and request logging middleware
#
# Run tests with: pytest
# =============================================================================

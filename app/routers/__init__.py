# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Welcome, liveness and readiness endpoints
# - records.py: Record creation endpoint
#
# Each router is mounted in main.py under the API prefix.
# =============================================================================

from . import health
from . import records

__all__ = [
    "health",
    "records",
]

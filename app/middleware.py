# =============================================================================
# app/middleware.py - Request Logging Middleware
# =============================================================================
# Logs every request twice: once when it arrives (method, path, client
# address) and once when the response is ready (method, path, duration).
# The response itself is passed through untouched.
# =============================================================================

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        client = request.client
        remote_addr = f"{client.host}:{client.port}" if client else ""

        logger.info(
            "Request received",
            extra={
                "method": request.method,
                "path": request.url.path,
                "remote_addr": remote_addr,
            },
        )

        response = await call_next(request)

        logger.info(
            "Request completed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": round((time.perf_counter() - start) * 1000, 3),
            },
        )
        return response

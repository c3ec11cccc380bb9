# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Request failures answer with the underlying error text as text/plain,
# not a JSON envelope.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse


class DrizzleException(Exception):
    """
    Base exception for the Drizzle API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "DRIZZLE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def log_fields(self) -> dict[str, Any]:
        """Structured fields for `logger.*(..., extra=...)`."""
        result: dict[str, Any] = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        result.update(self.details)
        return result


# =============================================================================
# Startup Exceptions
# =============================================================================

class StartupError(DrizzleException):
    """Raised when the service cannot reach a usable state at startup."""

    def __init__(self, message: str, stage: str):
        super().__init__(
            message=message,
            code="STARTUP_FAILED",
            status_code=500,
            suggestion="Check the database credentials and that PostgreSQL is reachable",
            details={"stage": stage}
        )
        self.stage = stage


# =============================================================================
# Request Exceptions
# =============================================================================

class RequestDecodeError(DrizzleException):
    """Raised when a request body is not a valid record."""

    def __init__(self, error: str):
        super().__init__(
            message=error,
            code="INVALID_BODY",
            status_code=400,
            suggestion='Send a JSON object like {"id": "1", "name": "Ada"}',
        )


class RecordWriteError(DrizzleException):
    """Raised when the database rejects an insert."""

    def __init__(self, error: str, record_id: str):
        super().__init__(
            message=error,
            code="RECORD_WRITE_FAILED",
            status_code=500,
            details={"record_id": record_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

GENERIC_MESSAGES = {
    400: "Bad Request",
    500: "Internal Server Error",
}


async def drizzle_exception_handler(
    request: Request,
    exc: DrizzleException
) -> PlainTextResponse:
    """
    Convert DrizzleException to a plain-text response.

    The body is the raw error text unless EXPOSE_ERROR_DETAILS is off, in
    which case only the status phrase is returned.
    """
    if request.app.state.settings.EXPOSE_ERROR_DETAILS:
        body = exc.message
    else:
        body = GENERIC_MESSAGES.get(exc.status_code, "Error")
    return PlainTextResponse(body, status_code=exc.status_code)


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Catch-all for errors no route handled."""
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )

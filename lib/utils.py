# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from typing import Any


# =============================================================================
# Command Status Parsing
# =============================================================================

def rows_affected(status: str | None) -> int:
    """
    Extract the affected row count from a PostgreSQL command status tag.

    The server reports the outcome of a statement as a tag such as
    "INSERT 0 1", "UPDATE 3" or "DELETE 0". The row count is always the
    last token; tags without a count (e.g. "CREATE TABLE") yield 0.

    Args:
        status: Command status tag returned by the driver

    Returns:
        Number of rows affected by the statement

    Example:
        rows_affected("INSERT 0 1")  # 1
        rows_affected("UPDATE 3")    # 3
    """
    if not status:
        return 0
    last = status.rsplit(" ", 1)[-1]
    return int(last) if last.isdigit() else 0


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error for the lib/ helpers.

    Carries a stable code plus an optional hint for the operator, so a
    failure at startup can say which setting to look at.

    Attributes:
        code: Stable error code, e.g. "CONNECTION_FAILED"
        message: Text of the underlying failure
        suggestion: What to check, if there is an obvious answer
        details: Extra context such as the host or port in use
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        if self.suggestion:
            return f"[{self.code}] {self.message} ({self.suggestion})"
        return f"[{self.code}] {self.message}"

    def log_fields(self) -> dict[str, Any]:
        """Structured fields for `logger.error(..., extra=...)`."""
        fields: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.suggestion:
            fields["suggestion"] = self.suggestion
        fields.update(self.details)
        return fields

"""Error Hierarchy: typed exceptions for every failure the API reports.

Invariants:
    - Every error has a code (str), a category (ErrorCategory) and an http_status
    - to_response() always yields {"error": <message>}, a single string field
    - DatabaseError never exposes its cause in the response; the cause stays on
      the exception for server-side logging

Design Decisions:
    - Single hierarchy with UsersApiError base: one global handler maps all of it
    - Not-found is detected from zero rows, never from a driver exception
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(UsersApiError):
    """Caller-supplied input failed a precondition."""
    def __init__(self, message: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )


class NotFoundError(UsersApiError):
    """Point lookup or mutation targeted a nonexistent row."""
    def __init__(self, resource_type: str, resource_id: int | str):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UsersApiError):
    """Statement execution failed (connectivity, constraint, driver, pool)."""
    def __init__(self, operation: str, cause: Exception | None = None):
        super().__init__(
            "Database error", "DATABASE_ERROR", ErrorCategory.DATABASE, 500,
        )
        self.operation = operation
        self.cause = cause

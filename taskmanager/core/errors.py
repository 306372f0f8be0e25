"""Error Hierarchy — typed exceptions for every user-facing failure mode.

Invariants:
    - Every error has a message, a wire code, a category and an HTTP status
    - to_response() produces the uniform envelope {message, field?, code}
    - Cross-tenant access raises ResourceNotFoundError, never a forbidden signal
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TaskManagerError base: one FastAPI handler catches all
    - Exactly four wire codes (NOT_FOUND, VALIDATION_ERROR, UNAUTHORIZED,
      INTERNAL_SERVER_ERROR); duplicates and business-rule breaks are validation errors
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Wire codes returned in the error envelope."""
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ErrorCategory(str, Enum):
    """High-level error categories for log routing."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"


INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


class TaskManagerError(Exception):
    """Base exception for all task manager errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        category: ErrorCategory,
        http_status: int = 500,
        field: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.field = field

    def to_response(self) -> dict:
        """Convert to the REST error envelope. `field` omitted when unset."""
        body = {"message": self.message, "code": self.code.value}
        if self.field is not None:
            body["field"] = self.field
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(TaskManagerError):
    """Resource absent, or owned by another user (indistinguishable by design of the API)."""
    def __init__(self, message: str):
        super().__init__(
            message, ErrorCode.NOT_FOUND, ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )


class DomainValidationError(TaskManagerError):
    """Input shape or business rule rejected by a service."""
    def __init__(
        self,
        message: str,
        field: str | None = None,
        category: ErrorCategory = ErrorCategory.VALIDATION,
    ):
        super().__init__(
            message, ErrorCode.VALIDATION_ERROR, category, 400, field,
        )


class UnauthorizedError(TaskManagerError):
    """No authenticated user in the session."""
    def __init__(self, message: str = "No authenticated user found in session"):
        super().__init__(
            message, ErrorCode.UNAUTHORIZED, ErrorCategory.AUTHENTICATION, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TaskManagerError):
    """Database operation failed. Detail stays in `operation` and the logs."""
    def __init__(self, detail: str, operation: str):
        super().__init__(
            INTERNAL_ERROR_MESSAGE, ErrorCode.INTERNAL_SERVER_ERROR,
            ErrorCategory.DATABASE, 500,
        )
        self.detail = detail
        self.operation = operation

"""Error Schema — documents the uniform error envelope in OpenAPI.

Invariants:
    - Mirrors TaskManagerError.to_response(): {message, field?, code}
"""

from pydantic import BaseModel

from taskmanager.core.errors import ErrorCode


class ErrorResponse(BaseModel):
    message: str
    field: str | None = None
    code: ErrorCode


NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Not found"}}
VALIDATION_RESPONSE = {400: {"model": ErrorResponse, "description": "Invalid input"}}
UNAUTHORIZED_RESPONSE = {401: {"model": ErrorResponse, "description": "Not authenticated"}}

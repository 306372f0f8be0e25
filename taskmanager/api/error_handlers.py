"""Error Handlers — global exception handlers producing the {message, field?, code} envelope.

Invariants:
    - TaskManagerError → its own status and to_response() body
    - RequestValidationError → 400 VALIDATION_ERROR with the first offending field
    - Exception (catch-all) → 500 INTERNAL_SERVER_ERROR, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (TaskManagerError), validation (Pydantic), catch-all (Exception)
    - Pydantic failures answer 400, not FastAPI's default 422: one status per error code
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskmanager.core.errors import (
    INTERNAL_ERROR_MESSAGE, ErrorCode, TaskManagerError,
)

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TaskManagerError)
    async def task_manager_error_handler(request: Request, exc: TaskManagerError):
        """Handle all domain/infrastructure errors."""
        extra = {"error_code": exc.code.value, "path": request.url.path}
        if exc.http_status >= 500:
            logger.error(f"{type(exc).__name__}: {exc.message}", extra=extra, exc_info=exc)
        else:
            logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic request validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": ErrorCode.VALIDATION_ERROR.value, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"error_code": ErrorCode.INTERNAL_SERVER_ERROR.value, "path": request.url.path},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": INTERNAL_ERROR_MESSAGE,
                "code": ErrorCode.INTERNAL_SERVER_ERROR.value,
            },
        )


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """Envelope for the first validation error; field path drops the location prefix."""
    errors = exc.errors()
    if not errors:
        return {
            "message": "Invalid request data",
            "code": ErrorCode.VALIDATION_ERROR.value,
        }
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ())]
    if loc and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    body = {
        "message": first.get("msg", "Invalid request data"),
        "code": ErrorCode.VALIDATION_ERROR.value,
    }
    if loc:
        body["field"] = ".".join(loc)
    return body

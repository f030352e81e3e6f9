"""Error Handlers: global exception handlers for the Crave API.

Invariants:
    - CraveError -> structured JSON with error code, message, severity
    - RequestValidationError -> 400 with field-level details; message names the first violation
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CraveError), validation (pydantic), catch-all (Exception)
    - Kept out of main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from crave.core.errors import CraveError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_crave_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_crave_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CraveError)
    async def crave_error_handler(request: Request, exc: CraveError):
        """Handle all Crave domain/collaborator errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"CraveError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "Internal server error",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _format_loc(loc) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI adds.
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "query", "path"):
        parts = parts[1:]
    return ".".join(parts)


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    errors = exc.errors()
    details = [
        {
            "field": _format_loc(e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]
    message = "Invalid request data"
    if details:
        first = details[0]
        where = f"{first['field']}: " if first["field"] else ""
        message = f"Validation error: {where}{first['message']}"
        if len(details) > 1:
            message += f" (and {len(details) - 1} more)"
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": message,
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": details,
        },
    }

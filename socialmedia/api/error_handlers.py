"""Error Handlers — global exception handlers for the Social Media API.

Invariants:
    - SocialMediaError → its http_status with structured JSON (code, message, severity)
    - RequestValidationError → 500 with the generic message; field details logged only
    - Exception (catch-all) → 500 with a generic message, never internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from socialmedia.core.errors import (
    SocialMediaError, UnclassifiedError, DatabaseError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(SocialMediaError)
    async def social_media_error_handler(request: Request, exc: SocialMediaError):
        """Handle all SocialMediaError subclasses."""
        if isinstance(exc, DatabaseError):
            logger.error(
                f"Database {exc.operation} failed: {exc.detail}",
                extra={"error_code": exc.code, "path": request.url.path},
            )
        elif exc.http_status >= 500:
            logger.error(
                f"{type(exc).__name__}: {exc.message}",
                extra={"error_code": exc.code, "path": request.url.path},
            )
        else:
            logger.warning(
                f"{type(exc).__name__}: {exc.message}",
                extra={"error_code": exc.code, "path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Undecodable bodies fall outside the domain taxonomy: generic 500."""
        logger.error(
            f"Validation error on {request.url.path}: {_format_field_errors(exc)}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=UnclassifiedError(code="VALIDATION_ERROR").to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=UnclassifiedError().to_response(),
        )


def _format_field_errors(exc: RequestValidationError) -> list[dict]:
    """Field-level details for logs only."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]

"""Error Handlers — global exception handlers for the interactions API.

Invariants:
    - XpdError → structured JSON with error code, message, severity, and its HTTP status
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Two-layer handler: domain (XpdError), catch-all (Exception). Routes read raw bytes,
      so FastAPI request validation never runs and has no handler here
    - Only errors raised BEFORE the deferral point reach these handlers; background
      failures are turned into follow-up messages by the interaction processor
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from xpd_slash.core.errors import XpdError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_xpd_error_handler(app)
    _register_generic_error_handler(app)


def _register_xpd_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(XpdError)
    async def xpd_error_handler(request: Request, exc: XpdError):
        """Handle all xpd-slash domain/infrastructure errors."""
        logger.warning(
            f"XpdError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
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
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )

"""
Name: FastAPI Exception Handlers

Responsibilities:
  - Render bearer-token failures as 401 {"message": ...}
  - Catch anything escaping a route and render the standard
    {code: 500, error, slug: "UnknownError"} envelope
  - Centralized logging of unexpected errors with correlation IDs

Collaborators:
  - api/main.py: registers these handlers
  - crosscutting.error_responses: AuthHTTPException, error_envelope

Notes:
  - Use-case routes never raise business errors (they return Either);
    the fallback handler only sees bugs / infrastructure crashes.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from ..crosscutting.error_responses import (
    AuthHTTPException,
    auth_exception_handler,
    error_envelope,
)
from ..crosscutting.exceptions import FinanceAPIError
from ..crosscutting.logger import logger
from ..domain.errors import UNKNOWN_ERROR_MESSAGE

UNKNOWN_ERROR_SLUG = "UnknownError"


async def finance_api_error_handler(
    request: Request, exc: FinanceAPIError
) -> JSONResponse:
    """Handle infrastructure errors that escaped a use case."""
    logger.error(
        "Unhandled application error",
        extra={"error_id": exc.error_id, "error_message": exc.message},
    )
    return JSONResponse(
        status_code=500,
        content=error_envelope(500, exc.message, UNKNOWN_ERROR_SLUG),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: never leak a stacktrace to the client."""
    logger.exception("Unhandled exception", extra={"error": str(exc)})
    return JSONResponse(
        status_code=500,
        content=error_envelope(
            500, str(exc) or UNKNOWN_ERROR_MESSAGE, UNKNOWN_ERROR_SLUG
        ),
    )


def register_exception_handlers(app) -> None:
    """
    Register all exception handlers on the FastAPI app.

    Usage:
        from .exception_handlers import register_exception_handlers
        register_exception_handlers(app)
    """
    app.add_exception_handler(AuthHTTPException, auth_exception_handler)
    app.add_exception_handler(FinanceAPIError, finance_api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

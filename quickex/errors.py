"""
Exceptions and exception handlers for the QuickEx backend.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StoreConfigurationError(RuntimeError):
    """Raised when the Supabase client cannot be built from configuration."""


class APIError(Exception):
    """Base class for errors rendered as JSON responses."""

    error = "Error"

    def __init__(self, status_code: int, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors or [message]


class BadRequestError(APIError):
    """Raised for validation or other client-side errors."""

    error = "Bad Request"

    def __init__(self, message: str = "Bad request", errors: Optional[List[str]] = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, errors)


def _format_error(error: dict) -> str:
    location = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
    message = error.get("msg", "Validation error")
    return f"{location}: {message}" if location else message


def format_validation_errors(errors) -> List[str]:
    """Flatten pydantic error dicts into `field: message` strings."""
    return [_format_error(error) for error in errors]


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"statusCode": exc.status_code, "message": exc.errors, "error": exc.error},
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render framework-level validation failures as 400 instead of 422."""
    errors = format_validation_errors(exc.errors())
    logger.info("Validation error on %s: %s", request.url.path, ", ".join(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"statusCode": 400, "message": errors, "error": "Bad Request"},
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # The server logs the traceback when the exception is re-raised.
    logger.error(
        "Unhandled exception on %s %s: %r", request.method, request.url.path, exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"statusCode": 500, "message": "Internal server error"},
    )

"""Application error taxonomy and its HTTP rendering.

Use cases raise these errors; the handlers registered by
``register_exception_handlers`` turn them into ``{"error": message}`` bodies
with the status code carried by each error class.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Raised when caller-supplied data is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """Raised when the referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class PersistenceError(AppError):
    """Raised when a read or write against the store fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UpstreamError(AppError):
    """Raised when the recommendation provider fails or answers unexpectedly."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    """Render an ``AppError`` as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(
    _request: Request, exc: Exception
) -> JSONResponse:
    """Render request parsing failures as 400 instead of FastAPI's default 422."""
    logger.debug("Rejected malformed request: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

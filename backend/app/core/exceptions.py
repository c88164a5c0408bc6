"""
Application error taxonomy and the FastAPI handlers that render it.

Every error leaves the service as ``{"message": ...}`` with the status code
of its class. Unexpected failures are logged and reported as a generic 500.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class AppError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthorizedError(AppError):
    """Missing or invalid API key or token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    """Valid token, but insufficient privilege or not the owner."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    """Duplicate username or favorite. Reported as 400."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Conflict"


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an AppError as its status code and message."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        message = INTERNAL_ERROR_MESSAGE
    else:
        message = exc.message
    return JSONResponse(status_code=exc.status_code, content={"message": message})


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    """Database failures never leak driver details to the client."""
    logger.error(
        "Database error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

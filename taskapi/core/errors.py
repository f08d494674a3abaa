"""API error types and the FastAPI handlers that render them as {"error": ...} bodies."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


class InvalidTokenError(Exception):
    """Raised by the token service when a bearer token cannot be trusted."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ApiError(Exception):
    """Base class for errors returned to clients; message is safe to expose."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = GENERIC_ERROR_MESSAGE
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized or invalid token"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidCredentials(ApiError):
    """Login failure; same body whether the email is unknown or the password is wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class NotFoundOrUnauthorized(ApiError):
    """No task matched both the id and the caller; nonexistence and foreign ownership look alike."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Task not found or unauthorized"


class EmailAlreadyRegistered(ApiError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email already registered"


class InternalFailure(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = GENERIC_ERROR_MESSAGE


async def api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=exc.headers,
    )


async def validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers so every error response has the {"error": message} shape."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

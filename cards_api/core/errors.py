"""
Error taxonomy and the terminal error responder.

Every failure raised by services or stores ends up in one of the handlers
registered by ``register_exception_handlers`` and is rendered as
``{"errorMessage": "..."}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Something went wrong on the server."


class ApiError(Exception):
    """Base class for failures that map to an HTTP status."""

    status_code = 500
    default_message = GENERIC_SERVER_ERROR

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500


class BadRequestError(ApiError):
    status_code = 400
    default_message = "Bad request"


class DuplicateKeyError(BadRequestError):
    """Raised when a cardId would collide with an existing card."""

    default_message = "Card ID must be unique"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Card not found"


class StorageError(ApiError):
    """Backing file missing, unreadable, unparsable or unwritable."""

    default_message = "Storage failure"


class AuthError(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class MissingCredentialError(AuthError):
    default_message = "Missing token"


class InvalidCredentialError(AuthError):
    default_message = "Invalid or expired token"


class InvalidCredentialsError(AuthError):
    default_message = "Invalid username or password"


class AuthConfigurationError(ApiError):
    """Token signing attempted without a secret."""

    default_message = "JWT_SECRET is not configured"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"errorMessage": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if isinstance(exc, AuthError):
        logger.warning("auth_failed path=%s reason=%s", request.url.path, exc.message)
        return error_response(exc.status_code, exc.message)
    if exc.is_client_error:
        logger.info("client_error path=%s status=%s reason=%s", request.url.path, exc.status_code, exc.message)
        return error_response(exc.status_code, exc.message)
    logger.error("server_error path=%s error=%r", request.url.path, exc, exc_info=exc)
    return error_response(500, GENERIC_SERVER_ERROR)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("server_error path=%s detail=%s", request.url.path, exc.detail)
        return error_response(exc.status_code, GENERIC_SERVER_ERROR)
    return error_response(exc.status_code, str(exc.detail))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("invalid_request path=%s errors=%s", request.url.path, exc.errors())
    return error_response(400, "Request body must be a JSON object")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error path=%s error=%r", request.url.path, exc, exc_info=exc)
    return error_response(500, GENERIC_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

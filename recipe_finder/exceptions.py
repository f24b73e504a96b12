"""Application errors and the handlers that turn them into envelope responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

AUTHENTICATION_REQUIRED = "Authentication required"


class ApiError(Exception):
    """Base exception for errors reported to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(ApiError):
    """Malformed or out-of-range input (400)."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ApiError):
    """Missing or invalid bearer token (401).

    ``reason`` keeps the internal cause; clients always get the same message.
    """

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(AUTHENTICATION_REQUIRED)


class ForbiddenError(ApiError):
    """Authenticated, but acting on someone else's resource (403)."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ApiError):
    """Missing document or embedded entry (404)."""

    status_code = status.HTTP_404_NOT_FOUND


def error_body(message: str, error: str | None = None) -> dict:
    """Build the failure envelope."""
    body: dict = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body


def format_validation_errors(exc: RequestValidationError) -> str:
    """Summarize pydantic errors as ``field: message`` pairs."""
    parts = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        msg = err.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    headers = None
    if isinstance(exc, AuthenticationError):
        logger.info(f"Authentication failed ({exc.reason}) for {request.url.path}")
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code, content=error_body(exc.message), headers=headers
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(format_validation_errors(exc)),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope error handlers to the application."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

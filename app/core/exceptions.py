"""
Global exception handling for the application.
Every error leaves the API as the standard envelope:
{"success": false, "message": ..., "error": ..., "data": ...}.
"""

import traceback
from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        code: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details
        self.code = code
        super().__init__(self.message)


class ValidationException(AppError):
    """Malformed or missing input."""
    def __init__(self, message: str = "Invalid request", details: Optional[Dict[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details, code)


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class ConflictException(AppError):
    """A unique field already holds the submitted value."""
    def __init__(self, message: str = "Resource already exists", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


class UnauthorizedException(AppError):
    """Authentication failure error."""
    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details)


class ForbiddenException(AppError):
    """Authorization failure error."""
    def __init__(self, message: str = "Forbidden", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_403_FORBIDDEN, details)


class UpstreamServiceException(AppError):
    """A third-party service answered with an error or could not be reached."""
    def __init__(self, message: str = "Upstream service failure", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_502_BAD_GATEWAY, details, code="lookup_failed")


class RateLimitExceededException(AppError):
    """A third-party service rejected the call with 429."""
    def __init__(self, message: str, retry_after: int):
        self.retry_after = retry_after
        super().__init__(message, status.HTTP_429_TOO_MANY_REQUESTS, code="rate_limit_exceeded")


def error_response(
    status_code: int,
    message: str,
    error: Optional[str] = None,
    data: Any = None,
    headers: Optional[Dict[str, str]] = None,
    **extra: Any,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    if data is not None:
        content["data"] = data
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, RateLimitExceededException):
        return error_response(
            exc.status_code,
            exc.message,
            error=exc.code,
            retry_after=exc.retry_after,
            headers={"Retry-After": str(exc.retry_after)},
        )
    return error_response(exc.status_code, exc.message, error=exc.code, data=exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        message,
        error="validation_error",
        details=[{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in errors],
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    # Reached when a concurrent write beats the uniqueness pre-checks
    logger.warning("Integrity error", path=request.url.path, error=str(exc.orig))
    return error_response(status.HTTP_409_CONFLICT, "Duplicate value for a unique field", error="duplicate_key")


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    logger.exception("Unexpected error occurred", path=request.url.path)

    extra: Dict[str, Any] = {}
    if not request.app.state.settings.is_production:
        extra["details"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        error="internal_error",
        **extra,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

# fitstore/core/errors.py
"""
Domain error taxonomy and the handlers that turn it into HTTP responses.

Services raise these exceptions; routers never catch them. The handlers
registered by `register_exception_handlers` render every failure as:

    {"success": false, "error": {"code": "...", "message": "..."}}
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from tortoise.exceptions import DBConnectionError, OperationalError

logger = logging.getLogger("uvicorn.error")


class AppError(Exception):
    """Base class for errors that map onto a structured HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, *, fields: list | None = None):
        super().__init__(message)
        self.message = message
        self.fields = fields


class ValidationError(AppError):
    """Malformed or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"


class AuthError(AppError):
    """Missing, invalid or expired token, or bad credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_ERROR"


class ForbiddenError(AppError):
    """Valid token, insufficient role."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"


class ConflictError(AppError):
    """Uniqueness violation (email already registered)."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "CONFLICT"


class NotFoundError(AppError):
    """Referenced entity is absent."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


def error_body(code: str, message: str, fields: list | None = None) -> dict:
    error = {"code": code, "message": message}
    if fields:
        error["fields"] = fields
    return {"success": False, "error": error}


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code, exc.message, exc.fields),
        headers=headers,
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Keep pydantic's location/message pairs, drop the raw input (may contain passwords)
    fields = [
        {"loc": [str(p) for p in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=ValidationError.status_code,
        content=error_body(ValidationError.code, "Invalid request", fields),
    )


async def _store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[store] persistence failure on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("STORE_UNAVAILABLE", "Storage is unavailable"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain, request-validation and persistence handlers to `app`."""
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(OperationalError, _store_error_handler)
    app.add_exception_handler(DBConnectionError, _store_error_handler)

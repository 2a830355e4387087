"""
Global exception handlers for consistent API errors.

Every failure leaves the API in the same envelope (see ErrorResponse),
whether it was raised by a module, by request validation, by routing,
or was not expected at all.
"""

import logging
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import QuoteDeskError
from shared.time import utc_now
from ..models.errors import ErrorResponse

logger = logging.getLogger(__name__)

# Location prefixes FastAPI puts in front of the field path
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def error_response(
    status: int,
    message: str,
    code: str,
    details: Optional[dict[str, Any]] = None,
    errors: Optional[dict[str, list[str]]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build a JSONResponse carrying the standard error envelope."""
    body = ErrorResponse(
        status=status,
        message=message,
        code=code,
        details=details or None,
        errors=errors,
        timestamp=utc_now(),
    )
    return JSONResponse(
        status_code=status,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def group_validation_errors(raw_errors: list[dict[str, Any]]) -> dict[str, list[str]]:
    """
    Group pydantic error messages by dotted field path.

    ``("body", "user", "email")`` becomes ``"user.email"``. An error on the
    whole body is keyed ``"body"``.
    """
    grouped: dict[str, list[str]] = {}
    for error in raw_errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        grouped.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return grouped


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(QuoteDeskError)
    async def _app_error_handler(request: Request, exc: QuoteDeskError):
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        if exc.status_code >= 500:
            logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
        return error_response(
            status=exc.status_code,
            message=exc.message,
            code=exc.code,
            details=exc.details,
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        return error_response(
            status=400,
            message="Validation error",
            code="VALIDATION_ERROR",
            errors=group_validation_errors(list(exc.errors())),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        try:
            code = HTTPStatus(exc.status_code).name
        except ValueError:
            code = "HTTP_ERROR"
        return error_response(
            status=exc.status_code,
            message=str(exc.detail) if exc.detail else "HTTP error",
            code=code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(
            status=500,
            message="Internal server error",
            code="INTERNAL_ERROR",
        )

"""Error taxonomy and the FastAPI handlers that turn it into JSON responses.

Every error body carries a ``message`` string; validation failures add a
field-level ``errors`` list.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class StayDeskError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StayDeskError):
    """Malformed or inconsistent input detected past schema validation."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def errors(self) -> list[dict[str, Any]]:
        return [{"field": self.field, "message": self.message, "type": "value_error"}]


class AuthenticationError(StayDeskError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(StayDeskError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(StayDeskError):
    status_code = status.HTTP_409_CONFLICT


class PaymentProcessorError(StayDeskError):
    status_code = status.HTTP_502_BAD_GATEWAY


class PaymentProcessorUnavailable(PaymentProcessorError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class StoreError(StayDeskError):
    """Underlying query failure; the message is generic by contract."""


def _format_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    formatted = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix so the field reads like the payload key
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        formatted.append({
            "field": ".".join(loc) or None,
            "message": error.get("msg"),
            "type": error.get("type"),
        })
    return formatted


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation error", "errors": _format_validation_errors(exc)},
    )


async def staydesk_error_handler(request: Request, exc: StayDeskError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": "Validation error", "errors": exc.errors()},
        )
    if isinstance(exc, StoreError):
        logger.error(f"[STORE] {request.method} {request.url.path}: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"[STORE] {request.method} {request.url.path} failed", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Database error while processing the request"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to the application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StayDeskError, staydesk_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)

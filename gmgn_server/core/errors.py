"""API error type and the handlers that render the JSON error envelope."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    TRADE_FAILED = "TRADE_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


_STATUS_CODES: dict[int, ErrorCode] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.AUTH_ERROR,
    status.HTTP_403_FORBIDDEN: ErrorCode.AUTH_ERROR,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
}


class ApiError(Exception):
    """Raised by route handlers to produce a structured error response."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details

    @classmethod
    def validation(cls, message: str, details: Optional[dict[str, Any]] = None) -> "ApiError":
        return cls(status.HTTP_400_BAD_REQUEST, ErrorCode.VALIDATION_ERROR, message, details)

    @classmethod
    def not_found(cls, message: str) -> "ApiError":
        return cls(status.HTTP_404_NOT_FOUND, ErrorCode.NOT_FOUND, message)

    @classmethod
    def unauthorized(cls, message: str) -> "ApiError":
        return cls(status.HTTP_401_UNAUTHORIZED, ErrorCode.AUTH_ERROR, message)

    @classmethod
    def conflict(cls, message: str) -> "ApiError":
        return cls(status.HTTP_409_CONFLICT, ErrorCode.CONFLICT, message)

    @classmethod
    def internal(cls, message: str) -> "ApiError":
        return cls(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorCode.INTERNAL_ERROR, message)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def error_body(code: str, message: str, details: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = jsonable_encoder(details)
    return {"success": False, "error": error, "timestamp": utc_timestamp()}


async def _handle_api_error(_: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code.value, exc.message, exc.details),
    )


async def _handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    missing: list[str] = []
    invalid: list[dict[str, Any]] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())[1:]) or "body"
        if error.get("type") == "missing":
            missing.append(field)
        else:
            invalid.append({"field": field, "message": error.get("msg", "")})

    if missing:
        body = error_body(ErrorCode.VALIDATION_ERROR.value, "Missing required fields", {"fields": missing})
    else:
        body = error_body(ErrorCode.VALIDATION_ERROR.value, "Invalid request", {"errors": invalid})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def _handle_http_exception(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _STATUS_CODES.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = "The requested resource was not found"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(code.value, message),
        headers=getattr(exc, "headers", None),
    )


async def _handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(ErrorCode.INTERNAL_ERROR.value, "An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _handle_api_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(Exception, _handle_unexpected)


__all__ = [
    "ApiError",
    "ErrorCode",
    "error_body",
    "register_exception_handlers",
    "utc_timestamp",
]

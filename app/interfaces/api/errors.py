"""Translate errors into the ``{success: false, error}`` response envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import (
    ForbiddenError,
    InvalidNotificationError,
    NotFoundError,
    NotificationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[NotificationError], int] = {
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidNotificationError: status.HTTP_400_BAD_REQUEST,
}


def to_http_exception(exc: NotificationError) -> HTTPException:
    """Return the HTTP equivalent of a domain error."""

    status_code = next(
        (code for error_type, code in _STATUS_BY_ERROR.items() if isinstance(exc, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )
    return HTTPException(status_code=status_code, detail=str(exc))


def _error_body(message: str) -> dict[str, object]:
    return {"success": False, "error": message}


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part not in {"body", "query", "path"}
        )
        text = error.get("msg", "Invalid value")
        messages.append(f"{location}: {text}" if location else text)
    return "; ".join(messages) or "Invalid request"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _format_validation_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(message)
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-shaping exception handlers on ``app``."""

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

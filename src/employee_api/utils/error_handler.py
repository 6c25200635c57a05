# src/employee_api/utils/error_handler.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.utils.exceptions import StorageError

logger = logging.getLogger(__name__)


def _safe_args(exc: Exception) -> str:
    a = getattr(exc, "args", None)
    return str(a) if a else "No additional details"


def _json_error(
    status_code: int,
    message: str,
    exc: Exception,
    extra: Dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Unified JSON error response.
    5xx never leaks internals: the message is replaced by a generic one.
    """
    user_message = message
    if status_code == 404 and not message:
        user_message = "The requested resource was not found."
    elif status_code >= 500:
        user_message = "Internal Server Error. Please try again later."

    payload: Dict[str, Any] = {
        "message": user_message,
        "error_type": exc.__class__.__name__,
        "status_code": status_code,
    }

    if extra:
        payload.update(extra)

    return JSONResponse(status_code=status_code, content=payload)


def _log_http(request: Request, status_code: int, detail: str, exc: Exception) -> None:
    """
    Log levels:
    - 404 -> INFO (normal noise)
    - other 4xx -> WARNING (client error)
    - 5xx -> EXCEPTION (stack trace)
    """
    url = str(request.url)
    method = request.method

    if status_code == 404:
        logger.info("404 Not Found: %s %s", method, url)
        return

    if 400 <= status_code < 500:
        logger.warning(
            "%s: %s %s | detail=%s | args=%s",
            status_code,
            method,
            url,
            detail,
            _safe_args(exc),
        )
        return

    logger.exception("%s: %s %s | detail=%s", status_code, method, url, detail)


def field_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    """
    Group pydantic errors by field name:
        {"Email": ["value is not a valid email address: ..."], ...}
    The field is the last string in ``loc`` ("body"/"path" prefixes dropped).
    A body that is not an object at all is reported under "body".
    """
    grouped: Dict[str, List[str]] = {}
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if not isinstance(p, int)]
        field = loc[-1] if len(loc) > 1 else (loc[0] if loc else "body")
        grouped.setdefault(field, []).append(err.get("msg", "Invalid value"))
    return grouped


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    status = int(exc.status_code)
    detail = str(exc.detail)
    _log_http(request, status, detail, exc)
    return _json_error(status_code=status, message=detail, exc=exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = field_errors(exc)
    logger.warning(
        "400 Validation error: %s %s | %s",
        request.method,
        str(request.url),
        errors,
    )
    return _json_error(
        status_code=400,
        message="Validation error occurred",
        exc=exc,
        extra={"errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    # StorageError and anything unexpected: the store is the usual suspect
    kind = "Storage failure" if isinstance(exc, StorageError) else "Unhandled exception"
    logger.exception("500 %s: %s %s | %s", kind, request.method, str(request.url), str(exc))
    return _json_error(status_code=500, message=str(exc), exc=exc)


def register_exception_handlers(app: FastAPI) -> None:
    # 1) Starlette/FastAPI HTTPException (routing 404 and the ones raised in routes)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    # 2) Validation errors -> 400 with per-field messages
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    # 3) Catch-all
    app.add_exception_handler(StorageError, unhandled_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

"""Error Handlers: global exception handlers rendering plain-text error bodies.

Invariants:
    - UserApiError -> exc.message with exc.http_status
    - RequestValidationError (query or raw body decoding) -> 400 "invalid JSON: ..."
      or "invalid request: ..."
    - Routing HTTPException (unknown path, wrong method) -> same status, plain text
    - Exception (catch-all) -> 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.core.errors import UserApiError, MethodNotAllowedError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_user_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError):
        """Handle all domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        }
        if exc.http_status >= 500:
            logger.error(f"UserApiError: {exc.message}", extra=extra)
        else:
            logger.warning(f"UserApiError: {exc.message}", extra=extra)
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle body/query decoding errors."""
        message = _build_validation_message(exc)
        logger.warning(
            f"Validation error on {request.url.path}: {message}",
            extra={
                "error_code": "VALIDATION_ERROR",
                "path": request.url.path,
                "method": request.method,
            },
        )
        return PlainTextResponse(
            message, status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Handle routing errors raised by Starlette (404, 405)."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            error = MethodNotAllowedError(request.method)
            logger.warning(
                f"{request.method} not allowed on {request.url.path}",
                extra={
                    "error_code": error.code,
                    "path": request.url.path,
                    "method": request.method,
                },
            )
            return PlainTextResponse(
                error.message, status_code=error.http_status,
                headers=exc.headers,
            )
        return PlainTextResponse(
            str(exc.detail).lower(), status_code=exc.status_code,
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"path": request.url.path, "method": request.method},
            exc_info=True,
        )
        return PlainTextResponse(
            "internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def _build_validation_message(exc: RequestValidationError) -> str:
    """Collapse pydantic error details into one line of text."""
    errors = exc.errors()
    for e in errors:
        if e["type"] == "json_invalid":
            detail = e.get("ctx", {}).get("error", e["msg"])
            return f"invalid JSON: {detail}"
    parts = [
        f"{'.'.join(str(loc) for loc in e['loc']) or 'body'}: {e['msg']}"
        for e in errors
    ]
    return "invalid request: " + "; ".join(parts)

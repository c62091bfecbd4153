"""Global exception handlers for FastAPI application.

Every error leaves the API in the same envelope as handler failures.

Handlers:
    http_exception_handler: HTTPException (auth dependencies, unknown routes)
    validation_exception_handler: RequestValidationError (400 with field details)
    generic_exception_handler: Any unhandled exception (500)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.errors import ApplicationErrorCode
from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)

# HTTP status code to error code for exceptions raised outside handlers
_CODE_BY_STATUS: dict[int, str] = {
    400: ApplicationErrorCode.VALIDATION_ERROR.value,
    401: ApplicationErrorCode.AUTHENTICATION_ERROR.value,
    403: ApplicationErrorCode.AUTHORIZATION_ERROR.value,
    404: ApplicationErrorCode.NOT_FOUND.value,
    405: "method_not_allowed",
    409: ApplicationErrorCode.CONFLICT.value,
    423: ApplicationErrorCode.ACCOUNT_LOCKED.value,
    429: ApplicationErrorCode.RATE_LIMIT_EXCEEDED.value,
}


def _code_for_status(status_code: int) -> str:
    if status_code >= 500:
        return ApplicationErrorCode.SERVER_ERROR.value
    return _CODE_BY_STATUS.get(status_code, ApplicationErrorCode.VALIDATION_ERROR.value)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to the error envelope.

    Unknown routes (Starlette 404) get "Route not found" with the path.
    """
    assert isinstance(exc, StarletteHTTPException)

    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = f"Route {request.method} {request.url.path} not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)

    return ErrorResponseBuilder.build(
        status_code=exc.status_code,
        code=_code_for_status(exc.status_code),
        message=message,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert RequestValidationError to a 400 envelope with field details.

    Example:
        >>> # POST /api/auth/login with no body
        >>> # {"success": false, "error": {"code": "validation_error",
        >>> #   "message": "Request validation failed",
        >>> #   "details": {"fields": [{"field": "email", ...}]}}}
    """
    assert isinstance(exc, RequestValidationError)

    fields = []
    for error in exc.errors():
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p != "body"]
        fields.append(
            {
                "field": ".".join(field_parts) if field_parts else "body",
                "message": error.get("msg", "Invalid value"),
            }
        )

    return ErrorResponseBuilder.build(
        status_code=status.HTTP_400_BAD_REQUEST,
        code=ApplicationErrorCode.VALIDATION_ERROR.value,
        message="Request validation failed",
        details={"fields": fields},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    The stack trace is returned only outside production; it is always logged.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )

    details = None
    if not settings.is_production:
        details = {
            "exception": type(exc).__name__,
            "stack": traceback.format_exception(exc),
        }

    return ErrorResponseBuilder.build(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code=ApplicationErrorCode.SERVER_ERROR.value,
        message="An unexpected error occurred",
        details=details,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

"""Error response builder for the uniform error envelope.

Converts application layer errors into
``{"success": false, "error": {"code", "message", "details?"}}`` responses
with the HTTP status mapped from the error code.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.schemas.common_schemas import ErrorBody, ErrorResponse

_STATUS_BY_CODE: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.AUTHENTICATION_ERROR: status.HTTP_401_UNAUTHORIZED,
    ApplicationErrorCode.AUTHORIZATION_ERROR: status.HTTP_403_FORBIDDEN,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ApplicationErrorCode.ACCOUNT_LOCKED: status.HTTP_423_LOCKED,
    ApplicationErrorCode.RATE_LIMIT_EXCEEDED: status.HTTP_429_TOO_MANY_REQUESTS,
    ApplicationErrorCode.EMAIL_DELIVERY_FAILED: status.HTTP_502_BAD_GATEWAY,
    ApplicationErrorCode.SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ErrorResponseBuilder:
    """Build uniform error envelope responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="User not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(error)
        >>> response.status_code
        404
    """

    @staticmethod
    def from_application_error(error: ApplicationError) -> JSONResponse:
        """Convert ApplicationError to an error envelope response."""
        headers = None
        if error.code == ApplicationErrorCode.AUTHENTICATION_ERROR:
            headers = {"WWW-Authenticate": "Bearer"}
        return ErrorResponseBuilder.build(
            status_code=ErrorResponseBuilder.get_status_code(error.code),
            code=error.code.value,
            message=error.message,
            details=error.details,
            headers=headers,
        )

    @staticmethod
    def build(
        status_code: int,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Build an error envelope from raw parts."""
        body = ErrorResponse(error=ErrorBody(code=code, message=message, details=details))
        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.CONFLICT)
            409
        """
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

"""Application layer error types.

Handlers return ``Failure(error=ApplicationError(...))``. The presentation
layer maps each ApplicationErrorCode to one HTTP status and serializes the
error into the uniform envelope.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DeliveryError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes (wire values of ``error.code``)."""

    VALIDATION_ERROR = "validation_error"
    AUTHENTICATION_ERROR = "authentication_error"
    AUTHORIZATION_ERROR = "authorization_error"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    ACCOUNT_LOCKED = "account_locked"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"
    SERVER_ERROR = "server_error"


_DOMAIN_ERROR_CODES: dict[type[DomainError], ApplicationErrorCode] = {
    ValidationError: ApplicationErrorCode.VALIDATION_ERROR,
    AuthenticationError: ApplicationErrorCode.AUTHENTICATION_ERROR,
    AuthorizationError: ApplicationErrorCode.AUTHORIZATION_ERROR,
    NotFoundError: ApplicationErrorCode.NOT_FOUND,
    ConflictError: ApplicationErrorCode.CONFLICT,
    DeliveryError: ApplicationErrorCode.EMAIL_DELIVERY_FAILED,
}


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable error message, shown to clients as-is.
        domain_error: Original domain error (if the failure came from the
            domain or core layer).
        details: Additional context as key-value pairs.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.AUTHENTICATION_ERROR,
        ...     message="Invalid credentials",
        ... )
        >>> ApplicationError.from_domain(validation_error).code
        <ApplicationErrorCode.VALIDATION_ERROR: 'validation_error'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain(
        cls, error: DomainError, message: str | None = None
    ) -> "ApplicationError":
        """Wrap a domain error, keeping its message unless overridden.

        Validation errors carry their field name in ``details``.
        """
        code = _DOMAIN_ERROR_CODES.get(type(error), ApplicationErrorCode.SERVER_ERROR)
        details = dict(error.details) if error.details else None
        if isinstance(error, ValidationError) and error.field:
            details = {**(details or {}), "field": error.field}
        return cls(
            code=code,
            message=message or error.message,
            domain_error=error,
            details=details,
        )

"""Common error classes shared by every layer.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found
- ConflictError: Duplicate resources (email, membership)
- AuthenticationError: Token verification failures
- AuthorizationError: Caller lacks permission
- DeliveryError: Outbound email could not be sent

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Please enter a valid email",
        field="email",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, Calendar, Member).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict.

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field holding the duplicate value.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (token expired, invalid or of the wrong type)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure.

    Attributes:
        required_permission: Permission that was required.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DeliveryError(DomainError):
    """Outbound message could not be delivered.

    Attributes:
        recipient: Address the message was meant for.
    """

    recipient: str

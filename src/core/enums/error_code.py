"""Domain-level error codes (machine-readable).

Codes follow the ENTITY_REASON naming convention and travel inside
DomainError values returned through Result types.

Categories:
- Validation errors (INVALID_*, *_TOO_SHORT, PASSWORD_TOO_WEAK)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Token errors (TOKEN_*)
- Delivery errors (EMAIL_DELIVERY_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_EMAIL = "invalid_email"
    INVALID_NAME = "invalid_name"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_WEAK = "password_too_weak"
    PASSWORD_MISMATCH = "password_mismatch"
    PASSWORD_REUSED = "password_reused"
    INVALID_CODE = "invalid_code"
    INVALID_ROLE = "invalid_role"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    CALENDAR_NOT_FOUND = "calendar_not_found"
    MEMBER_NOT_FOUND = "member_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    MEMBER_ALREADY_EXISTS = "member_already_exists"

    # Token errors
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"
    TOKEN_WRONG_TYPE = "token_wrong_type"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"

    # Delivery errors
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"

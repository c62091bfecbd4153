"""Input validation helpers.

All validators return Result types so handlers can compose them without
try/except blocks.

Usage:
    from src.core.validation import validate_email, validate_password_policy

    match validate_email("User@Example.com"):
        case Success(value=email):
            ...  # "user@example.com"
        case Failure(error=error):
            ...  # error.field == "email"
"""

import re

from email_validator import EmailNotValidError, validate_email as _check_email

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6

_SPECIAL_CHARACTERS = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
_CODE_PATTERN = re.compile(r"^\d{6}$")


def validate_not_empty(value: str | None, field_name: str) -> Result[str, ValidationError]:
    """Validate that a string is present and not blank.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with the value, Failure with ValidationError otherwise.
    """
    if value is None or not value.strip():
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"{field_name} is required",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_name(name: str) -> Result[str, ValidationError]:
    """Validate a display name (at least 2 characters after trimming).

    Returns:
        Success with the trimmed name.
    """
    trimmed = name.strip()
    if len(trimmed) < MIN_NAME_LENGTH:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_NAME,
                message=f"Name must be at least {MIN_NAME_LENGTH} characters",
                field="name",
            )
        )
    return Success(value=trimmed)


def validate_email(email: str) -> Result[str, ValidationError]:
    """Validate email format and normalize it to lowercase.

    Uses email-validator without a deliverability (DNS) check.

    Returns:
        Success with the lowercase address.
    """
    try:
        validated = _check_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_EMAIL,
                message="Please enter a valid email",
                field="email",
            )
        )
    return Success(value=validated.normalized.lower())


def validate_password_length(
    password: str, field_name: str = "password"
) -> Result[str, ValidationError]:
    """Validate the minimum password length only."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return Failure(
            error=ValidationError(
                code=ErrorCode.PASSWORD_TOO_SHORT,
                message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                field=field_name,
            )
        )
    return Success(value=password)


def validate_password_policy(password: str) -> Result[str, ValidationError]:
    """Validate the registration password policy.

    Requirements:
        - At least 6 characters
        - At least one uppercase letter
        - At least one lowercase letter
        - At least one digit
        - At least one special character

    Returns:
        Success with the password, Failure naming the first rule broken.
    """
    match validate_password_length(password):
        case Failure() as failure:
            return failure

    has_upper = re.search(r"[A-Z]", password) is not None
    has_lower = re.search(r"[a-z]", password) is not None
    has_digit = re.search(r"\d", password) is not None
    has_special = _SPECIAL_CHARACTERS.search(password) is not None

    if not (has_upper and has_lower and has_digit and has_special):
        return Failure(
            error=ValidationError(
                code=ErrorCode.PASSWORD_TOO_WEAK,
                message=(
                    "Password must contain uppercase, lowercase, digit, "
                    "and special character"
                ),
                field="password",
            )
        )
    return Success(value=password)


def validate_code_format(code: str) -> Result[str, ValidationError]:
    """Validate that a one-time code is exactly six digits."""
    if not _CODE_PATTERN.match(code):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_CODE,
                message="Verification code must be 6 digits",
                field="code",
            )
        )
    return Success(value=code)

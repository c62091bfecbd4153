"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers validate and execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    The user cannot login until the email is verified.

    Attributes:
        name: Display name (at least 2 characters).
        email: Email address (normalized to lowercase by the handler).
        password: Plaintext password (validated, then hashed).
    """

    name: str
    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Confirm email ownership with the emailed code."""

    email: str
    code: str


@dataclass(frozen=True, kw_only=True)
class ResendVerification:
    """Issue a fresh email verification code."""

    email: str


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with email and password, producing a token pair.

    Example:
        >>> command = LoginUser(email="ada@example.com", password="S3cure!pw")
        >>> result = await handler.handle(command)
    """

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Revoke one refresh token, or all of the user's tokens when none is given.

    Attributes:
        user_id: Authenticated user.
        refresh_token: Token to revoke. None means logout everywhere.
    """

    user_id: UUID
    refresh_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a live refresh token for a new access token."""

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Email a password reset code (forgot password)."""

    email: str


@dataclass(frozen=True, kw_only=True)
class VerifyResetCode:
    """Trade a valid reset code for a short-lived reset token."""

    email: str
    code: str


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Set a new password after the reset code was verified.

    Attributes:
        user_id: Subject of the reset token.
        new_password: Plaintext new password.
        code: Reset code, re-validated when present.
        confirm_password: Must equal new_password when present.
    """

    user_id: UUID
    new_password: str
    code: str | None = None
    confirm_password: str | None = None


@dataclass(frozen=True, kw_only=True)
class RequestPasswordChange:
    """First step of an authenticated password change.

    Checks the current password, parks the new one and emails a code.
    Nothing changes until ConfirmPasswordChange presents that code.
    """

    user_id: UUID
    current_password: str
    new_password: str
    confirm_password: str


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordChange:
    """Apply the parked password with the emailed code."""

    user_id: UUID
    code: str

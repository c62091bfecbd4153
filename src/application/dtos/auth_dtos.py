"""Authentication DTOs (Data Transfer Objects).

Result dataclasses carried from handlers back to the presentation layer.

DTOs:
    - LoginResult: Token pair plus the authenticated user
    - AccessTokenResult: New access token from a refresh
    - ResetTokenResult: Reset-authorized token from verify-reset-code
"""

from dataclasses import dataclass

from src.domain.entities.user import User


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Response from successful login.

    Attributes:
        access_token: Short-lived JWT.
        refresh_token: Longer-lived JWT, persisted for revocation.
        expires_in: Access token lifetime in seconds.
        user: Authenticated user (after login bookkeeping).
    """

    access_token: str
    refresh_token: str
    expires_in: int
    user: User
    token_type: str = "bearer"


@dataclass(frozen=True, kw_only=True)
class AccessTokenResult:
    """Response from successful refresh."""

    access_token: str
    expires_in: int
    token_type: str = "bearer"


@dataclass(frozen=True, kw_only=True)
class ResetTokenResult:
    """Response from successful reset code verification.

    reset_token is an access-class token; it authorizes the follow-up
    reset-password request only through Bearer authentication.
    """

    reset_token: str
    expires_in: int

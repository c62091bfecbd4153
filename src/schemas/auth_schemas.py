"""Authentication request/response schemas.

Pydantic models for API request parsing and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.
Field rules (email format, password policy, code format) are enforced by
the handlers so every rejection uses the same messages and error codes.

Endpoints:
    POST /api/auth/register             - Create account, email a code
    POST /api/auth/login                - Issue access + refresh tokens
    POST /api/auth/refresh              - Issue a new access token
    POST /api/auth/logout               - Revoke one or all refresh tokens
    POST /api/auth/verify-email         - Confirm email with a code
    POST /api/auth/resend-verification  - Email a new verification code
    POST /api/auth/forgot-password      - Email a reset code
    POST /api/auth/verify-reset-code    - Exchange a reset code for a reset token
    POST /api/auth/reset-password       - Set a new password (reset token)
    GET  /api/auth/me                   - Current user profile
"""

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.user_schemas import UserResponse


# =============================================================================
# Registration
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for registration."""

    name: str = Field(..., description="Display name (2+ characters)", examples=["Ada Lovelace"])
    email: str = Field(..., description="Email address", examples=["ada@example.com"])
    password: str = Field(
        ...,
        description="Password (6+ chars, mixed case, digit, special char)",
        examples=["Secure1!"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "Secure1!",
            }
        }
    )


# =============================================================================
# Login / refresh / logout
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: str = Field(..., description="Email address", examples=["ada@example.com"])
    password: str = Field(..., description="Password")


class LoginData(BaseModel):
    """Token pair plus the authenticated user."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")
    token_type: str = Field(default="bearer", description="Authorization scheme")
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    user: UserResponse


class RefreshRequest(BaseModel):
    """Request schema for access token refresh."""

    refresh_token: str = Field(..., min_length=1, description="Refresh token from login")


class AccessTokenData(BaseModel):
    access_token: str = Field(..., description="New JWT access token")
    token_type: str = Field(default="bearer", description="Authorization scheme")
    expires_in: int = Field(..., description="Access token lifetime in seconds")


class LogoutRequest(BaseModel):
    """Request schema for logout.

    Omitting refresh_token revokes every refresh token of the caller.
    """

    refresh_token: str | None = Field(default=None, description="Token to revoke")


class LogoutData(BaseModel):
    revoked: int = Field(..., description="Number of refresh tokens revoked")


# =============================================================================
# Email verification
# =============================================================================


class VerifyEmailRequest(BaseModel):
    email: str = Field(..., description="Email address")
    code: str = Field(..., description="Six-digit code from the verification email")


class EmailRequest(BaseModel):
    """Request schema carrying only an email (resend, forgot password)."""

    email: str = Field(..., description="Email address", examples=["ada@example.com"])


# =============================================================================
# Password reset
# =============================================================================


class VerifyResetCodeRequest(BaseModel):
    email: str = Field(..., description="Email address")
    code: str = Field(..., description="Six-digit code from the reset email")


class ResetTokenData(BaseModel):
    """Reset token returned by verify-reset-code.

    Send it as ``Authorization: Bearer <reset_token>`` to reset-password.
    """

    reset_token: str = Field(..., description="Short-lived token authorizing the reset")
    expires_in: int = Field(..., description="Reset token lifetime in seconds")


class ResetPasswordRequest(BaseModel):
    """Request schema for password reset (authenticated with the reset token)."""

    new_password: str = Field(..., description="New password (6+ characters)")
    confirm_password: str | None = Field(default=None, description="Must match new_password")
    code: str | None = Field(default=None, description="Reset code, re-checked when sent")

"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request parsing and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, SuccessResponse, UserResponse
"""

from src.schemas.auth_schemas import (
    AccessTokenData,
    EmailRequest,
    LoginData,
    LoginRequest,
    LogoutData,
    LogoutRequest,
    RefreshRequest,
    RegisterRequest,
    ResetPasswordRequest,
    ResetTokenData,
    VerifyEmailRequest,
    VerifyResetCodeRequest,
)
from src.schemas.calendar_schemas import (
    AddMemberRequest,
    CalendarResponse,
    CreateCalendarRequest,
    MemberResponse,
    UpdateCalendarRequest,
    UpdateMemberRoleRequest,
)
from src.schemas.common_schemas import ErrorBody, ErrorResponse, SuccessResponse
from src.schemas.user_schemas import (
    ChangePasswordRequest,
    ConfirmPasswordChangeRequest,
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    # Envelopes
    "ErrorBody",
    "ErrorResponse",
    "SuccessResponse",
    # Auth
    "AccessTokenData",
    "EmailRequest",
    "LoginData",
    "LoginRequest",
    "LogoutData",
    "LogoutRequest",
    "RefreshRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    "ResetTokenData",
    "VerifyEmailRequest",
    "VerifyResetCodeRequest",
    # Users
    "ChangePasswordRequest",
    "ConfirmPasswordChangeRequest",
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
    # Calendars
    "AddMemberRequest",
    "CalendarResponse",
    "CreateCalendarRequest",
    "MemberResponse",
    "UpdateCalendarRequest",
    "UpdateMemberRoleRequest",
]

"""User management request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.user import User


class NotificationPreferencesSchema(BaseModel):
    email: bool
    sms: bool
    push: bool


class PreferencesSchema(BaseModel):
    timezone: str
    notifications: NotificationPreferencesSchema


class UserResponse(BaseModel):
    """Public view of a user.

    Never includes the password hash, lockout counters or code slots.
    """

    id: UUID
    name: str
    email: str
    role: str
    is_active: bool
    is_email_verified: bool
    preferences: PreferencesSchema
    last_login: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Build the public view from a domain entity."""
        notifications = user.preferences.notifications
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            is_active=user.is_active,
            is_email_verified=user.is_email_verified,
            preferences=PreferencesSchema(
                timezone=user.preferences.timezone,
                notifications=NotificationPreferencesSchema(
                    email=notifications.email,
                    sms=notifications.sms,
                    push=notifications.push,
                ),
            ),
            last_login=user.last_login,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class CreateUserRequest(BaseModel):
    """Request schema for admin user creation."""

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Initial password (6+ characters)")
    role: str = Field(default="user", description="user or admin")


class NotificationPreferencesUpdate(BaseModel):
    email: bool | None = None
    sms: bool | None = None
    push: bool | None = None


class PreferencesUpdate(BaseModel):
    timezone: str | None = Field(default=None, description="IANA timezone name")
    notifications: NotificationPreferencesUpdate | None = None


class UpdateUserRequest(BaseModel):
    """Partial profile update. Omitted fields are left unchanged.

    role and is_active are admin-only.
    """

    name: str | None = None
    email: str | None = None
    preferences: PreferencesUpdate | None = None
    role: str | None = None
    is_active: bool | None = None


class ChangePasswordRequest(BaseModel):
    """Request schema for the first step of a password change."""

    current_password: str = Field(..., description="Current password")
    new_password: str = Field(..., description="New password (6+ characters)")
    confirm_password: str = Field(..., description="Must match new_password")


class ConfirmPasswordChangeRequest(BaseModel):
    code: str = Field(..., description="Six-digit code from the password change email")

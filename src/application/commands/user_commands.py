"""User management commands.

The acting user is passed explicitly (actor_id, actor_role) so handlers can
apply self-or-admin rules without reaching into request state.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Admin-created account. The user starts verified."""

    name: str
    email: str
    password: str
    role: str = UserRole.USER.value


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Partial profile update. None leaves a field unchanged.

    Attributes:
        role: Raw role value, validated by the handler (admin only).
        is_active: Account enable flag (admin only).
        notifications: Subset of {"email", "sms", "push"} flags.
    """

    actor_id: UUID
    actor_role: UserRole
    user_id: UUID
    name: str | None = None
    email: str | None = None
    timezone: str | None = None
    notifications: dict[str, bool] | None = None
    role: str | None = None
    is_active: bool | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Delete an account (self or admin)."""

    actor_id: UUID
    actor_role: UserRole
    user_id: UUID

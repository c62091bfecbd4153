"""Permission checking for user-targeted operations.

Roles:
    - admin: may view, modify and delete any user
    - user: may only act on their own account

Usage:
    match PermissionChecker.require_modify_user(actor_id, actor_role, target_id):
        case Failure(error=error):
            return Failure(error=error)
"""

from uuid import UUID

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import UserRole


class PermissionChecker:
    """Self-or-admin rules for user profile operations."""

    @staticmethod
    def can_modify_user(actor_id: UUID, actor_role: UserRole, target_id: UUID) -> bool:
        """Users can modify themselves; admins can modify anyone."""
        return actor_id == target_id or actor_role == UserRole.ADMIN

    @staticmethod
    def can_view_user(actor_id: UUID, actor_role: UserRole, target_id: UUID) -> bool:
        """Users can view themselves; admins can view anyone."""
        return actor_id == target_id or actor_role == UserRole.ADMIN

    @staticmethod
    def is_admin(actor_role: UserRole) -> bool:
        return actor_role == UserRole.ADMIN

    @classmethod
    def require_modify_user(
        cls, actor_id: UUID, actor_role: UserRole, target_id: UUID
    ) -> Result[None, ApplicationError]:
        if cls.can_modify_user(actor_id, actor_role, target_id):
            return Success(value=None)
        return _denied("Access denied: you can only modify your own profile")

    @classmethod
    def require_view_user(
        cls, actor_id: UUID, actor_role: UserRole, target_id: UUID
    ) -> Result[None, ApplicationError]:
        if cls.can_view_user(actor_id, actor_role, target_id):
            return Success(value=None)
        return _denied("Access denied: you can only view your own profile")


def _denied(message: str) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.AUTHORIZATION_ERROR,
            message=message,
        )
    )

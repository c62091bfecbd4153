"""User profile update handler.

Rules:
    - Self or admin may update name, email and preferences
    - Only admins may change role or is_active (403 otherwise)
    - A new email must be valid and unused (409 otherwise)
"""

from datetime import UTC, datetime

from src.application.commands.user_commands import UpdateUser
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.services import PermissionChecker
from src.core.result import Failure, Result, Success
from src.core.validation import validate_email, validate_name
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.protocols import DuplicateEmailError, LoggerProtocol, UserRepository

_NOTIFICATION_CHANNELS = ("email", "sms", "push")


class UpdateUserHandler:
    """Applies a partial profile update."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: UpdateUser) -> Result[User, ApplicationError]:
        match PermissionChecker.require_modify_user(cmd.actor_id, cmd.actor_role, cmd.user_id):
            case Failure() as denied:
                return denied

        if (cmd.role is not None or cmd.is_active is not None) and not (
            PermissionChecker.is_admin(cmd.actor_role)
        ):
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.AUTHORIZATION_ERROR,
                    message="Only administrators can change user roles or status",
                )
            )

        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="User not found",
                )
            )

        if cmd.name is not None:
            match validate_name(cmd.name):
                case Failure(error=error):
                    return Failure(error=ApplicationError.from_domain(error))
                case Success(value=name):
                    user.name = name

        if cmd.email is not None:
            match validate_email(cmd.email):
                case Failure(error=error):
                    return Failure(error=ApplicationError.from_domain(error))
                case Success(value=email):
                    pass
            if email != user.email:
                if await self._user_repo.exists_by_email(email):
                    return _email_in_use()
                user.email = email

        if cmd.role is not None:
            try:
                user.role = UserRole(cmd.role)
            except ValueError:
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.VALIDATION_ERROR,
                        message="Invalid role provided",
                        details={"field": "role"},
                    )
                )

        if cmd.is_active is not None:
            user.is_active = cmd.is_active

        if cmd.timezone is not None:
            user.preferences.timezone = cmd.timezone

        if cmd.notifications:
            for channel in _NOTIFICATION_CHANNELS:
                if channel in cmd.notifications:
                    setattr(user.preferences.notifications, channel, cmd.notifications[channel])

        user.updated_at = datetime.now(UTC)
        try:
            await self._user_repo.update(user)
        except DuplicateEmailError:
            return _email_in_use()

        self._logger.info("user_updated", user_id=str(user.id), actor_id=str(cmd.actor_id))
        return Success(value=user)


def _email_in_use() -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.CONFLICT,
            message="Email is already in use",
            details={"field": "email"},
        )
    )

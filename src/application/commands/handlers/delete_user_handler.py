"""User deletion handler (self or admin).

Refresh tokens, owned calendars and memberships are removed with the user.
"""

from src.application.commands.user_commands import DeleteUser
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.services import PermissionChecker
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, UserRepository


class DeleteUserHandler:
    """Deletes a user account."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[None, ApplicationError]:
        match PermissionChecker.require_modify_user(cmd.actor_id, cmd.actor_role, cmd.user_id):
            case Failure() as denied:
                return denied

        if not await self._user_repo.delete(cmd.user_id):
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="User not found",
                )
            )

        self._logger.info("user_deleted", user_id=str(cmd.user_id), actor_id=str(cmd.actor_id))
        return Success(value=None)

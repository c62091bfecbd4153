"""GetUser query handler (self or admin).

Returns the domain entity; the presentation layer serializes only public
fields (never the password hash or code slots).
"""

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.user_queries import GetUser
from src.application.services import PermissionChecker
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.protocols import UserRepository


class GetUserHandler:
    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetUser) -> Result[User, ApplicationError]:
        match PermissionChecker.require_view_user(
            query.actor_id, query.actor_role, query.user_id
        ):
            case Failure() as denied:
                return denied

        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="User not found",
                )
            )
        return Success(value=user)

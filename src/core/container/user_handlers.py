"""User management handler dependency factories."""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import get_logger, get_password_service
from src.core.container.repositories import get_user_repository

if TYPE_CHECKING:
    from src.application.commands.handlers.create_user_handler import CreateUserHandler
    from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
    from src.application.commands.handlers.update_user_handler import UpdateUserHandler
    from src.application.queries.handlers.get_user_handler import GetUserHandler
    from src.infrastructure.persistence.repositories import UserRepository


async def get_get_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "GetUserHandler":
    """Get GetUser query handler (request-scoped)."""
    from src.application.queries.handlers.get_user_handler import GetUserHandler

    return GetUserHandler(user_repo=user_repo)


async def get_create_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "CreateUserHandler":
    """Get CreateUser command handler (request-scoped)."""
    from src.application.commands.handlers.create_user_handler import CreateUserHandler

    return CreateUserHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_update_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "UpdateUserHandler":
    """Get UpdateUser command handler (request-scoped)."""
    from src.application.commands.handlers.update_user_handler import UpdateUserHandler

    return UpdateUserHandler(user_repo=user_repo, logger=get_logger())


async def get_delete_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "DeleteUserHandler":
    """Get DeleteUser command handler (request-scoped)."""
    from src.application.commands.handlers.delete_user_handler import DeleteUserHandler

    return DeleteUserHandler(user_repo=user_repo, logger=get_logger())

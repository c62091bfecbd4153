"""Repository dependency factories.

Request-scoped repository instances sharing the request's session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        CalendarRepository,
        MemberRepository,
        RefreshTokenRepository,
        UserRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Usage:
        @router.get("/users/{user_id}")
        async def get_user(
            user_repo: UserRepository = Depends(get_user_repository)
        ):
            user = await user_repo.find_by_id(user_id)
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_refresh_token_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshTokenRepository":
    """Get refresh token repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import RefreshTokenRepository

    return RefreshTokenRepository(session=session)


async def get_calendar_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "CalendarRepository":
    from src.infrastructure.persistence.repositories import CalendarRepository

    return CalendarRepository(session=session)


async def get_member_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "MemberRepository":
    from src.infrastructure.persistence.repositories import MemberRepository

    return MemberRepository(session=session)

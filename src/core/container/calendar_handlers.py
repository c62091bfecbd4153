"""Calendar and membership handler dependency factories.

Every factory shares the request's repositories, so a MembershipVerifier
and the handler it guards read from the same session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import get_logger
from src.core.container.repositories import (
    get_calendar_repository,
    get_member_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.add_member_handler import AddMemberHandler
    from src.application.commands.handlers.create_calendar_handler import (
        CreateCalendarHandler,
    )
    from src.application.commands.handlers.delete_calendar_handler import (
        DeleteCalendarHandler,
    )
    from src.application.commands.handlers.remove_member_handler import (
        RemoveMemberHandler,
    )
    from src.application.commands.handlers.update_calendar_handler import (
        UpdateCalendarHandler,
    )
    from src.application.commands.handlers.update_member_role_handler import (
        UpdateMemberRoleHandler,
    )
    from src.application.queries.handlers.list_calendars_handler import (
        ListCalendarsHandler,
    )
    from src.application.queries.handlers.list_members_handler import (
        ListMembersHandler,
    )
    from src.application.services import MembershipVerifier
    from src.infrastructure.persistence.repositories import (
        CalendarRepository,
        MemberRepository,
        UserRepository,
    )


async def get_membership_verifier(
    calendar_repo: "CalendarRepository" = Depends(get_calendar_repository),
    member_repo: "MemberRepository" = Depends(get_member_repository),
) -> "MembershipVerifier":
    """Get calendar access verifier (request-scoped)."""
    from src.application.services import MembershipVerifier

    return MembershipVerifier(calendar_repo=calendar_repo, member_repo=member_repo)


# ============================================================================
# Calendar Handlers
# ============================================================================


async def get_create_calendar_handler(
    calendar_repo: "CalendarRepository" = Depends(get_calendar_repository),
    member_repo: "MemberRepository" = Depends(get_member_repository),
) -> "CreateCalendarHandler":
    from src.application.commands.handlers.create_calendar_handler import (
        CreateCalendarHandler,
    )

    return CreateCalendarHandler(
        calendar_repo=calendar_repo,
        member_repo=member_repo,
        logger=get_logger(),
    )


async def get_list_calendars_handler(
    calendar_repo: "CalendarRepository" = Depends(get_calendar_repository),
) -> "ListCalendarsHandler":
    from src.application.queries.handlers.list_calendars_handler import (
        ListCalendarsHandler,
    )

    return ListCalendarsHandler(calendar_repo=calendar_repo)


async def get_update_calendar_handler(
    calendar_repo: "CalendarRepository" = Depends(get_calendar_repository),
    verifier: "MembershipVerifier" = Depends(get_membership_verifier),
) -> "UpdateCalendarHandler":
    from src.application.commands.handlers.update_calendar_handler import (
        UpdateCalendarHandler,
    )

    return UpdateCalendarHandler(
        calendar_repo=calendar_repo,
        verifier=verifier,
        logger=get_logger(),
    )


async def get_delete_calendar_handler(
    calendar_repo: "CalendarRepository" = Depends(get_calendar_repository),
    verifier: "MembershipVerifier" = Depends(get_membership_verifier),
) -> "DeleteCalendarHandler":
    from src.application.commands.handlers.delete_calendar_handler import (
        DeleteCalendarHandler,
    )

    return DeleteCalendarHandler(
        calendar_repo=calendar_repo,
        verifier=verifier,
        logger=get_logger(),
    )


# ============================================================================
# Member Handlers
# ============================================================================


async def get_list_members_handler(
    member_repo: "MemberRepository" = Depends(get_member_repository),
    verifier: "MembershipVerifier" = Depends(get_membership_verifier),
) -> "ListMembersHandler":
    from src.application.queries.handlers.list_members_handler import (
        ListMembersHandler,
    )

    return ListMembersHandler(member_repo=member_repo, verifier=verifier)


async def get_add_member_handler(
    member_repo: "MemberRepository" = Depends(get_member_repository),
    user_repo: "UserRepository" = Depends(get_user_repository),
    verifier: "MembershipVerifier" = Depends(get_membership_verifier),
) -> "AddMemberHandler":
    from src.application.commands.handlers.add_member_handler import AddMemberHandler

    return AddMemberHandler(
        member_repo=member_repo,
        user_repo=user_repo,
        verifier=verifier,
        logger=get_logger(),
    )


async def get_update_member_role_handler(
    member_repo: "MemberRepository" = Depends(get_member_repository),
    verifier: "MembershipVerifier" = Depends(get_membership_verifier),
) -> "UpdateMemberRoleHandler":
    from src.application.commands.handlers.update_member_role_handler import (
        UpdateMemberRoleHandler,
    )

    return UpdateMemberRoleHandler(
        member_repo=member_repo,
        verifier=verifier,
        logger=get_logger(),
    )


async def get_remove_member_handler(
    member_repo: "MemberRepository" = Depends(get_member_repository),
    verifier: "MembershipVerifier" = Depends(get_membership_verifier),
) -> "RemoveMemberHandler":
    from src.application.commands.handlers.remove_member_handler import (
        RemoveMemberHandler,
    )

    return RemoveMemberHandler(
        member_repo=member_repo,
        verifier=verifier,
        logger=get_logger(),
    )

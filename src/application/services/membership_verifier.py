"""Calendar access verification service.

Centralizes the calendar and membership lookups that every calendar and
member handler needs before acting.

Access rules:
    - Calendar settings (rename, retype, delete): owner only, and a
      calendar the caller does not own is reported as not found
    - Reading the member list: any member
    - Adding, re-roling and removing members: owner or editor

Usage:
    verifier = MembershipVerifier(calendar_repo, member_repo)

    match await verifier.require_manager(calendar_id, user_id):
        case Failure(error=error):
            return Failure(error=error)
        case Success(value=membership):
            ...
"""

from uuid import UUID

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities import Calendar, CalendarMember
from src.domain.errors import CalendarErrorMessage
from src.domain.protocols import CalendarRepository, MemberRepository


class MembershipVerifier:
    """Resolves calendars and the caller's membership in them."""

    def __init__(
        self,
        calendar_repo: CalendarRepository,
        member_repo: MemberRepository,
    ) -> None:
        self._calendar_repo = calendar_repo
        self._member_repo = member_repo

    async def require_owned_calendar(
        self, calendar_id: UUID, user_id: UUID
    ) -> Result[Calendar, ApplicationError]:
        """Return the calendar if it exists and the user owns it.

        A calendar owned by someone else yields the same not-found error as a
        missing one, so calendar ids cannot be guessed.
        """
        calendar = await self._calendar_repo.find_by_id(calendar_id)
        if calendar is None or not calendar.is_owned_by(user_id):
            return Failure(error=_not_found(CalendarErrorMessage.CALENDAR_NOT_FOUND))
        return Success(value=calendar)

    async def require_member(
        self, calendar_id: UUID, user_id: UUID
    ) -> Result[CalendarMember, ApplicationError]:
        """Return the caller's membership in an existing calendar."""
        if await self._calendar_repo.find_by_id(calendar_id) is None:
            return Failure(error=_not_found(CalendarErrorMessage.CALENDAR_NOT_FOUND))

        membership = await self._member_repo.find_by_user_and_calendar(user_id, calendar_id)
        if membership is None:
            return Failure(error=_forbidden(CalendarErrorMessage.NOT_A_MEMBER))
        return Success(value=membership)

    async def require_manager(
        self, calendar_id: UUID, user_id: UUID
    ) -> Result[CalendarMember, ApplicationError]:
        """Return the caller's membership if it allows managing members."""
        match await self.require_member(calendar_id, user_id):
            case Failure() as failure:
                return failure
            case Success(value=membership):
                pass

        if not membership.can_manage_members:
            return Failure(error=_forbidden(CalendarErrorMessage.CANNOT_MANAGE_MEMBERS))
        return Success(value=membership)

    async def find_member_in_calendar(
        self, member_id: UUID, calendar_id: UUID
    ) -> Result[CalendarMember, ApplicationError]:
        """Return a membership only if it belongs to the given calendar."""
        member = await self._member_repo.find_by_id(member_id)
        if member is None or member.calendar_id != calendar_id:
            return Failure(error=_not_found(CalendarErrorMessage.MEMBER_NOT_FOUND))
        return Success(value=member)


def _not_found(message: str) -> ApplicationError:
    return ApplicationError(code=ApplicationErrorCode.NOT_FOUND, message=message)


def _forbidden(message: str) -> ApplicationError:
    return ApplicationError(code=ApplicationErrorCode.AUTHORIZATION_ERROR, message=message)

"""AddMember command handler.

Flow:
    1. Caller must be an owner or editor of the calendar
    2. Role must be owner, editor or viewer
    3. Target user must exist
    4. Target must not already be a member
"""

from uuid_extensions import uuid7

from src.application.commands.calendar_commands import AddMember
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.services import MembershipVerifier
from src.core.result import Failure, Result, Success
from src.domain.entities import CalendarMember
from src.domain.enums import MemberRole
from src.domain.errors import CalendarErrorMessage
from src.domain.protocols import LoggerProtocol, MemberRepository, UserRepository

INVALID_MEMBER_ROLE_MESSAGE = "Role must be 'owner', 'editor' or 'viewer'"


def parse_member_role(value: str | None) -> Result[MemberRole, ApplicationError]:
    """Parse a raw membership role, failing with a field-tagged validation error."""
    try:
        return Success(value=MemberRole((value or "").strip().lower()))
    except ValueError:
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.VALIDATION_ERROR,
                message=INVALID_MEMBER_ROLE_MESSAGE,
                details={"field": "role"},
            )
        )


class AddMemberHandler:
    """Adds a user to a calendar."""

    def __init__(
        self,
        member_repo: MemberRepository,
        user_repo: UserRepository,
        verifier: MembershipVerifier,
        logger: LoggerProtocol,
    ) -> None:
        self._member_repo = member_repo
        self._user_repo = user_repo
        self._verifier = verifier
        self._logger = logger

    async def handle(self, cmd: AddMember) -> Result[CalendarMember, ApplicationError]:
        match await self._verifier.require_manager(cmd.calendar_id, cmd.actor_id):
            case Failure() as failure:
                return failure

        match parse_member_role(cmd.role):
            case Failure() as failure:
                return failure
            case Success(value=role):
                pass

        if await self._user_repo.find_by_id(cmd.user_id) is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=CalendarErrorMessage.USER_NOT_FOUND,
                )
            )

        existing = await self._member_repo.find_by_user_and_calendar(
            cmd.user_id, cmd.calendar_id
        )
        if existing is not None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.CONFLICT,
                    message=CalendarErrorMessage.MEMBER_ALREADY_EXISTS,
                )
            )

        member = CalendarMember(
            id=uuid7(),
            user_id=cmd.user_id,
            calendar_id=cmd.calendar_id,
            role=role,
        )
        await self._member_repo.save(member)

        self._logger.info(
            "calendar_member_added",
            calendar_id=str(cmd.calendar_id),
            user_id=str(cmd.user_id),
            role=role.value,
            actor_id=str(cmd.actor_id),
        )
        return Success(value=member)

"""UpdateMemberRole command handler (owner or editor)."""

from src.application.commands.calendar_commands import UpdateMemberRole
from src.application.commands.handlers.add_member_handler import parse_member_role
from src.application.errors import ApplicationError
from src.application.services import MembershipVerifier
from src.core.result import Failure, Result, Success
from src.domain.entities import CalendarMember
from src.domain.protocols import LoggerProtocol, MemberRepository


class UpdateMemberRoleHandler:
    """Changes the role of an existing member."""

    def __init__(
        self,
        member_repo: MemberRepository,
        verifier: MembershipVerifier,
        logger: LoggerProtocol,
    ) -> None:
        self._member_repo = member_repo
        self._verifier = verifier
        self._logger = logger

    async def handle(self, cmd: UpdateMemberRole) -> Result[CalendarMember, ApplicationError]:
        match await self._verifier.require_manager(cmd.calendar_id, cmd.actor_id):
            case Failure() as failure:
                return failure

        match parse_member_role(cmd.role):
            case Failure() as failure:
                return failure
            case Success(value=role):
                pass

        match await self._verifier.find_member_in_calendar(cmd.member_id, cmd.calendar_id):
            case Failure() as failure:
                return failure
            case Success(value=member):
                pass

        member.role = role
        await self._member_repo.update(member)

        self._logger.info(
            "calendar_member_role_updated",
            calendar_id=str(cmd.calendar_id),
            member_id=str(member.id),
            role=role.value,
        )
        return Success(value=member)

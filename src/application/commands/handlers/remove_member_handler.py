"""RemoveMember command handler.

Owners and editors may remove anyone. Any member may remove themself
(leave the calendar).
"""

from src.application.commands.calendar_commands import RemoveMember
from src.application.errors import ApplicationError
from src.application.services import MembershipVerifier
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, MemberRepository


class RemoveMemberHandler:
    def __init__(
        self,
        member_repo: MemberRepository,
        verifier: MembershipVerifier,
        logger: LoggerProtocol,
    ) -> None:
        self._member_repo = member_repo
        self._verifier = verifier
        self._logger = logger

    async def handle(self, cmd: RemoveMember) -> Result[None, ApplicationError]:
        match await self._verifier.require_member(cmd.calendar_id, cmd.actor_id):
            case Failure() as failure:
                return failure
            case Success(value=actor_membership):
                pass

        match await self._verifier.find_member_in_calendar(cmd.member_id, cmd.calendar_id):
            case Failure() as failure:
                return failure
            case Success(value=member):
                pass

        if member.user_id != cmd.actor_id:
            match await self._verifier.require_manager(cmd.calendar_id, cmd.actor_id):
                case Failure() as failure:
                    return failure

        await self._member_repo.delete(member.id)

        self._logger.info(
            "calendar_member_removed",
            calendar_id=str(cmd.calendar_id),
            member_id=str(member.id),
            actor_id=str(cmd.actor_id),
            actor_role=actor_membership.role.value,
        )
        return Success(value=None)

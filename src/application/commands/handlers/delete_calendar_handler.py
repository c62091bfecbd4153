"""DeleteCalendar command handler (owner only, memberships removed too)."""

from src.application.commands.calendar_commands import DeleteCalendar
from src.application.errors import ApplicationError
from src.application.services import MembershipVerifier
from src.core.result import Failure, Result, Success
from src.domain.protocols import CalendarRepository, LoggerProtocol


class DeleteCalendarHandler:
    def __init__(
        self,
        calendar_repo: CalendarRepository,
        verifier: MembershipVerifier,
        logger: LoggerProtocol,
    ) -> None:
        self._calendar_repo = calendar_repo
        self._verifier = verifier
        self._logger = logger

    async def handle(self, cmd: DeleteCalendar) -> Result[None, ApplicationError]:
        match await self._verifier.require_owned_calendar(cmd.calendar_id, cmd.owner_id):
            case Failure() as failure:
                return failure

        await self._calendar_repo.delete(cmd.calendar_id)

        self._logger.info(
            "calendar_deleted",
            calendar_id=str(cmd.calendar_id),
            owner_id=str(cmd.owner_id),
        )
        return Success(value=None)

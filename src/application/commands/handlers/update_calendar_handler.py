"""UpdateCalendar command handler (owner only)."""

from src.application.commands.calendar_commands import UpdateCalendar
from src.application.commands.handlers.create_calendar_handler import (
    parse_calendar_type,
)
from src.application.errors import ApplicationError
from src.application.services import MembershipVerifier
from src.core.result import Failure, Result, Success
from src.core.validation import validate_not_empty
from src.domain.entities import Calendar
from src.domain.errors import CalendarErrorMessage
from src.domain.protocols import CalendarRepository, LoggerProtocol


class UpdateCalendarHandler:
    """Applies a partial update to a calendar the caller owns."""

    def __init__(
        self,
        calendar_repo: CalendarRepository,
        verifier: MembershipVerifier,
        logger: LoggerProtocol,
    ) -> None:
        self._calendar_repo = calendar_repo
        self._verifier = verifier
        self._logger = logger

    async def handle(self, cmd: UpdateCalendar) -> Result[Calendar, ApplicationError]:
        match await self._verifier.require_owned_calendar(cmd.calendar_id, cmd.owner_id):
            case Failure() as failure:
                return failure
            case Success(value=calendar):
                pass

        name = None
        if cmd.name is not None:
            match validate_not_empty(cmd.name, "name"):
                case Failure(error=error):
                    return Failure(
                        error=ApplicationError.from_domain(
                            error, CalendarErrorMessage.NAME_REQUIRED
                        )
                    )
            name = cmd.name.strip()

        calendar_type = None
        if cmd.type is not None:
            match parse_calendar_type(cmd.type):
                case Failure() as failure:
                    return failure
                case Success(value=calendar_type):
                    pass

        calendar.update_details(name=name, description=cmd.description, type=calendar_type)
        await self._calendar_repo.update(calendar)

        self._logger.info("calendar_updated", calendar_id=str(calendar.id))
        return Success(value=calendar)

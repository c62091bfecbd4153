"""CreateCalendar command handler.

Flow:
    1. Validate name and type
    2. Save the calendar
    3. Save an owner membership for the creator
"""

from uuid_extensions import uuid7

from src.application.commands.calendar_commands import CreateCalendar
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.core.validation import validate_not_empty
from src.domain.entities import Calendar, CalendarMember
from src.domain.enums import CalendarType, MemberRole
from src.domain.errors import CalendarErrorMessage
from src.domain.protocols import CalendarRepository, LoggerProtocol, MemberRepository

INVALID_TYPE_MESSAGE = "Calendar type must be 'personal' or 'group'"


def parse_calendar_type(value: str | None) -> Result[CalendarType, ApplicationError]:
    """Parse a raw calendar type, failing with a field-tagged validation error."""
    try:
        return Success(value=CalendarType((value or "").strip().lower()))
    except ValueError:
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.VALIDATION_ERROR,
                message=INVALID_TYPE_MESSAGE,
                details={"field": "type"},
            )
        )


class CreateCalendarHandler:
    """Creates a calendar and its owner membership."""

    def __init__(
        self,
        calendar_repo: CalendarRepository,
        member_repo: MemberRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._calendar_repo = calendar_repo
        self._member_repo = member_repo
        self._logger = logger

    async def handle(self, cmd: CreateCalendar) -> Result[Calendar, ApplicationError]:
        match validate_not_empty(cmd.name, "name"):
            case Failure(error=error):
                return Failure(
                    error=ApplicationError.from_domain(
                        error, CalendarErrorMessage.NAME_REQUIRED
                    )
                )

        match parse_calendar_type(cmd.type):
            case Failure() as failure:
                return failure
            case Success(value=calendar_type):
                pass

        calendar = Calendar(
            id=uuid7(),
            owner_id=cmd.owner_id,
            name=cmd.name.strip(),
            type=calendar_type,
            description=cmd.description,
        )
        await self._calendar_repo.save(calendar)
        await self._member_repo.save(
            CalendarMember(
                id=uuid7(),
                user_id=cmd.owner_id,
                calendar_id=calendar.id,
                role=MemberRole.OWNER,
            )
        )

        self._logger.info(
            "calendar_created",
            calendar_id=str(calendar.id),
            owner_id=str(cmd.owner_id),
            type=calendar_type.value,
        )
        return Success(value=calendar)

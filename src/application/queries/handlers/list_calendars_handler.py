"""ListCalendars query handler."""

from src.application.errors import ApplicationError
from src.application.queries.calendar_queries import ListCalendars
from src.core.result import Result, Success
from src.domain.entities import Calendar
from src.domain.protocols import CalendarRepository


class ListCalendarsHandler:
    """Lists the calendars owned by the caller, newest first."""

    def __init__(self, calendar_repo: CalendarRepository) -> None:
        self._calendar_repo = calendar_repo

    async def handle(self, query: ListCalendars) -> Result[list[Calendar], ApplicationError]:
        calendars = await self._calendar_repo.list_by_owner(query.owner_id)
        return Success(value=calendars)

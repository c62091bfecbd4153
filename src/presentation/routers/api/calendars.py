"""Calendar endpoints (authenticated).

A calendar someone else owns is reported as not found on update and delete.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.commands.calendar_commands import (
    CreateCalendar,
    DeleteCalendar,
    UpdateCalendar,
)
from src.application.commands.handlers.create_calendar_handler import (
    CreateCalendarHandler,
)
from src.application.commands.handlers.delete_calendar_handler import (
    DeleteCalendarHandler,
)
from src.application.commands.handlers.update_calendar_handler import (
    UpdateCalendarHandler,
)
from src.application.queries.calendar_queries import ListCalendars
from src.application.queries.handlers.list_calendars_handler import (
    ListCalendarsHandler,
)
from src.core.container import (
    get_create_calendar_handler,
    get_delete_calendar_handler,
    get_list_calendars_handler,
    get_update_calendar_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware import CurrentUser, get_current_user
from src.schemas import (
    CalendarResponse,
    CreateCalendarRequest,
    SuccessResponse,
    UpdateCalendarRequest,
)

calendars_router = APIRouter(prefix="/calendars", tags=["Calendars"])


@calendars_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[CalendarResponse],
)
async def create_calendar(
    data: CreateCalendarRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: CreateCalendarHandler = Depends(get_create_calendar_handler),
) -> SuccessResponse[CalendarResponse] | JSONResponse:
    """Create a calendar owned by the caller.

    POST /api/calendars → 201 Created
    """
    command = CreateCalendar(
        owner_id=current_user.user_id,
        name=data.name,
        type=data.type,
        description=data.description,
    )

    match await handler.handle(command):
        case Success(value=calendar):
            return SuccessResponse[CalendarResponse](
                message="Calendar created successfully",
                data=CalendarResponse.from_entity(calendar),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@calendars_router.get("", response_model=SuccessResponse[list[CalendarResponse]])
async def list_calendars(
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListCalendarsHandler = Depends(get_list_calendars_handler),
) -> SuccessResponse[list[CalendarResponse]] | JSONResponse:
    """List the caller's own calendars."""
    match await handler.handle(ListCalendars(owner_id=current_user.user_id)):
        case Success(value=calendars):
            return SuccessResponse[list[CalendarResponse]](
                data=[CalendarResponse.from_entity(c) for c in calendars],
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@calendars_router.patch(
    "/{calendar_id}", response_model=SuccessResponse[CalendarResponse]
)
async def update_calendar(
    calendar_id: UUID,
    data: UpdateCalendarRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: UpdateCalendarHandler = Depends(get_update_calendar_handler),
) -> SuccessResponse[CalendarResponse] | JSONResponse:
    """Update a calendar (owner only)."""
    command = UpdateCalendar(
        owner_id=current_user.user_id,
        calendar_id=calendar_id,
        name=data.name,
        description=data.description,
        type=data.type,
    )

    match await handler.handle(command):
        case Success(value=calendar):
            return SuccessResponse[CalendarResponse](
                message="Calendar updated successfully",
                data=CalendarResponse.from_entity(calendar),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@calendars_router.delete("/{calendar_id}", response_model=SuccessResponse[None])
async def delete_calendar(
    calendar_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: DeleteCalendarHandler = Depends(get_delete_calendar_handler),
) -> SuccessResponse[None] | JSONResponse:
    """Delete a calendar and its memberships (owner only)."""
    command = DeleteCalendar(owner_id=current_user.user_id, calendar_id=calendar_id)

    match await handler.handle(command):
        case Success():
            return SuccessResponse[None](message="Calendar deleted successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)

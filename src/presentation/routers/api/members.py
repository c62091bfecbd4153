"""Calendar membership endpoints (authenticated).

Nested under /calendars/{calendar_id}/members.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.commands.calendar_commands import (
    AddMember,
    RemoveMember,
    UpdateMemberRole,
)
from src.application.commands.handlers.add_member_handler import AddMemberHandler
from src.application.commands.handlers.remove_member_handler import (
    RemoveMemberHandler,
)
from src.application.commands.handlers.update_member_role_handler import (
    UpdateMemberRoleHandler,
)
from src.application.queries.calendar_queries import ListMembers
from src.application.queries.handlers.list_members_handler import ListMembersHandler
from src.core.container import (
    get_add_member_handler,
    get_list_members_handler,
    get_remove_member_handler,
    get_update_member_role_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware import CurrentUser, get_current_user
from src.schemas import (
    AddMemberRequest,
    MemberResponse,
    SuccessResponse,
    UpdateMemberRoleRequest,
)

members_router = APIRouter(prefix="/calendars/{calendar_id}/members", tags=["Members"])


@members_router.get("", response_model=SuccessResponse[list[MemberResponse]])
async def list_members(
    calendar_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListMembersHandler = Depends(get_list_members_handler),
) -> SuccessResponse[list[MemberResponse]] | JSONResponse:
    """List members (caller must be a member)."""
    query = ListMembers(actor_id=current_user.user_id, calendar_id=calendar_id)

    match await handler.handle(query):
        case Success(value=members):
            return SuccessResponse[list[MemberResponse]](
                data=[MemberResponse.from_entity(m) for m in members],
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@members_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[MemberResponse],
)
async def add_member(
    calendar_id: UUID,
    data: AddMemberRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: AddMemberHandler = Depends(get_add_member_handler),
) -> SuccessResponse[MemberResponse] | JSONResponse:
    """Add a user to the calendar (owner or editor)."""
    command = AddMember(
        actor_id=current_user.user_id,
        calendar_id=calendar_id,
        user_id=data.user_id,
        role=data.role,
    )

    match await handler.handle(command):
        case Success(value=member):
            return SuccessResponse[MemberResponse](
                message="Member added successfully",
                data=MemberResponse.from_entity(member),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@members_router.patch("/{member_id}", response_model=SuccessResponse[MemberResponse])
async def update_member_role(
    calendar_id: UUID,
    member_id: UUID,
    data: UpdateMemberRoleRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: UpdateMemberRoleHandler = Depends(get_update_member_role_handler),
) -> SuccessResponse[MemberResponse] | JSONResponse:
    """Change a member's role (owner or editor)."""
    command = UpdateMemberRole(
        actor_id=current_user.user_id,
        calendar_id=calendar_id,
        member_id=member_id,
        role=data.role,
    )

    match await handler.handle(command):
        case Success(value=member):
            return SuccessResponse[MemberResponse](
                message="Member role updated successfully",
                data=MemberResponse.from_entity(member),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@members_router.delete("/{member_id}", response_model=SuccessResponse[None])
async def remove_member(
    calendar_id: UUID,
    member_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: RemoveMemberHandler = Depends(get_remove_member_handler),
) -> SuccessResponse[None] | JSONResponse:
    """Remove a member (owner or editor, or the member themself)."""
    command = RemoveMember(
        actor_id=current_user.user_id,
        calendar_id=calendar_id,
        member_id=member_id,
    )

    match await handler.handle(command):
        case Success():
            return SuccessResponse[None](message="Member removed successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)

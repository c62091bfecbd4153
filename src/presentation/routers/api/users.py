"""User management endpoints.

Profile view, update and delete are self-or-admin; creating users is
admin-only. Password changes are limited to the caller's own account and
take two calls: PUT parks the new password and emails a code, POST
.../password/verify applies it.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    ConfirmPasswordChange,
    RequestPasswordChange,
)
from src.application.commands.handlers.confirm_password_change_handler import (
    ConfirmPasswordChangeHandler,
)
from src.application.commands.handlers.create_user_handler import CreateUserHandler
from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
from src.application.commands.handlers.request_password_change_handler import (
    RequestPasswordChangeHandler,
)
from src.application.commands.handlers.update_user_handler import UpdateUserHandler
from src.application.commands.user_commands import CreateUser, DeleteUser, UpdateUser
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.handlers.get_user_handler import GetUserHandler
from src.application.queries.user_queries import GetUser
from src.core.container import (
    get_confirm_password_change_handler,
    get_create_user_handler,
    get_delete_user_handler,
    get_get_user_handler,
    get_request_password_change_handler,
    get_update_user_handler,
)
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware import (
    CurrentUser,
    get_current_user,
    require_role,
)
from src.schemas import (
    ChangePasswordRequest,
    ConfirmPasswordChangeRequest,
    CreateUserRequest,
    SuccessResponse,
    UpdateUserRequest,
    UserResponse,
)

users_router = APIRouter(prefix="/users", tags=["Users"])


@users_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[UserResponse],
)
async def create_user(
    data: CreateUserRequest,
    current_user: CurrentUser = Depends(require_role(UserRole.ADMIN)),
    handler: CreateUserHandler = Depends(get_create_user_handler),
) -> SuccessResponse[UserResponse] | JSONResponse:
    """Create a pre-verified user (admin only).

    POST /api/users → 201 Created
    """
    command = CreateUser(
        name=data.name,
        email=data.email,
        password=data.password,
        role=data.role,
    )

    match await handler.handle(command):
        case Success(value=user):
            return SuccessResponse[UserResponse](
                message="User created successfully",
                data=UserResponse.from_entity(user),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@users_router.get("/{user_id}", response_model=SuccessResponse[UserResponse])
async def get_user(
    user_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> SuccessResponse[UserResponse] | JSONResponse:
    """View a profile (self or admin)."""
    query = GetUser(
        actor_id=current_user.user_id,
        actor_role=current_user.role,
        user_id=user_id,
    )

    match await handler.handle(query):
        case Success(value=user):
            return SuccessResponse[UserResponse](data=UserResponse.from_entity(user))
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@users_router.patch("/{user_id}", response_model=SuccessResponse[UserResponse])
async def update_user(
    user_id: UUID,
    data: UpdateUserRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: UpdateUserHandler = Depends(get_update_user_handler),
) -> SuccessResponse[UserResponse] | JSONResponse:
    """Partially update a profile (self or admin; role/status admin only)."""
    preferences = data.preferences
    notifications = None
    if preferences is not None and preferences.notifications is not None:
        notifications = preferences.notifications.model_dump(exclude_none=True)

    command = UpdateUser(
        actor_id=current_user.user_id,
        actor_role=current_user.role,
        user_id=user_id,
        name=data.name,
        email=data.email,
        timezone=preferences.timezone if preferences else None,
        notifications=notifications,
        role=data.role,
        is_active=data.is_active,
    )

    match await handler.handle(command):
        case Success(value=user):
            return SuccessResponse[UserResponse](
                message="User updated successfully",
                data=UserResponse.from_entity(user),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@users_router.delete("/{user_id}", response_model=SuccessResponse[None])
async def delete_user(
    user_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: DeleteUserHandler = Depends(get_delete_user_handler),
) -> SuccessResponse[None] | JSONResponse:
    """Delete an account (self or admin)."""
    command = DeleteUser(
        actor_id=current_user.user_id,
        actor_role=current_user.role,
        user_id=user_id,
    )

    match await handler.handle(command):
        case Success():
            return SuccessResponse[None](message="User deleted successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


def _other_account_error(user_id: UUID, current_user: CurrentUser) -> JSONResponse | None:
    if user_id == current_user.user_id:
        return None
    return ErrorResponseBuilder.from_application_error(
        ApplicationError(
            code=ApplicationErrorCode.AUTHORIZATION_ERROR,
            message="You can only change your own password",
        )
    )


@users_router.put("/{user_id}/password", response_model=SuccessResponse[None])
async def request_password_change(
    user_id: UUID,
    data: ChangePasswordRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: RequestPasswordChangeHandler = Depends(get_request_password_change_handler),
) -> SuccessResponse[None] | JSONResponse:
    """Check the current password and email a confirmation code.

    PUT /api/users/{id}/password → 200 OK, password unchanged until verified
    """
    forbidden = _other_account_error(user_id, current_user)
    if forbidden is not None:
        return forbidden

    command = RequestPasswordChange(
        user_id=current_user.user_id,
        current_password=data.current_password,
        new_password=data.new_password,
        confirm_password=data.confirm_password,
    )

    match await handler.handle(command):
        case Success():
            return SuccessResponse[None](message="Verification code sent to your email")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@users_router.post("/{user_id}/password/verify", response_model=SuccessResponse[None])
async def confirm_password_change(
    user_id: UUID,
    data: ConfirmPasswordChangeRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: ConfirmPasswordChangeHandler = Depends(get_confirm_password_change_handler),
) -> SuccessResponse[None] | JSONResponse:
    """Apply the pending password; all refresh tokens are revoked."""
    forbidden = _other_account_error(user_id, current_user)
    if forbidden is not None:
        return forbidden

    command = ConfirmPasswordChange(user_id=current_user.user_id, code=data.code)

    match await handler.handle(command):
        case Success():
            return SuccessResponse[None](message="Password updated successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)

"""Authentication endpoints.

Login and forgot-password run their guards (lockout, reset cooldown)
through run_guarded before the handler executes.

Handlers:
    register, login, refresh, logout, verify_email, resend_verification,
    forgot_password, verify_reset_code, reset_password, me
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    LoginUser,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
    ResendVerification,
    ResetPassword,
    VerifyEmail,
    VerifyResetCode,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.register_user_handler import RegisterUserHandler
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.application.commands.handlers.resend_verification_handler import (
    ResendVerificationHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.verify_email_handler import VerifyEmailHandler
from src.application.commands.handlers.verify_reset_code_handler import (
    VerifyResetCodeHandler,
)
from src.application.guards import LoginLockGuard, PasswordResetCooldownGuard, run_guarded
from src.application.queries.handlers.get_user_handler import GetUserHandler
from src.application.queries.user_queries import GetUser
from src.core.container import (
    get_get_user_handler,
    get_login_lock_guard,
    get_login_user_handler,
    get_logout_user_handler,
    get_password_reset_cooldown_guard,
    get_refresh_access_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_resend_verification_handler,
    get_reset_password_handler,
    get_verify_email_handler,
    get_verify_reset_code_handler,
)
from src.core.result import Failure, Success
from src.domain.errors import AuthErrorMessage
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware import CurrentUser, get_current_user
from src.schemas import (
    AccessTokenData,
    EmailRequest,
    LoginData,
    LoginRequest,
    LogoutData,
    LogoutRequest,
    RefreshRequest,
    RegisterRequest,
    ResetPasswordRequest,
    ResetTokenData,
    SuccessResponse,
    UserResponse,
    VerifyEmailRequest,
    VerifyResetCodeRequest,
)

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])


@auth_router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[UserResponse],
)
async def register(
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> SuccessResponse[UserResponse] | JSONResponse:
    """Create an account and email a verification code.

    POST /api/auth/register → 201 Created
    """
    command = RegisterUser(name=data.name, email=data.email, password=data.password)

    match await handler.handle(command):
        case Success(value=user):
            return SuccessResponse[UserResponse](
                message=AuthErrorMessage.REGISTRATION_SUCCESSFUL,
                data=UserResponse.from_entity(user),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@auth_router.post("/login", response_model=SuccessResponse[LoginData])
async def login(
    data: LoginRequest,
    guard: LoginLockGuard = Depends(get_login_lock_guard),
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> SuccessResponse[LoginData] | JSONResponse:
    """Authenticate and issue an access/refresh token pair.

    POST /api/auth/login → 200 OK
    Locked accounts get 423 with the minutes remaining.
    """
    command = LoginUser(email=data.email, password=data.password)

    match await run_guarded([guard], data.email, lambda: handler.handle(command)):
        case Success(value=login_result):
            return SuccessResponse[LoginData](
                message="Login successful",
                data=LoginData(
                    access_token=login_result.access_token,
                    refresh_token=login_result.refresh_token,
                    token_type=login_result.token_type,
                    expires_in=login_result.expires_in,
                    user=UserResponse.from_entity(login_result.user),
                ),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@auth_router.post("/refresh", response_model=SuccessResponse[AccessTokenData])
async def refresh(
    data: RefreshRequest,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_access_token_handler),
) -> SuccessResponse[AccessTokenData] | JSONResponse:
    """Exchange a live refresh token for a new access token."""
    match await handler.handle(RefreshAccessToken(refresh_token=data.refresh_token)):
        case Success(value=token):
            return SuccessResponse[AccessTokenData](
                data=AccessTokenData(
                    access_token=token.access_token,
                    token_type=token.token_type,
                    expires_in=token.expires_in,
                ),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@auth_router.post("/logout", response_model=SuccessResponse[LogoutData])
async def logout(
    data: LogoutRequest | None = None,
    current_user: CurrentUser = Depends(get_current_user),
    handler: LogoutUserHandler = Depends(get_logout_user_handler),
) -> SuccessResponse[LogoutData] | JSONResponse:
    """Revoke the given refresh token, or all of the caller's tokens."""
    command = LogoutUser(
        user_id=current_user.user_id,
        refresh_token=data.refresh_token if data else None,
    )

    match await handler.handle(command):
        case Success(value=revoked):
            return SuccessResponse[LogoutData](
                message="Logged out successfully",
                data=LogoutData(revoked=revoked),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@auth_router.post("/verify-email", response_model=SuccessResponse[UserResponse])
async def verify_email(
    data: VerifyEmailRequest,
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> SuccessResponse[UserResponse] | JSONResponse:
    """Confirm email ownership with the emailed six-digit code."""
    match await handler.handle(VerifyEmail(email=data.email, code=data.code)):
        case Success(value=user):
            return SuccessResponse[UserResponse](
                message="Email verified successfully",
                data=UserResponse.from_entity(user),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@auth_router.post("/resend-verification", response_model=SuccessResponse[None])
async def resend_verification(
    data: EmailRequest,
    handler: ResendVerificationHandler = Depends(get_resend_verification_handler),
) -> SuccessResponse[None] | JSONResponse:
    """Email a fresh verification code (replaces any pending code)."""
    match await handler.handle(ResendVerification(email=data.email)):
        case Success():
            return SuccessResponse[None](message="Verification code sent")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@auth_router.post("/forgot-password", response_model=SuccessResponse[None])
async def forgot_password(
    data: EmailRequest,
    guard: PasswordResetCooldownGuard = Depends(get_password_reset_cooldown_guard),
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> SuccessResponse[None] | JSONResponse:
    """Email a password reset code. Limited to once per cooldown window."""
    command = RequestPasswordReset(email=data.email)

    match await run_guarded([guard], data.email, lambda: handler.handle(command)):
        case Success():
            return SuccessResponse[None](message="Password reset code sent to your email")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@auth_router.post("/verify-reset-code", response_model=SuccessResponse[ResetTokenData])
async def verify_reset_code(
    data: VerifyResetCodeRequest,
    handler: VerifyResetCodeHandler = Depends(get_verify_reset_code_handler),
) -> SuccessResponse[ResetTokenData] | JSONResponse:
    """Exchange a valid reset code for a short-lived reset token."""
    match await handler.handle(VerifyResetCode(email=data.email, code=data.code)):
        case Success(value=reset):
            return SuccessResponse[ResetTokenData](
                message="Reset code verified",
                data=ResetTokenData(
                    reset_token=reset.reset_token,
                    expires_in=reset.expires_in,
                ),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@auth_router.post("/reset-password", response_model=SuccessResponse[None])
async def reset_password(
    data: ResetPasswordRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> SuccessResponse[None] | JSONResponse:
    """Set a new password. Authenticated with the reset token."""
    command = ResetPassword(
        user_id=current_user.user_id,
        new_password=data.new_password,
        code=data.code,
        confirm_password=data.confirm_password,
    )

    match await handler.handle(command):
        case Success():
            return SuccessResponse[None](message="Password reset successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)


@auth_router.get("/me", response_model=SuccessResponse[UserResponse])
async def me(
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> SuccessResponse[UserResponse] | JSONResponse:
    """Return the caller's profile."""
    query = GetUser(
        actor_id=current_user.user_id,
        actor_role=current_user.role,
        user_id=current_user.user_id,
    )

    match await handler.handle(query):
        case Success(value=user):
            return SuccessResponse[UserResponse](data=UserResponse.from_entity(user))
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error)

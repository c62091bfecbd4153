"""Authentication handler dependency factories.

Request-scoped handler and guard instances for authentication operations:
- Registration, email verification, resend
- Login, logout, token refresh
- Forgot password, reset code verification, password reset
- Authenticated password change (request, confirm)
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.infrastructure import (
    get_code_service,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.repositories import (
    get_refresh_token_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.confirm_password_change_handler import (
        ConfirmPasswordChangeHandler,
    )
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.commands.handlers.request_password_change_handler import (
        RequestPasswordChangeHandler,
    )
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.application.commands.handlers.resend_verification_handler import (
        ResendVerificationHandler,
    )
    from src.application.commands.handlers.reset_password_handler import (
        ResetPasswordHandler,
    )
    from src.application.commands.handlers.verify_email_handler import (
        VerifyEmailHandler,
    )
    from src.application.commands.handlers.verify_reset_code_handler import (
        VerifyResetCodeHandler,
    )
    from src.application.guards import LoginLockGuard, PasswordResetCooldownGuard
    from src.infrastructure.persistence.repositories import (
        RefreshTokenRepository,
        UserRepository,
    )


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_register_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Usage:
        @router.post("/auth/register")
        async def register(
            handler: RegisterUserHandler = Depends(get_register_user_handler)
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )

    return RegisterUserHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        code_service=get_code_service(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


async def get_verify_email_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "VerifyEmailHandler":
    """Get VerifyEmail command handler (request-scoped)."""
    from src.application.commands.handlers.verify_email_handler import (
        VerifyEmailHandler,
    )

    return VerifyEmailHandler(
        user_repo=user_repo,
        code_service=get_code_service(),
        logger=get_logger(),
    )


async def get_resend_verification_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "ResendVerificationHandler":
    """Get ResendVerification command handler (request-scoped)."""
    from src.application.commands.handlers.resend_verification_handler import (
        ResendVerificationHandler,
    )

    return ResendVerificationHandler(
        user_repo=user_repo,
        code_service=get_code_service(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


async def get_login_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    refresh_token_repo: "RefreshTokenRepository" = Depends(get_refresh_token_repository),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped).

    Lockout threshold and duration come from AccountSecuritySettings.
    """
    from src.application.commands.handlers.login_user_handler import LoginUserHandler

    return LoginUserHandler(
        user_repo=user_repo,
        refresh_token_repo=refresh_token_repo,
        password_service=get_password_service(),
        token_service=get_token_service(),
        security=settings.account_security_settings(),
        logger=get_logger(),
    )


async def get_logout_user_handler(
    refresh_token_repo: "RefreshTokenRepository" = Depends(get_refresh_token_repository),
) -> "LogoutUserHandler":
    """Get LogoutUser command handler (request-scoped)."""
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler

    return LogoutUserHandler(
        refresh_token_repo=refresh_token_repo,
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_refresh_access_token_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    refresh_token_repo: "RefreshTokenRepository" = Depends(get_refresh_token_repository),
) -> "RefreshAccessTokenHandler":
    """Get RefreshAccessToken command handler (request-scoped)."""
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )

    return RefreshAccessTokenHandler(
        user_repo=user_repo,
        refresh_token_repo=refresh_token_repo,
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_request_password_reset_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped)."""
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )

    return RequestPasswordResetHandler(
        user_repo=user_repo,
        code_service=get_code_service(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


async def get_verify_reset_code_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "VerifyResetCodeHandler":
    """Get VerifyResetCode command handler (request-scoped)."""
    from src.application.commands.handlers.verify_reset_code_handler import (
        VerifyResetCodeHandler,
    )

    return VerifyResetCodeHandler(
        user_repo=user_repo,
        code_service=get_code_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_reset_password_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "ResetPasswordHandler":
    """Get ResetPassword command handler (request-scoped)."""
    from src.application.commands.handlers.reset_password_handler import (
        ResetPasswordHandler,
    )

    return ResetPasswordHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        code_service=get_code_service(),
        logger=get_logger(),
    )


async def get_request_password_change_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "RequestPasswordChangeHandler":
    """Get RequestPasswordChange command handler (request-scoped)."""
    from src.application.commands.handlers.request_password_change_handler import (
        RequestPasswordChangeHandler,
    )

    return RequestPasswordChangeHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        code_service=get_code_service(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


async def get_confirm_password_change_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    refresh_token_repo: "RefreshTokenRepository" = Depends(get_refresh_token_repository),
) -> "ConfirmPasswordChangeHandler":
    """Get ConfirmPasswordChange command handler (request-scoped)."""
    from src.application.commands.handlers.confirm_password_change_handler import (
        ConfirmPasswordChangeHandler,
    )

    return ConfirmPasswordChangeHandler(
        user_repo=user_repo,
        refresh_token_repo=refresh_token_repo,
        code_service=get_code_service(),
        logger=get_logger(),
    )


# ============================================================================
# Guard Factories
# ============================================================================


async def get_login_lock_guard(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "LoginLockGuard":
    """Get the login lockout guard (request-scoped)."""
    from src.application.guards import LoginLockGuard

    return LoginLockGuard(user_repo=user_repo, logger=get_logger())


async def get_password_reset_cooldown_guard(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "PasswordResetCooldownGuard":
    """Get the password reset cooldown guard (request-scoped)."""
    from src.application.guards import PasswordResetCooldownGuard

    return PasswordResetCooldownGuard(
        user_repo=user_repo,
        cooldown=settings.account_security_settings().password_reset_cooldown,
        logger=get_logger(),
    )

"""Login handler.

Flow:
1. Require email and password
2. Find user (unknown email -> generic "Invalid credentials")
3. Reject while locked (the login guard normally catches this first)
4. Require active account and verified email
5. Verify password
   - mismatch: count the failure, lock at the threshold, persist,
     return generic "Invalid credentials" (also on the locking attempt)
6. Success: reset counter, clear lock, stamp last_login, persist
7. Issue access + refresh tokens and store the refresh token fingerprint
"""

from src.application.commands.auth_commands import LoginUser
from src.application.dtos import LoginResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import AccountSecuritySettings
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    RefreshTokenRepository,
    TokenGenerationProtocol,
    UserRepository,
)


class LoginUserHandler:
    """Authenticates credentials and issues a token pair."""

    def __init__(
        self,
        user_repo: UserRepository,
        refresh_token_repo: RefreshTokenRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        security: AccountSecuritySettings,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            user_repo: User repository.
            refresh_token_repo: Refresh token store.
            password_service: Password verification.
            token_service: JWT issuance.
            security: Lockout threshold and duration.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._refresh_token_repo = refresh_token_repo
        self._password_service = password_service
        self._token_service = token_service
        self._security = security
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[LoginResult, ApplicationError]:
        """Handle login command.

        Returns:
            Success(LoginResult) with both tokens.
            Failure(ApplicationError) with VALIDATION_ERROR,
            AUTHENTICATION_ERROR or ACCOUNT_LOCKED.
        """
        if not cmd.email or not cmd.password:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.VALIDATION_ERROR,
                    message="Email and password are required",
                )
            )

        user = await self._user_repo.find_by_email(cmd.email.strip().lower())
        if user is None:
            self._logger.info("login_failed", reason="unknown_email")
            return _authentication_failure(AuthErrorMessage.INVALID_CREDENTIALS)

        if user.is_locked():
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.ACCOUNT_LOCKED,
                    message=AuthErrorMessage.account_locked(user.lock_minutes_remaining()),
                )
            )

        if not user.is_active:
            self._logger.info("login_failed", user_id=str(user.id), reason="inactive")
            return _authentication_failure(AuthErrorMessage.ACCOUNT_DEACTIVATED)

        if not user.is_email_verified:
            self._logger.info("login_failed", user_id=str(user.id), reason="unverified")
            return _authentication_failure(AuthErrorMessage.EMAIL_NOT_VERIFIED)

        if not self._password_service.verify_password(cmd.password, user.password_hash):
            locked = user.register_failed_login(
                max_attempts=self._security.max_failed_login_attempts,
                lockout=self._security.lockout_duration,
            )
            await self._user_repo.update(user)
            self._logger.warning(
                "login_failed",
                user_id=str(user.id),
                reason="invalid_password",
                failed_attempts=user.failed_login_attempts,
                locked=locked,
            )
            return _authentication_failure(AuthErrorMessage.INVALID_CREDENTIALS)

        user.record_login()
        await self._user_repo.update(user)

        access = self._token_service.issue_access_token(user.id, user.email, user.role)
        refresh = self._token_service.issue_refresh_token(user.id, user.email, user.role)
        await self._refresh_token_repo.save(
            user_id=user.id,
            token_hash=self._token_service.fingerprint(refresh.token),
            expires_at=refresh.expires_at,
        )

        self._logger.info("login_succeeded", user_id=str(user.id))
        return Success(
            value=LoginResult(
                access_token=access.token,
                refresh_token=refresh.token,
                expires_in=access.expires_in,
                user=user,
            )
        )


def _authentication_failure(message: str) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.AUTHENTICATION_ERROR,
            message=message,
        )
    )

"""Account guards for login and password reset.

LoginLockGuard:
    - lock_until in the future: reject with ACCOUNT_LOCKED and the
      remaining minutes (rounded up)
    - lock_until in the past: clear lock state and persist, then allow

PasswordResetCooldownGuard:
    - last_password_reset_at within the cooldown window: reject with
      RATE_LIMIT_EXCEEDED
"""

from datetime import timedelta

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import LoggerProtocol, UserRepository


def _normalize(email: str) -> str:
    return (email or "").strip().lower()


class LoginLockGuard:
    """Blocks logins to locked accounts and releases elapsed locks."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def check(self, email: str) -> Result[None, ApplicationError]:
        user = await self._user_repo.find_by_email(_normalize(email))
        if user is None:
            return Success(value=None)

        if user.is_locked():
            minutes = user.lock_minutes_remaining()
            self._logger.info("login_blocked_locked", user_id=str(user.id), minutes=minutes)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.ACCOUNT_LOCKED,
                    message=AuthErrorMessage.account_locked(minutes),
                )
            )

        if user.clear_expired_lock():
            await self._user_repo.update(user)
            self._logger.info("account_lock_released", user_id=str(user.id))

        return Success(value=None)


class PasswordResetCooldownGuard:
    """Limits password reset requests to one per cooldown window."""

    def __init__(
        self,
        user_repo: UserRepository,
        cooldown: timedelta,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._cooldown = cooldown
        self._logger = logger

    async def check(self, email: str) -> Result[None, ApplicationError]:
        user = await self._user_repo.find_by_email(_normalize(email))
        if user is None or not user.is_reset_cooldown_active(self._cooldown):
            return Success(value=None)

        self._logger.info("password_reset_blocked_cooldown", user_id=str(user.id))
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.RATE_LIMIT_EXCEEDED,
                message=AuthErrorMessage.RESET_COOLDOWN,
            )
        )

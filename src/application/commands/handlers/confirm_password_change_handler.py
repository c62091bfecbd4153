"""Confirm password change handler.

Promotes the parked password once the emailed code checks out, then
revokes every refresh token so other sessions must log in again.
"""

from src.application.commands.auth_commands import ConfirmPasswordChange
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.core.validation import validate_code_format
from src.domain.entities.user import User
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    LoggerProtocol,
    OneTimeCodeProtocol,
    RefreshTokenRepository,
    UserRepository,
)


class ConfirmPasswordChangeHandler:
    """Applies a pending password change."""

    def __init__(
        self,
        user_repo: UserRepository,
        refresh_token_repo: RefreshTokenRepository,
        code_service: OneTimeCodeProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._refresh_token_repo = refresh_token_repo
        self._code_service = code_service
        self._logger = logger

    async def handle(self, cmd: ConfirmPasswordChange) -> Result[User, ApplicationError]:
        """Handle the confirmation step.

        A wrong, expired or missing code and a slot holding a forgot-password
        code (no pending password) all fail with the same message.
        """
        match validate_code_format(cmd.code):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))

        invalid = Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.VALIDATION_ERROR,
                message=AuthErrorMessage.INVALID_CHANGE_CODE,
            )
        )

        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="User not found",
                )
            )

        if user.pending_password_hash is None:
            return invalid

        if not user.two_factor_code_matches(self._code_service.hash_code(cmd.code)):
            self._logger.info("password_change_code_rejected", user_id=str(user.id))
            return invalid

        user.apply_pending_password()
        await self._user_repo.update(user)
        revoked = await self._refresh_token_repo.revoke_all_for_user(user.id)

        self._logger.info("password_changed", user_id=str(user.id), sessions_revoked=revoked)
        return Success(value=user)

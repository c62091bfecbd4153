"""Reset password handler (second half of forgot password).

The caller is authenticated with the reset token from verify-reset-code.

Flow:
1. Re-validate the reset code (six digits, matching, unexpired) when presented
2. Check confirmation (when presented) and minimum length
3. Reject reuse of the current password
4. Re-hash, stamp last_password_reset_at, clear the two-factor slot
"""

from src.application.commands.auth_commands import ResetPassword
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.core.validation import validate_code_format, validate_password_length
from src.domain.entities.user import User
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    LoggerProtocol,
    OneTimeCodeProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class ResetPasswordHandler:
    """Sets a new password for a reset-authorized user."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        code_service: OneTimeCodeProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._code_service = code_service
        self._logger = logger

    async def handle(self, cmd: ResetPassword) -> Result[User, ApplicationError]:
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.AUTHENTICATION_ERROR,
                    message="User not found",
                )
            )

        if cmd.code is not None:
            match validate_code_format(cmd.code):
                case Failure(error=error):
                    return Failure(error=ApplicationError.from_domain(error))
            if not user.two_factor_code_matches(self._code_service.hash_code(cmd.code)):
                return _validation_failure(AuthErrorMessage.INVALID_RESET_CODE)

        if cmd.confirm_password is not None and cmd.confirm_password != cmd.new_password:
            return _validation_failure(AuthErrorMessage.PASSWORDS_DO_NOT_MATCH)

        match validate_password_length(cmd.new_password, field_name="new_password"):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))

        if self._password_service.verify_password(cmd.new_password, user.password_hash):
            return _validation_failure(AuthErrorMessage.PASSWORD_REUSED)

        user.reset_password(self._password_service.hash_password(cmd.new_password))
        await self._user_repo.update(user)

        self._logger.info("password_reset_completed", user_id=str(user.id))
        return Success(value=user)


def _validation_failure(message: str) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.VALIDATION_ERROR,
            message=message,
        )
    )

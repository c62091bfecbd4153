"""Request password change handler (first step of an authenticated change).

Flow:
1. Confirmation and minimum length of the new password
2. Current password must verify; the new one must differ from it
3. New password hash parked next to a fresh code in the two-factor slot
4. Code emailed; on delivery failure the slot is cleared again

The password itself only changes in ConfirmPasswordChangeHandler. A later
forgot-password request overwrites the slot and cancels the pending change.
"""

from src.application.commands.auth_commands import RequestPasswordChange
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.core.validation import validate_password_length
from src.domain.entities.user import User
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    EmailServiceProtocol,
    LoggerProtocol,
    OneTimeCodeProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class RequestPasswordChangeHandler:
    """Verifies the current password and emails a change confirmation code."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        code_service: OneTimeCodeProtocol,
        email_service: EmailServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._code_service = code_service
        self._email_service = email_service
        self._logger = logger

    async def handle(self, cmd: RequestPasswordChange) -> Result[User, ApplicationError]:
        if cmd.new_password != cmd.confirm_password:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.VALIDATION_ERROR,
                    message=AuthErrorMessage.PASSWORDS_DO_NOT_MATCH,
                )
            )

        match validate_password_length(cmd.new_password, field_name="new_password"):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))

        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="User not found",
                )
            )

        if not self._password_service.verify_password(cmd.current_password, user.password_hash):
            self._logger.warning("password_change_rejected", user_id=str(user.id))
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.AUTHENTICATION_ERROR,
                    message=AuthErrorMessage.CURRENT_PASSWORD_INCORRECT,
                )
            )

        if cmd.new_password == cmd.current_password:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.VALIDATION_ERROR,
                    message=AuthErrorMessage.PASSWORD_REUSED,
                )
            )

        code = self._code_service.generate_code()
        user.set_two_factor_code(
            self._code_service.hash_code(code),
            self._code_service.expiry_from_now(),
            pending_password_hash=self._password_service.hash_password(cmd.new_password),
        )
        await self._user_repo.update(user)

        match await self._email_service.send_password_change_code(user.email, user.name, code):
            case Failure(error=error):
                user.clear_two_factor_code()
                await self._user_repo.update(user)
                self._logger.warning(
                    "password_change_email_failed",
                    user_id=str(user.id),
                    reason=error.message,
                )
                return Failure(
                    error=ApplicationError.from_domain(
                        error, AuthErrorMessage.email_service_error(error.message)
                    )
                )

        self._logger.info("password_change_requested", user_id=str(user.id))
        return Success(value=user)

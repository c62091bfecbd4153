"""Forgot password handler.

Runs after the password reset cooldown guard. Stores a hashed code in the
two-factor slot and emails the plaintext code. If the email cannot be sent,
the code is cleared and a delivery error is returned so the client can retry.
"""

from src.application.commands.auth_commands import RequestPasswordReset
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.core.validation import validate_email
from src.domain.entities.user import User
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    EmailServiceProtocol,
    LoggerProtocol,
    OneTimeCodeProtocol,
    UserRepository,
)

NO_ACCOUNT_MESSAGE = "No account found with this email"


class RequestPasswordResetHandler:
    """Issues and emails a password reset code."""

    def __init__(
        self,
        user_repo: UserRepository,
        code_service: OneTimeCodeProtocol,
        email_service: EmailServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._code_service = code_service
        self._email_service = email_service
        self._logger = logger

    async def handle(self, cmd: RequestPasswordReset) -> Result[User, ApplicationError]:
        match validate_email(cmd.email):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))
            case Success(value=email):
                pass

        user = await self._user_repo.find_by_email(email)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.VALIDATION_ERROR,
                    message=NO_ACCOUNT_MESSAGE,
                )
            )

        code = self._code_service.generate_code()
        user.set_two_factor_code(
            self._code_service.hash_code(code),
            self._code_service.expiry_from_now(),
        )
        await self._user_repo.update(user)

        match await self._email_service.send_password_reset_code(user.email, user.name, code):
            case Failure(error=error):
                user.clear_two_factor_code()
                await self._user_repo.update(user)
                self._logger.warning(
                    "password_reset_email_failed",
                    user_id=str(user.id),
                    reason=error.message,
                )
                return Failure(
                    error=ApplicationError.from_domain(
                        error, AuthErrorMessage.email_service_error(error.message)
                    )
                )

        self._logger.info("password_reset_requested", user_id=str(user.id))
        return Success(value=user)

"""Resend verification handler.

A fresh code replaces any pending one. If the email cannot be sent the new
code is cleared again, so an unsent code never becomes usable, and the
delivery failure is reported separately from validation failures.
"""

from src.application.commands.auth_commands import ResendVerification
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


class ResendVerificationHandler:
    """Regenerates and re-sends the email verification code."""

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

    async def handle(self, cmd: ResendVerification) -> Result[User, ApplicationError]:
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
        if user.is_email_verified:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.VALIDATION_ERROR,
                    message=AuthErrorMessage.EMAIL_ALREADY_VERIFIED,
                )
            )

        code = self._code_service.generate_code()
        user.set_email_verification_code(
            self._code_service.hash_code(code),
            self._code_service.expiry_from_now(),
        )
        await self._user_repo.update(user)

        match await self._email_service.send_verification_code(user.email, user.name, code):
            case Failure(error=error):
                user.clear_email_verification_code()
                await self._user_repo.update(user)
                self._logger.warning(
                    "verification_email_failed",
                    user_id=str(user.id),
                    reason=error.message,
                )
                return Failure(
                    error=ApplicationError.from_domain(
                        error, AuthErrorMessage.email_service_error(error.message)
                    )
                )

        self._logger.info("verification_code_resent", user_id=str(user.id))
        return Success(value=user)

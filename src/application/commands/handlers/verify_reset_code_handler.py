"""Verify reset code handler.

A valid code yields a short-lived access-class "reset token". The password
does not change here, and the code stays in place until reset-password
consumes it.
"""

from src.application.commands.auth_commands import VerifyResetCode
from src.application.dtos import ResetTokenResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.core.validation import validate_code_format, validate_email
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    LoggerProtocol,
    OneTimeCodeProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class VerifyResetCodeHandler:
    """Checks the two-factor slot and issues a reset token."""

    def __init__(
        self,
        user_repo: UserRepository,
        code_service: OneTimeCodeProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._code_service = code_service
        self._token_service = token_service
        self._logger = logger

    async def handle(
        self, cmd: VerifyResetCode
    ) -> Result[ResetTokenResult, ApplicationError]:
        invalid = Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.VALIDATION_ERROR,
                message=AuthErrorMessage.INVALID_RESET_CODE,
            )
        )

        match validate_email(cmd.email):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))
            case Success(value=email):
                pass

        match validate_code_format(cmd.code):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))

        user = await self._user_repo.find_by_email(email)
        if user is None or not user.is_active:
            return invalid

        if not user.two_factor_code_matches(self._code_service.hash_code(cmd.code)):
            self._logger.info("reset_code_rejected", user_id=str(user.id))
            return invalid

        issued = self._token_service.issue_access_token(user.id, user.email, user.role)
        self._logger.info("reset_code_verified", user_id=str(user.id))
        return Success(
            value=ResetTokenResult(reset_token=issued.token, expires_in=issued.expires_in)
        )

"""Stub email service for development and testing.

Logs message metadata instead of sending. The code itself is logged only
in development so a developer can complete the flow locally.
"""

from src.core.result import Result, Success
from src.core.errors import DeliveryError
from src.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailService:
    """Email adapter that writes to the structured log.

    Implements EmailServiceProtocol (structural typing).

    Args:
        logger: Structured logger.
        reveal_codes: Include the plaintext code in the log entry
            (development only).
    """

    def __init__(self, logger: LoggerProtocol, *, reveal_codes: bool = False) -> None:
        self._logger = logger
        self._reveal_codes = reveal_codes

    async def send_verification_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        self._log("Verify your email", to_email, name, code)
        return Success(value=None)

    async def send_password_reset_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        self._log("Password reset code", to_email, name, code)
        return Success(value=None)

    async def send_password_change_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        self._log("Confirm your password change", to_email, name, code)
        return Success(value=None)

    def _log(self, subject: str, to_email: str, name: str, code: str) -> None:
        context: dict[str, str] = {"to": to_email, "recipient_name": name, "subject": subject}
        if self._reveal_codes:
            context["code"] = code
        self._logger.info("email_stub_sent", **context)

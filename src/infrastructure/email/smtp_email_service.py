"""SMTP email service built on aiosmtplib.

Sends the plain-text account emails (verification, password reset and
password change codes). Transport errors never escape: they come back as
Failure(DeliveryError) so the calling workflow can discard the unsent code.
"""

from email.message import EmailMessage

import aiosmtplib

from src.core.config import SmtpSettings
from src.core.enums import ErrorCode
from src.core.errors import DeliveryError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol

DELIVERY_FAILED_REASON = "Could not deliver the email"

_TEMPLATES: dict[str, tuple[str, str]] = {
    "verification": (
        "Verify Your Email Address",
        "Use this code to verify your email address: {code}",
    ),
    "password_reset": (
        "Password Reset Code",
        "Use this code to reset your password: {code}\n\n"
        "If you did not request a reset, you can ignore this email.",
    ),
    "password_change": (
        "Confirm Your Password Change",
        "Use this code to confirm your new password: {code}\n\n"
        "If you did not ask to change your password, sign in and change it now.",
    ),
}


class SmtpEmailService:
    """Email adapter that delivers through an SMTP server.

    Implements EmailServiceProtocol (structural typing).

    Args:
        config: Host, credentials and sender address.
        logger: Structured logger. Codes are never logged.
        code_expire_minutes: Lifetime quoted in the message body.

    Example:
        >>> service = SmtpEmailService(settings.smtp_settings(), logger)
        >>> await service.send_verification_code("ada@example.com", "Ada", "123456")
        Success(value=None)
    """

    def __init__(
        self,
        config: SmtpSettings,
        logger: LoggerProtocol,
        *,
        code_expire_minutes: int = 5,
    ) -> None:
        self._config = config
        self._logger = logger
        self._code_expire_minutes = code_expire_minutes

    async def send_verification_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        return await self._send("verification", to_email, name, code)

    async def send_password_reset_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        return await self._send("password_reset", to_email, name, code)

    async def send_password_change_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        return await self._send("password_change", to_email, name, code)

    def build_message(self, kind: str, to_email: str, name: str, code: str) -> EmailMessage:
        subject, body = _TEMPLATES[kind]
        message = EmailMessage()
        message["From"] = self._config.sender
        message["To"] = to_email
        message["Subject"] = subject
        message.set_content(
            f"Hi {name},\n\n"
            f"{body.format(code=code)}\n\n"
            f"The code expires in {self._code_expire_minutes} minutes.\n"
        )
        return message

    async def _send(
        self, kind: str, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        message = self.build_message(kind, to_email, name, code)
        try:
            await aiosmtplib.send(
                message,
                hostname=self._config.host,
                port=self._config.port,
                username=self._config.username,
                password=self._config.password,
                use_tls=self._config.use_tls,
                timeout=self._config.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            self._logger.error(
                "email_send_failed",
                kind=kind,
                to=to_email,
                error=e,
            )
            return Failure(
                error=DeliveryError(
                    code=ErrorCode.EMAIL_DELIVERY_FAILED,
                    message=DELIVERY_FAILED_REASON,
                    recipient=to_email,
                )
            )

        self._logger.info("email_sent", kind=kind, to=to_email, subject=message["Subject"])
        return Success(value=None)

"""Email service protocol (port).

Failures are returned, not raised, so workflows can roll back a freshly
issued code when its message could not be sent.
"""

from typing import Protocol

from src.core.errors import DeliveryError
from src.core.result import Result


class EmailServiceProtocol(Protocol):
    """Outbound account email."""

    async def send_verification_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        """Send the email verification code.

        Args:
            to_email: Recipient address.
            name: Recipient display name.
            code: Plaintext six-digit code (never logged).
        """
        ...

    async def send_password_reset_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        """Send the password reset code."""
        ...

    async def send_password_change_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        """Send the code that confirms an authenticated password change."""
        ...

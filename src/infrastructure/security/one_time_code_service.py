"""One-time code service (adapter).

Implements OneTimeCodeProtocol.

Codes are six decimal digits drawn from the secrets module. Only the
SHA-256 digest is stored; expiry defaults to five minutes.
"""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta

CODE_DIGITS = 6


class OneTimeCodeService:
    """Generates and hashes email verification and password reset codes.

    Usage:
        service = OneTimeCodeService(expire_minutes=5)
        code = service.generate_code()          # "042917"
        user.set_two_factor_code(service.hash_code(code), service.expiry_from_now())
    """

    def __init__(self, expire_minutes: int = 5) -> None:
        self._lifetime = timedelta(minutes=expire_minutes)

    def generate_code(self) -> str:
        """Uniformly random, left-zero-padded six-digit code."""
        return f"{secrets.randbelow(10**CODE_DIGITS):0{CODE_DIGITS}d}"

    def hash_code(self, code: str) -> str:
        """SHA-256 hex digest of the code."""
        return hashlib.sha256(code.encode("utf-8")).hexdigest()

    def expiry_from_now(self) -> datetime:
        """now + code lifetime."""
        return datetime.now(UTC) + self._lifetime

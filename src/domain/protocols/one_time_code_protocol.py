"""One-time code protocol (port).

Codes are six decimal digits. Only their hash is stored, with an expiry.
"""

from datetime import datetime
from typing import Protocol


class OneTimeCodeProtocol(Protocol):
    """Generates, hashes and dates one-time codes."""

    def generate_code(self) -> str:
        """Uniformly random code, "000000" to "999999"."""
        ...

    def hash_code(self, code: str) -> str:
        """Deterministic one-way digest of a code."""
        ...

    def expiry_from_now(self) -> datetime:
        """Expiry timestamp for a code generated now."""
        ...

"""Password hashing protocol (port).

Infrastructure provides the bcrypt adapter.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Adaptive one-way password hashing.

    Usage:
        def __init__(self, password_service: PasswordHashingProtocol):
            self._password_service = password_service

        password_hash = self._password_service.hash_password("S3cure!pw")
        ok = self._password_service.verify_password("S3cure!pw", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password with a random salt.

        Args:
            password: Plaintext password (never logged).

        Returns:
            Encoded hash including algorithm, cost and salt.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Constant-time check of a candidate against a stored hash.

        Returns:
            True if the password matches. Malformed hashes return False.
        """
        ...

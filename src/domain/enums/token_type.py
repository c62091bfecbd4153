"""Token type tag embedded in every signed token."""

from enum import Enum


class TokenType(str, Enum):
    """Distinguishes access tokens from refresh tokens.

    Verification rejects a token whose tag does not match the expected type,
    even if its signature is valid.
    """

    ACCESS = "access"
    REFRESH = "refresh"

"""Token value objects.

TokenClaims is the verified content of a signed token. IssuedToken is what
the token service hands back when it signs one.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import TokenType, UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenClaims:
    """Claims carried by access and refresh tokens.

    Attributes:
        user_id: Subject of the token.
        email: Email at issuance time.
        role: Role at issuance time.
        token_type: Access or refresh.
        issued_at: ``iat`` claim.
        expires_at: ``exp`` claim.
        token_id: ``jti`` claim (refresh tokens only).
    """

    user_id: UUID
    email: str
    role: UserRole
    token_type: TokenType
    issued_at: datetime
    expires_at: datetime
    token_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class IssuedToken:
    """A freshly signed token and its expiry."""

    token: str
    expires_at: datetime
    expires_in: int

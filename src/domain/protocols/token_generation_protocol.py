"""Token generation protocol for domain layer.

Token Strategy:
    - Access tokens: short-lived signed JWT, type tag "access"
    - Refresh tokens: longer-lived signed JWT, type tag "refresh", unique jti,
      persisted (as a fingerprint) so they can be revoked
    - Access and refresh tokens are signed with separate secrets
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import AuthenticationError
from src.core.result import Result
from src.domain.enums import UserRole
from src.domain.value_objects import IssuedToken, TokenClaims


class TokenGenerationProtocol(Protocol):
    """JWT issuance and verification interface.

    Usage:
        issued = token_service.issue_access_token(user.id, user.email, user.role)

        match token_service.verify_access(issued.token):
            case Success(value=claims):
                user_id = claims.user_id
            case Failure(error=error):
                # error.code is TOKEN_EXPIRED, TOKEN_INVALID or TOKEN_WRONG_TYPE
                ...
    """

    def issue_access_token(
        self, user_id: UUID, email: str, role: UserRole
    ) -> IssuedToken:
        """Sign a short-lived access token."""
        ...

    def issue_refresh_token(
        self, user_id: UUID, email: str, role: UserRole
    ) -> IssuedToken:
        """Sign a refresh token with a fresh unique identifier."""
        ...

    def verify_access(self, token: str) -> Result[TokenClaims, AuthenticationError]:
        """Verify signature, issuer, expiry and the access type tag."""
        ...

    def verify_refresh(self, token: str) -> Result[TokenClaims, AuthenticationError]:
        """Verify signature, issuer, expiry and the refresh type tag."""
        ...

    def fingerprint(self, token: str) -> str:
        """Deterministic digest used to store and look up refresh tokens."""
        ...

"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT.

Security:
    - HMAC signing (HS256 by default)
    - Access and refresh tokens use separate secrets
    - Every token carries an issuer claim and a type tag; both are checked
    - Refresh tokens carry a UUIDv7 jti so repeated issuance never yields
      the same string

Claims:
    sub, user_id, email, role, type, iss, iat, exp (+ jti on refresh tokens)
"""

import hashlib
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.config import TokenSettings
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType, UserRole
from src.domain.value_objects import IssuedToken, TokenClaims

_REQUIRED_CLAIMS = ["sub", "user_id", "email", "role", "type", "iss", "iat", "exp"]


class JWTService:
    """JWT issuance and verification service.

    Usage:
        service = JWTService(settings.token_settings())

        issued = service.issue_access_token(user.id, user.email, user.role)

        match service.verify_access(issued.token):
            case Success(value=claims):
                ...
            case Failure(error=error):
                # error.code: TOKEN_EXPIRED, TOKEN_INVALID or TOKEN_WRONG_TYPE
                ...
    """

    def __init__(self, config: TokenSettings) -> None:
        """Initialize JWT service.

        Args:
            config: Secrets, issuer, algorithm and lifetimes.

        Raises:
            ValueError: If a secret is shorter than 32 characters or the two
                secrets are equal.
        """
        if len(config.access_secret) < 32 or len(config.refresh_secret) < 32:
            msg = "JWT secret keys must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if config.access_secret == config.refresh_secret:
            msg = "Access and refresh tokens must use different secrets"
            raise ValueError(msg)

        self._config = config

    def issue_access_token(
        self, user_id: UUID, email: str, role: UserRole
    ) -> IssuedToken:
        """Sign a short-lived access token."""
        return self._issue(
            user_id,
            email,
            role,
            token_type=TokenType.ACCESS,
            secret=self._config.access_secret,
            lifetime_seconds=self._config.access_token_lifetime.total_seconds(),
        )

    def issue_refresh_token(
        self, user_id: UUID, email: str, role: UserRole
    ) -> IssuedToken:
        """Sign a refresh token with a unique jti."""
        return self._issue(
            user_id,
            email,
            role,
            token_type=TokenType.REFRESH,
            secret=self._config.refresh_secret,
            lifetime_seconds=self._config.refresh_token_lifetime.total_seconds(),
            token_id=str(uuid7()),
        )

    def verify_access(self, token: str) -> Result[TokenClaims, AuthenticationError]:
        """Verify an access token."""
        return self._verify(token, TokenType.ACCESS, self._config.access_secret)

    def verify_refresh(self, token: str) -> Result[TokenClaims, AuthenticationError]:
        """Verify a refresh token."""
        return self._verify(token, TokenType.REFRESH, self._config.refresh_secret)

    def fingerprint(self, token: str) -> str:
        """SHA-256 hex digest of a token, used as its storage key."""
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def _issue(
        self,
        user_id: UUID,
        email: str,
        role: UserRole,
        *,
        token_type: TokenType,
        secret: str,
        lifetime_seconds: float,
        token_id: str | None = None,
    ) -> IssuedToken:
        issued_at = int(datetime.now(UTC).timestamp())
        expires_at = issued_at + int(lifetime_seconds)

        payload: dict[str, Any] = {
            "sub": str(user_id),
            "user_id": str(user_id),
            "email": email,
            "role": role.value,
            "type": token_type.value,
            "iss": self._config.issuer,
            "iat": issued_at,
            "exp": expires_at,
        }
        if token_id is not None:
            payload["jti"] = token_id

        token: str = jwt.encode(payload, secret, algorithm=self._config.algorithm)
        return IssuedToken(
            token=token,
            expires_at=datetime.fromtimestamp(expires_at, UTC),
            expires_in=int(lifetime_seconds),
        )

    def _verify(
        self, token: str, expected: TokenType, secret: str
    ) -> Result[TokenClaims, AuthenticationError]:
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                secret,
                algorithms=[self._config.algorithm],
                issuer=self._config.issuer,
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Token has expired",
                )
            )
        except InvalidSignatureError:
            # Signed with the other key family: report a type mismatch when
            # the unverified tag says so. The token is rejected either way.
            if _unverified_type(token) not in (None, expected.value):
                return _wrong_type(expected)
            return _invalid()
        except InvalidTokenError:
            return _invalid()

        if payload.get("type") != expected.value:
            return _wrong_type(expected)

        try:
            claims = TokenClaims(
                user_id=UUID(payload["user_id"]),
                email=payload["email"],
                role=UserRole(payload["role"]),
                token_type=expected,
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
                token_id=payload.get("jti"),
            )
        except (KeyError, TypeError, ValueError):
            return _invalid()

        return Success(value=claims)


def _unverified_type(token: str) -> str | None:
    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except InvalidTokenError:
        return None
    token_type = payload.get("type")
    return token_type if isinstance(token_type, str) else None


def _invalid() -> Failure[AuthenticationError]:
    return Failure(
        error=AuthenticationError(
            code=ErrorCode.TOKEN_INVALID,
            message="Invalid token",
        )
    )


def _wrong_type(expected: TokenType) -> Failure[AuthenticationError]:
    return Failure(
        error=AuthenticationError(
            code=ErrorCode.TOKEN_WRONG_TYPE,
            message=f"Expected {expected.value} token",
        )
    )

"""Refresh access token handler.

Flow:
1. Verify refresh token signature, issuer, expiry and type tag
2. Confirm the token is live in the store (not revoked, not expired)
3. Confirm the user still exists and is active
4. Issue a new access token (the refresh token is NOT rotated)

Every failure returns the same generic message.
"""

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos import AccessTokenResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    LoggerProtocol,
    RefreshTokenRepository,
    TokenGenerationProtocol,
    UserRepository,
)


class RefreshAccessTokenHandler:
    """Exchanges a live refresh token for a fresh access token."""

    def __init__(
        self,
        user_repo: UserRepository,
        refresh_token_repo: RefreshTokenRepository,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._refresh_token_repo = refresh_token_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(
        self, cmd: RefreshAccessToken
    ) -> Result[AccessTokenResult, ApplicationError]:
        invalid = Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.AUTHENTICATION_ERROR,
                message=AuthErrorMessage.INVALID_REFRESH_TOKEN,
            )
        )

        if not cmd.refresh_token:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.VALIDATION_ERROR,
                    message="Refresh token is required",
                )
            )

        match self._token_service.verify_refresh(cmd.refresh_token):
            case Failure(error=error):
                self._logger.info("token_refresh_rejected", reason=error.code.value)
                return invalid
            case Success(value=claims):
                pass

        token_hash = self._token_service.fingerprint(cmd.refresh_token)
        if not await self._refresh_token_repo.is_live(token_hash):
            self._logger.info(
                "token_refresh_rejected", user_id=str(claims.user_id), reason="not_live"
            )
            return invalid

        user = await self._user_repo.find_by_id(claims.user_id)
        if user is None or not user.is_active:
            self._logger.info(
                "token_refresh_rejected", user_id=str(claims.user_id), reason="user_inactive"
            )
            return invalid

        access = self._token_service.issue_access_token(user.id, user.email, user.role)
        return Success(
            value=AccessTokenResult(access_token=access.token, expires_in=access.expires_in)
        )

"""Logout handler.

With a refresh token: revoke only that token (other sessions stay valid).
Without one: revoke every refresh token of the user (logout everywhere).
Revocation is idempotent, so logging out twice is not an error.
"""

from src.application.commands.auth_commands import LogoutUser
from src.application.errors import ApplicationError
from src.core.result import Result, Success
from src.domain.protocols import (
    LoggerProtocol,
    RefreshTokenRepository,
    TokenGenerationProtocol,
)


class LogoutUserHandler:
    """Revokes refresh tokens."""

    def __init__(
        self,
        refresh_token_repo: RefreshTokenRepository,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._refresh_token_repo = refresh_token_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[int, ApplicationError]:
        """Handle logout.

        Returns:
            Success(number of tokens revoked by this call).
        """
        if cmd.refresh_token:
            token_hash = self._token_service.fingerprint(cmd.refresh_token)
            stored = await self._refresh_token_repo.find_by_token_hash(token_hash)
            # Only the owner may revoke a specific token.
            if stored is None or stored.user_id != cmd.user_id:
                self._logger.info("logout_unknown_token", user_id=str(cmd.user_id))
                return Success(value=0)
            await self._refresh_token_repo.revoke(token_hash)
            self._logger.info("logout", user_id=str(cmd.user_id), scope="single")
            return Success(value=0 if stored.is_revoked else 1)

        revoked = await self._refresh_token_repo.revoke_all_for_user(cmd.user_id)
        self._logger.info("logout", user_id=str(cmd.user_id), scope="all", revoked=revoked)
        return Success(value=revoked)

"""Unit tests for the code, token and password handlers.

Covers VerifyEmail, ResendVerification, RequestPasswordReset,
VerifyResetCode, ResetPassword, RequestPasswordChange,
ConfirmPasswordChange, RefreshAccessToken and LogoutUser with mocked repositories. One-time codes are hashed with the
real OneTimeCodeService so stored hashes match what the handlers compute.
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import (
    ConfirmPasswordChange,
    LogoutUser,
    RefreshAccessToken,
    RequestPasswordChange,
    RequestPasswordReset,
    ResendVerification,
    ResetPassword,
    VerifyEmail,
    VerifyResetCode,
)
from src.application.commands.handlers.confirm_password_change_handler import (
    ConfirmPasswordChangeHandler,
)
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.request_password_change_handler import (
    RequestPasswordChangeHandler,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.application.commands.handlers.resend_verification_handler import (
    ResendVerificationHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.verify_email_handler import VerifyEmailHandler
from src.application.commands.handlers.verify_reset_code_handler import (
    VerifyResetCodeHandler,
)
from src.application.errors import ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DeliveryError
from src.core.result import Failure, Success
from src.domain.enums import TokenType, UserRole
from src.domain.protocols.refresh_token_repository import RefreshTokenData
from src.domain.value_objects import IssuedToken, TokenClaims
from src.infrastructure.security import OneTimeCodeService

codes = OneTimeCodeService(expire_minutes=5)


def _soon() -> datetime:
    return datetime.now(UTC) + timedelta(minutes=5)


def _user_repo(user):
    repo = AsyncMock()
    repo.find_by_email.return_value = user
    repo.find_by_id.return_value = user
    return repo


def _delivery_failure():
    return Failure(
        error=DeliveryError(
            code=ErrorCode.EMAIL_DELIVERY_FAILED,
            message="SMTP down",
            recipient="ada@example.com",
        )
    )


# =============================================================================
# Email verification
# =============================================================================


@pytest.mark.unit
class TestVerifyEmailHandler:
    @pytest.mark.asyncio
    async def test_valid_code_verifies_and_clears_slot(self, make_user):
        user = make_user(is_email_verified=False)
        user.set_email_verification_code(codes.hash_code("123456"), _soon())
        repo = _user_repo(user)
        handler = VerifyEmailHandler(user_repo=repo, code_service=codes, logger=Mock())

        result = await handler.handle(VerifyEmail(email="ada@example.com", code="123456"))

        assert isinstance(result, Success)
        assert user.is_email_verified is True
        assert user.email_verification_code is None
        repo.update.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_code_cannot_be_used_twice(self, make_user):
        user = make_user(is_email_verified=False)
        user.set_email_verification_code(codes.hash_code("123456"), _soon())
        handler = VerifyEmailHandler(
            user_repo=_user_repo(user), code_service=codes, logger=Mock()
        )
        command = VerifyEmail(email="ada@example.com", code="123456")

        await handler.handle(command)
        second = await handler.handle(command)

        assert isinstance(second, Failure)
        assert second.error.message == "Invalid or expired verification code"

    @pytest.mark.asyncio
    async def test_wrong_code_same_message_as_unknown_email(self, make_user):
        user = make_user(is_email_verified=False)
        user.set_email_verification_code(codes.hash_code("123456"), _soon())
        wrong = await VerifyEmailHandler(
            user_repo=_user_repo(user), code_service=codes, logger=Mock()
        ).handle(VerifyEmail(email="ada@example.com", code="654321"))
        unknown = await VerifyEmailHandler(
            user_repo=_user_repo(None), code_service=codes, logger=Mock()
        ).handle(VerifyEmail(email="ghost@example.com", code="123456"))

        assert isinstance(wrong, Failure)
        assert isinstance(unknown, Failure)
        assert wrong.error.message == unknown.error.message
        assert wrong.error.code == ApplicationErrorCode.VALIDATION_ERROR

    @pytest.mark.asyncio
    async def test_expired_code_rejected(self, make_user):
        user = make_user(is_email_verified=False)
        user.set_email_verification_code(
            codes.hash_code("123456"), datetime.now(UTC) - timedelta(seconds=1)
        )
        handler = VerifyEmailHandler(
            user_repo=_user_repo(user), code_service=codes, logger=Mock()
        )

        result = await handler.handle(VerifyEmail(email="ada@example.com", code="123456"))

        assert isinstance(result, Failure)
        assert user.is_email_verified is False

    @pytest.mark.asyncio
    async def test_malformed_code_rejected_before_lookup(self, make_user):
        repo = _user_repo(make_user(is_email_verified=False))
        handler = VerifyEmailHandler(user_repo=repo, code_service=codes, logger=Mock())

        result = await handler.handle(VerifyEmail(email="ada@example.com", code="12345"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.VALIDATION_ERROR
        assert result.error.message == "Verification code must be 6 digits"
        assert result.error.details == {"field": "code"}
        repo.find_by_email.assert_not_awaited()


@pytest.mark.unit
class TestResendVerificationHandler:
    def _handler(self, user, email_result=None):
        repo = _user_repo(user)
        email_service = AsyncMock()
        email_service.send_verification_code.return_value = email_result or Success(
            value=None
        )
        handler = ResendVerificationHandler(
            user_repo=repo,
            code_service=codes,
            email_service=email_service,
            logger=Mock(),
        )
        return handler, repo, email_service

    @pytest.mark.asyncio
    async def test_new_code_replaces_old(self, make_user):
        user = make_user(is_email_verified=False)
        user.set_email_verification_code(codes.hash_code("111111"), _soon())
        handler, _, email_service = self._handler(user)

        result = await handler.handle(ResendVerification(email="ada@example.com"))

        assert isinstance(result, Success)
        sent_code = email_service.send_verification_code.call_args[0][2]
        assert user.email_verification_code_matches(codes.hash_code(sent_code))
        if sent_code != "111111":
            assert not user.email_verification_code_matches(codes.hash_code("111111"))

    @pytest.mark.asyncio
    async def test_unknown_email(self):
        handler, _, _ = self._handler(None)

        result = await handler.handle(ResendVerification(email="ghost@example.com"))

        assert isinstance(result, Failure)
        assert result.error.message == "No account found with this email"

    @pytest.mark.asyncio
    async def test_already_verified(self, make_user):
        handler, _, email_service = self._handler(make_user(is_email_verified=True))

        result = await handler.handle(ResendVerification(email="ada@example.com"))

        assert isinstance(result, Failure)
        assert result.error.message == "Email is already verified"
        email_service.send_verification_code.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delivery_failure_clears_code(self, make_user):
        user = make_user(is_email_verified=False)
        handler, _, _ = self._handler(user, email_result=_delivery_failure())

        result = await handler.handle(ResendVerification(email="ada@example.com"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.EMAIL_DELIVERY_FAILED
        assert result.error.message.startswith("Email service error: SMTP down")
        assert user.email_verification_code is None


# =============================================================================
# Forgot password
# =============================================================================


@pytest.mark.unit
class TestRequestPasswordResetHandler:
    def _handler(self, user, email_result=None):
        email_service = AsyncMock()
        email_service.send_password_reset_code.return_value = email_result or Success(
            value=None
        )
        handler = RequestPasswordResetHandler(
            user_repo=_user_repo(user),
            code_service=codes,
            email_service=email_service,
            logger=Mock(),
        )
        return handler, email_service

    @pytest.mark.asyncio
    async def test_stores_hashed_code_in_two_factor_slot(self, make_user):
        user = make_user()
        handler, email_service = self._handler(user)

        result = await handler.handle(RequestPasswordReset(email="ada@example.com"))

        assert isinstance(result, Success)
        sent_code = email_service.send_password_reset_code.call_args[0][2]
        assert len(sent_code) == 6 and sent_code.isdigit()
        assert user.two_factor_code == codes.hash_code(sent_code)
        assert user.email_verification_code is None

    @pytest.mark.asyncio
    async def test_unknown_email(self):
        handler, _ = self._handler(None)

        result = await handler.handle(RequestPasswordReset(email="ghost@example.com"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.VALIDATION_ERROR

    @pytest.mark.asyncio
    async def test_delivery_failure_clears_code(self, make_user):
        user = make_user()
        handler, _ = self._handler(user, email_result=_delivery_failure())

        result = await handler.handle(RequestPasswordReset(email="ada@example.com"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.EMAIL_DELIVERY_FAILED
        assert user.two_factor_code is None


@pytest.mark.unit
class TestVerifyResetCodeHandler:
    def _handler(self, user):
        token_service = Mock()
        token_service.issue_access_token.return_value = IssuedToken(
            token="reset.jwt", expires_at=_soon(), expires_in=900
        )
        handler = VerifyResetCodeHandler(
            user_repo=_user_repo(user),
            code_service=codes,
            token_service=token_service,
            logger=Mock(),
        )
        return handler, token_service

    @pytest.mark.asyncio
    async def test_valid_code_issues_reset_token_without_consuming(self, make_user):
        user = make_user()
        user.set_two_factor_code(codes.hash_code("424242"), _soon())
        handler, token_service = self._handler(user)

        result = await handler.handle(VerifyResetCode(email="ada@example.com", code="424242"))

        assert isinstance(result, Success)
        assert result.value.reset_token == "reset.jwt"
        token_service.issue_access_token.assert_called_once_with(
            user.id, user.email, user.role
        )
        assert user.two_factor_code is not None

    @pytest.mark.asyncio
    async def test_wrong_code(self, make_user):
        user = make_user()
        user.set_two_factor_code(codes.hash_code("424242"), _soon())
        handler, token_service = self._handler(user)

        result = await handler.handle(VerifyResetCode(email="ada@example.com", code="000000"))

        assert isinstance(result, Failure)
        assert result.error.message == "Invalid or expired reset code"
        token_service.issue_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_malformed_code(self, make_user):
        user = make_user()
        user.set_two_factor_code(codes.hash_code("424242"), _soon())
        handler, token_service = self._handler(user)

        result = await handler.handle(VerifyResetCode(email="ada@example.com", code="42424a"))

        assert isinstance(result, Failure)
        assert result.error.message == "Verification code must be 6 digits"
        token_service.issue_access_token.assert_not_called()


@pytest.mark.unit
class TestResetPasswordHandler:
    def _handler(self, user, same_password: bool = False):
        repo = _user_repo(user)
        password_service = Mock()
        password_service.verify_password.return_value = same_password
        password_service.hash_password.return_value = "new-hash"
        handler = ResetPasswordHandler(
            user_repo=repo,
            password_service=password_service,
            code_service=codes,
            logger=Mock(),
        )
        return handler, repo

    @pytest.mark.asyncio
    async def test_reset_sets_password_and_starts_cooldown(self, make_user):
        user = make_user()
        user.set_two_factor_code(codes.hash_code("424242"), _soon())
        handler, repo = self._handler(user)

        result = await handler.handle(
            ResetPassword(
                user_id=user.id,
                new_password="brandnew",
                code="424242",
                confirm_password="brandnew",
            )
        )

        assert isinstance(result, Success)
        assert user.password_hash == "new-hash"
        assert user.last_password_reset_at is not None
        assert user.two_factor_code is None
        repo.update.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_code_is_single_use(self, make_user):
        user = make_user()
        user.set_two_factor_code(codes.hash_code("424242"), _soon())
        handler, _ = self._handler(user)
        command = ResetPassword(user_id=user.id, new_password="brandnew", code="424242")

        await handler.handle(command)
        second = await handler.handle(command)

        assert isinstance(second, Failure)
        assert second.error.message == "Invalid or expired reset code"

    @pytest.mark.asyncio
    async def test_malformed_code(self, make_user):
        user = make_user()
        user.set_two_factor_code(codes.hash_code("424242"), _soon())
        handler, repo = self._handler(user)

        result = await handler.handle(
            ResetPassword(user_id=user.id, new_password="brandnew", code="4242424")
        )

        assert isinstance(result, Failure)
        assert result.error.message == "Verification code must be 6 digits"
        assert user.two_factor_code is not None
        repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_mismatched_confirmation(self, make_user):
        user = make_user()
        handler, _ = self._handler(user)

        result = await handler.handle(
            ResetPassword(user_id=user.id, new_password="brandnew", confirm_password="other")
        )

        assert isinstance(result, Failure)
        assert result.error.message == "Passwords do not match"

    @pytest.mark.asyncio
    async def test_short_password(self, make_user):
        user = make_user()
        handler, _ = self._handler(user)

        result = await handler.handle(ResetPassword(user_id=user.id, new_password="abc"))

        assert isinstance(result, Failure)
        assert result.error.details == {"field": "new_password"}

    @pytest.mark.asyncio
    async def test_current_password_reuse_rejected(self, make_user):
        user = make_user()
        handler, repo = self._handler(user, same_password=True)

        result = await handler.handle(ResetPassword(user_id=user.id, new_password="samepass"))

        assert isinstance(result, Failure)
        assert result.error.message == "Cannot use current password"
        repo.update.assert_not_awaited()


# =============================================================================
# Authenticated password change
# =============================================================================


def _change(user, current="oldpass", new="newpass1", confirm=None) -> RequestPasswordChange:
    return RequestPasswordChange(
        user_id=user.id,
        current_password=current,
        new_password=new,
        confirm_password=new if confirm is None else confirm,
    )


@pytest.mark.unit
class TestRequestPasswordChangeHandler:
    def _handler(self, user, current_ok: bool = True, email_result=None):
        repo = _user_repo(user)
        password_service = Mock()
        password_service.verify_password.return_value = current_ok
        password_service.hash_password.return_value = "changed-hash"
        email_service = AsyncMock()
        email_service.send_password_change_code.return_value = email_result or Success(
            value=None
        )
        handler = RequestPasswordChangeHandler(
            user_repo=repo,
            password_service=password_service,
            code_service=codes,
            email_service=email_service,
            logger=Mock(),
        )
        return handler, repo, email_service

    @pytest.mark.asyncio
    async def test_parks_new_password_and_emails_code(self, make_user):
        user = make_user(password_hash="old-hash")
        handler, repo, email_service = self._handler(user)

        result = await handler.handle(_change(user))

        assert isinstance(result, Success)
        sent_code = email_service.send_password_change_code.call_args[0][2]
        assert user.two_factor_code == codes.hash_code(sent_code)
        assert user.pending_password_hash == "changed-hash"
        assert user.password_hash == "old-hash"
        repo.update.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_wrong_current_password(self, make_user):
        user = make_user()
        handler, repo, email_service = self._handler(user, current_ok=False)

        result = await handler.handle(_change(user, current="wrong"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.AUTHENTICATION_ERROR
        assert result.error.message == "Current password is incorrect"
        assert user.two_factor_code is None
        email_service.send_password_change_code.assert_not_awaited()
        repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_same_password_rejected(self, make_user):
        user = make_user()
        handler, _, _ = self._handler(user)

        result = await handler.handle(_change(user, current="samepass", new="samepass"))

        assert isinstance(result, Failure)
        assert result.error.message == "Cannot use current password"

    @pytest.mark.asyncio
    async def test_confirmation_mismatch(self, make_user):
        user = make_user()
        handler, _, _ = self._handler(user)

        result = await handler.handle(_change(user, confirm="different"))

        assert isinstance(result, Failure)
        assert result.error.message == "Passwords do not match"

    @pytest.mark.asyncio
    async def test_delivery_failure_clears_slot(self, make_user):
        user = make_user()
        handler, _, _ = self._handler(user, email_result=_delivery_failure())

        result = await handler.handle(_change(user))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.EMAIL_DELIVERY_FAILED
        assert user.two_factor_code is None
        assert user.pending_password_hash is None


@pytest.mark.unit
class TestConfirmPasswordChangeHandler:
    def _handler(self, user):
        repo = _user_repo(user)
        refresh_token_repo = AsyncMock()
        refresh_token_repo.revoke_all_for_user.return_value = 2
        handler = ConfirmPasswordChangeHandler(
            user_repo=repo,
            refresh_token_repo=refresh_token_repo,
            code_service=codes,
            logger=Mock(),
        )
        return handler, repo, refresh_token_repo

    @pytest.mark.asyncio
    async def test_applies_pending_password_and_revokes_sessions(self, make_user):
        user = make_user(password_hash="old-hash")
        user.set_two_factor_code(
            codes.hash_code("424242"), _soon(), pending_password_hash="changed-hash"
        )
        handler, repo, refresh_token_repo = self._handler(user)

        result = await handler.handle(ConfirmPasswordChange(user_id=user.id, code="424242"))

        assert isinstance(result, Success)
        assert user.password_hash == "changed-hash"
        assert user.two_factor_code is None
        assert user.pending_password_hash is None
        assert user.last_password_reset_at is None
        repo.update.assert_awaited_once_with(user)
        refresh_token_repo.revoke_all_for_user.assert_awaited_once_with(user.id)

    @pytest.mark.asyncio
    async def test_wrong_code_keeps_password(self, make_user):
        user = make_user(password_hash="old-hash")
        user.set_two_factor_code(
            codes.hash_code("424242"), _soon(), pending_password_hash="changed-hash"
        )
        handler, repo, refresh_token_repo = self._handler(user)

        result = await handler.handle(ConfirmPasswordChange(user_id=user.id, code="000000"))

        assert isinstance(result, Failure)
        assert result.error.message == "Invalid or expired password change code"
        assert user.password_hash == "old-hash"
        repo.update.assert_not_awaited()
        refresh_token_repo.revoke_all_for_user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_expired_code(self, make_user):
        user = make_user(password_hash="old-hash")
        user.set_two_factor_code(
            codes.hash_code("424242"),
            datetime.now(UTC) - timedelta(seconds=1),
            pending_password_hash="changed-hash",
        )
        handler, _, _ = self._handler(user)

        result = await handler.handle(ConfirmPasswordChange(user_id=user.id, code="424242"))

        assert isinstance(result, Failure)
        assert user.password_hash == "old-hash"

    @pytest.mark.asyncio
    async def test_forgot_password_code_cannot_confirm_change(self, make_user):
        user = make_user(password_hash="old-hash")
        user.set_two_factor_code(
            codes.hash_code("424242"), _soon(), pending_password_hash="changed-hash"
        )
        # A forgot-password request reuses the slot and drops the pending hash.
        user.set_two_factor_code(codes.hash_code("515151"), _soon())
        handler, _, _ = self._handler(user)

        stale = await handler.handle(ConfirmPasswordChange(user_id=user.id, code="424242"))
        reset_code = await handler.handle(ConfirmPasswordChange(user_id=user.id, code="515151"))

        assert isinstance(stale, Failure)
        assert isinstance(reset_code, Failure)
        assert reset_code.error.message == "Invalid or expired password change code"
        assert user.password_hash == "old-hash"
        assert user.two_factor_code == codes.hash_code("515151")

    @pytest.mark.asyncio
    async def test_malformed_code(self, make_user):
        user = make_user()
        handler, repo, _ = self._handler(user)

        result = await handler.handle(ConfirmPasswordChange(user_id=user.id, code="12ab"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.VALIDATION_ERROR
        assert result.error.message == "Verification code must be 6 digits"
        repo.find_by_id.assert_not_awaited()


# =============================================================================
# Tokens
# =============================================================================


def _claims(user_id) -> TokenClaims:
    now = datetime.now(UTC)
    return TokenClaims(
        user_id=user_id,
        email="ada@example.com",
        role=UserRole.USER,
        token_type=TokenType.REFRESH,
        issued_at=now,
        expires_at=now + timedelta(days=7),
        token_id=str(uuid7()),
    )


@pytest.mark.unit
class TestRefreshAccessTokenHandler:
    def _handler(self, user, verify_result, live: bool = True):
        refresh_token_repo = AsyncMock()
        refresh_token_repo.is_live.return_value = live
        token_service = Mock()
        token_service.verify_refresh.return_value = verify_result
        token_service.fingerprint.return_value = "fp"
        token_service.issue_access_token.return_value = IssuedToken(
            token="new.access", expires_at=_soon(), expires_in=900
        )
        return RefreshAccessTokenHandler(
            user_repo=_user_repo(user),
            refresh_token_repo=refresh_token_repo,
            token_service=token_service,
            logger=Mock(),
        )

    @pytest.mark.asyncio
    async def test_live_token_yields_access_token(self, make_user):
        user = make_user()
        handler = self._handler(user, Success(value=_claims(user.id)))

        result = await handler.handle(RefreshAccessToken(refresh_token="refresh.jwt"))

        assert isinstance(result, Success)
        assert result.value.access_token == "new.access"
        assert result.value.expires_in == 900

    @pytest.mark.asyncio
    async def test_revoked_token_rejected_despite_valid_signature(self, make_user):
        user = make_user()
        handler = self._handler(user, Success(value=_claims(user.id)), live=False)

        result = await handler.handle(RefreshAccessToken(refresh_token="refresh.jwt"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.AUTHENTICATION_ERROR
        assert result.error.message == "Invalid or expired refresh token"

    @pytest.mark.asyncio
    async def test_bad_signature_rejected(self, make_user):
        failure = Failure(
            error=AuthenticationError(code=ErrorCode.TOKEN_INVALID, message="Invalid token")
        )
        handler = self._handler(make_user(), failure)

        result = await handler.handle(RefreshAccessToken(refresh_token="garbage"))

        assert isinstance(result, Failure)
        assert result.error.message == "Invalid or expired refresh token"

    @pytest.mark.asyncio
    async def test_inactive_user_rejected(self, make_user):
        user = make_user(is_active=False)
        handler = self._handler(user, Success(value=_claims(user.id)))

        result = await handler.handle(RefreshAccessToken(refresh_token="refresh.jwt"))

        assert isinstance(result, Failure)


@pytest.mark.unit
class TestLogoutUserHandler:
    def _handler(self, stored=None, revoked_all: int = 0):
        refresh_token_repo = AsyncMock()
        refresh_token_repo.find_by_token_hash.return_value = stored
        refresh_token_repo.revoke_all_for_user.return_value = revoked_all
        token_service = Mock()
        token_service.fingerprint.return_value = "fp"
        handler = LogoutUserHandler(
            refresh_token_repo=refresh_token_repo,
            token_service=token_service,
            logger=Mock(),
        )
        return handler, refresh_token_repo

    def _stored(self, user_id, revoked: bool = False) -> RefreshTokenData:
        return RefreshTokenData(
            id=uuid7(),
            user_id=user_id,
            token_hash="fp",
            expires_at=_soon(),
            is_revoked=revoked,
            created_at=datetime.now(UTC),
        )

    @pytest.mark.asyncio
    async def test_single_logout_revokes_only_given_token(self):
        user_id = uuid7()
        handler, repo = self._handler(stored=self._stored(user_id))

        result = await handler.handle(LogoutUser(user_id=user_id, refresh_token="refresh.jwt"))

        assert result == Success(value=1)
        repo.revoke.assert_awaited_once_with("fp")
        repo.revoke_all_for_user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_logout_everywhere(self):
        user_id = uuid7()
        handler, repo = self._handler(revoked_all=3)

        result = await handler.handle(LogoutUser(user_id=user_id))

        assert result == Success(value=3)
        repo.revoke_all_for_user.assert_awaited_once_with(user_id)

    @pytest.mark.asyncio
    async def test_foreign_token_is_ignored(self):
        handler, repo = self._handler(stored=self._stored(uuid7()))

        result = await handler.handle(LogoutUser(user_id=uuid7(), refresh_token="x"))

        assert result == Success(value=0)
        repo.revoke.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_second_logout_is_idempotent(self):
        user_id = uuid7()
        handler, _ = self._handler(stored=self._stored(user_id, revoked=True))

        result = await handler.handle(LogoutUser(user_id=user_id, refresh_token="x"))

        assert result == Success(value=0)

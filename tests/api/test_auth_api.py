"""API tests for /api/auth.

Flows exercised end to end: registration and email verification, login and
lockout, token refresh and logout, forgot/reset password, and /me.
"""

from datetime import UTC, datetime, timedelta

import pytest

from src.infrastructure.persistence.repositories import UserRepository
from src.infrastructure.security import OneTimeCodeService
from tests.api.helpers import PASSWORD, bearer

pytestmark = pytest.mark.api


async def _register(client, email="ada@example.com", password=PASSWORD):
    return await client.post(
        "/api/auth/register",
        json={"name": "Ada Lovelace", "email": email, "password": password},
    )


class TestRegistrationFlow:
    @pytest.mark.asyncio
    async def test_register_verify_login(self, client, outbox):
        registered = await _register(client, email="Ada@Example.com")

        assert registered.status_code == 201
        body = registered.json()
        assert body["success"] is True
        assert body["data"]["email"] == "ada@example.com"
        assert body["data"]["is_email_verified"] is False
        assert "password_hash" not in body["data"]

        blocked = await client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": PASSWORD}
        )
        assert blocked.status_code == 401
        assert blocked.json()["error"]["message"] == "Please verify your email before logging in"

        code = outbox.last_code("verification", "ada@example.com")
        verified = await client.post(
            "/api/auth/verify-email", json={"email": "ada@example.com", "code": code}
        )
        assert verified.status_code == 200
        assert verified.json()["data"]["is_email_verified"] is True

        logged_in = await client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": PASSWORD}
        )
        assert logged_in.status_code == 200
        data = logged_in.json()["data"]
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 900
        assert data["access_token"] and data["refresh_token"]

    @pytest.mark.asyncio
    async def test_duplicate_registration_conflict(self, client):
        await _register(client)

        response = await _register(client, email="ADA@example.com")

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "error": {
                "code": "conflict",
                "message": "Email is already registered",
                "details": {"field": "email"},
            },
        }

    @pytest.mark.asyncio
    async def test_weak_password_rejected(self, client):
        response = await _register(client, password="weakpass")

        assert response.status_code == 400
        assert response.json()["error"]["details"] == {"field": "password"}

    @pytest.mark.asyncio
    async def test_resend_invalidates_previous_code(self, client, outbox, monkeypatch):
        codes = iter(["111111", "222222"])
        monkeypatch.setattr(OneTimeCodeService, "generate_code", lambda self: next(codes))
        await _register(client)
        first = outbox.last_code("verification", "ada@example.com")

        resent = await client.post(
            "/api/auth/resend-verification", json={"email": "ada@example.com"}
        )
        second = outbox.last_code("verification", "ada@example.com")

        assert resent.status_code == 200
        assert len(outbox.sent) == 2
        assert (first, second) == ("111111", "222222")
        stale = await client.post(
            "/api/auth/verify-email", json={"email": "ada@example.com", "code": first}
        )
        assert stale.status_code == 400
        fresh = await client.post(
            "/api/auth/verify-email", json={"email": "ada@example.com", "code": second}
        )
        assert fresh.status_code == 200

    @pytest.mark.asyncio
    async def test_verification_code_single_use(self, client, outbox):
        await _register(client)
        payload = {
            "email": "ada@example.com",
            "code": outbox.last_code("verification", "ada@example.com"),
        }

        assert (await client.post("/api/auth/verify-email", json=payload)).status_code == 200
        again = await client.post("/api/auth/verify-email", json=payload)

        assert again.status_code == 400
        assert again.json()["error"]["message"] == "Invalid or expired verification code"

    @pytest.mark.asyncio
    async def test_malformed_verification_code(self, client, outbox):
        await _register(client)

        response = await client.post(
            "/api/auth/verify-email", json={"email": "ada@example.com", "code": "12 345"}
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Verification code must be 6 digits"
        assert response.json()["error"]["details"] == {"field": "code"}

    @pytest.mark.asyncio
    async def test_resend_for_verified_account(self, client, create_account):
        await create_account()

        response = await client.post(
            "/api/auth/resend-verification", json={"email": "ada@example.com"}
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Email is already verified"


class TestLogin:
    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_look_the_same(self, client, create_account):
        await create_account()

        unknown = await client.post(
            "/api/auth/login", json={"email": "nobody@example.com", "password": PASSWORD}
        )
        wrong = await client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "Wr0ng!pw"}
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()
        assert wrong.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_lockout_after_five_failures(self, client, create_account):
        await create_account()
        bad = {"email": "ada@example.com", "password": "Wr0ng!pw"}

        for _ in range(5):
            response = await client.post("/api/auth/login", json=bad)
            assert response.status_code == 401

        locked = await client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": PASSWORD}
        )

        assert locked.status_code == 423
        assert locked.json()["error"]["code"] == "account_locked"
        assert locked.json()["error"]["message"] == "Account locked. Try again in 15 minutes"

    @pytest.mark.asyncio
    async def test_elapsed_lock_is_released(self, client, create_account, database):
        user = await create_account()
        user.failed_login_attempts = 5
        user.lock_until = datetime.now(UTC) - timedelta(seconds=1)
        async with database.get_session() as session:
            await UserRepository(session).update(user)

        response = await client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": PASSWORD}
        )

        assert response.status_code == 200
        async with database.get_session() as session:
            stored = await UserRepository(session).find_by_id(user.id)
        assert stored.failed_login_attempts == 0
        assert stored.lock_until is None

    @pytest.mark.asyncio
    async def test_missing_fields_is_request_validation_error(self, client):
        response = await client.post("/api/auth/login", json={"email": "ada@example.com"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["message"] == "Request validation failed"
        assert error["details"]["fields"][0]["field"] == "password"


class TestTokens:
    @pytest.mark.asyncio
    async def test_refresh_issues_new_access_token(self, client, create_account, login):
        await create_account()
        tokens = await login()

        response = await client.post(
            "/api/auth/refresh", json={"refresh_token": tokens["refresh_token"]}
        )

        assert response.status_code == 200
        access = response.json()["data"]["access_token"]
        me = await client.get("/api/auth/me", headers=bearer(access))
        assert me.status_code == 200
        assert me.json()["data"]["email"] == "ada@example.com"

    @pytest.mark.asyncio
    async def test_access_token_cannot_refresh(self, client, create_account, login):
        await create_account()
        tokens = await login()

        response = await client.post(
            "/api/auth/refresh", json={"refresh_token": tokens["access_token"]}
        )

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid or expired refresh token"

    @pytest.mark.asyncio
    async def test_refresh_token_cannot_authenticate(self, client, create_account, login):
        await create_account()
        tokens = await login()

        response = await client.get("/api/auth/me", headers=bearer(tokens["refresh_token"]))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_single_logout_keeps_other_sessions(self, client, create_account, login):
        await create_account()
        laptop = await login()
        phone = await login()

        response = await client.post(
            "/api/auth/logout",
            json={"refresh_token": laptop["refresh_token"]},
            headers=bearer(laptop["access_token"]),
        )

        assert response.status_code == 200
        assert response.json()["data"]["revoked"] == 1
        dead = await client.post(
            "/api/auth/refresh", json={"refresh_token": laptop["refresh_token"]}
        )
        alive = await client.post(
            "/api/auth/refresh", json={"refresh_token": phone["refresh_token"]}
        )
        assert dead.status_code == 401
        assert alive.status_code == 200

    @pytest.mark.asyncio
    async def test_logout_everywhere(self, client, create_account, login):
        await create_account()
        laptop = await login()
        phone = await login()

        response = await client.post("/api/auth/logout", headers=bearer(laptop["access_token"]))

        assert response.json()["data"]["revoked"] == 2
        for session in (laptop, phone):
            refreshed = await client.post(
                "/api/auth/refresh", json={"refresh_token": session["refresh_token"]}
            )
            assert refreshed.status_code == 401

    @pytest.mark.asyncio
    async def test_me_requires_token(self, client):
        response = await client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["error"] == {
            "code": "authentication_error",
            "message": "Not authenticated",
        }

    @pytest.mark.asyncio
    async def test_garbage_token(self, client):
        response = await client.get("/api/auth/me", headers=bearer("not-a-token"))

        assert response.status_code == 401


class TestPasswordReset:
    async def _reset_token(self, client, outbox) -> tuple[str, str]:
        sent = await client.post("/api/auth/forgot-password", json={"email": "ada@example.com"})
        assert sent.status_code == 200
        code = outbox.last_code("password_reset", "ada@example.com")
        verified = await client.post(
            "/api/auth/verify-reset-code", json={"email": "ada@example.com", "code": code}
        )
        assert verified.status_code == 200
        return code, verified.json()["data"]["reset_token"]

    @pytest.mark.asyncio
    async def test_full_reset_flow(self, client, outbox, create_account):
        await create_account()
        code, reset_token = await self._reset_token(client, outbox)

        reset = await client.post(
            "/api/auth/reset-password",
            json={"new_password": "N3w!pass", "confirm_password": "N3w!pass", "code": code},
            headers=bearer(reset_token),
        )

        assert reset.status_code == 200
        old = await client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": PASSWORD}
        )
        new = await client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "N3w!pass"}
        )
        assert old.status_code == 401
        assert new.status_code == 200

    @pytest.mark.asyncio
    async def test_second_reset_request_within_cooldown(self, client, outbox, create_account):
        await create_account()
        code, reset_token = await self._reset_token(client, outbox)
        await client.post(
            "/api/auth/reset-password",
            json={"new_password": "N3w!pass", "code": code},
            headers=bearer(reset_token),
        )

        again = await client.post("/api/auth/forgot-password", json={"email": "ada@example.com"})

        assert again.status_code == 429
        assert again.json()["error"]["message"] == "Password reset limited to once every 24 hours"

    @pytest.mark.asyncio
    async def test_wrong_reset_code(self, client, outbox, create_account):
        await create_account()
        await client.post("/api/auth/forgot-password", json={"email": "ada@example.com"})
        code = outbox.last_code("password_reset", "ada@example.com")
        wrong = "000000" if code != "000000" else "111111"

        response = await client.post(
            "/api/auth/verify-reset-code", json={"email": "ada@example.com", "code": wrong}
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid or expired reset code"

    @pytest.mark.asyncio
    async def test_forgot_password_unknown_email(self, client):
        response = await client.post(
            "/api/auth/forgot-password", json={"email": "ghost@example.com"}
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "No account found with this email"

    @pytest.mark.asyncio
    async def test_reusing_current_password_rejected(self, client, outbox, create_account):
        await create_account()
        _, reset_token = await self._reset_token(client, outbox)

        response = await client.post(
            "/api/auth/reset-password",
            json={"new_password": PASSWORD},
            headers=bearer(reset_token),
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Cannot use current password"

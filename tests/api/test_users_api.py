"""API tests for /api/users."""

import pytest
from uuid_extensions import uuid7

from src.domain.enums import UserRole
from src.infrastructure.security import OneTimeCodeService
from tests.api.helpers import PASSWORD, bearer

pytestmark = pytest.mark.api


class TestAdminUserCreation:
    @pytest.mark.asyncio
    async def test_admin_creates_verified_user(self, client, create_account, login):
        await create_account(email="root@example.com", role=UserRole.ADMIN)
        admin = await login("root@example.com")

        response = await client.post(
            "/api/users",
            json={"name": "Grace Hopper", "email": "grace@example.com", "password": "cobol59"},
            headers=bearer(admin["access_token"]),
        )

        assert response.status_code == 201
        assert response.json()["data"]["is_email_verified"] is True
        assert response.json()["data"]["role"] == "user"
        assert (await login("grace@example.com", "cobol59"))["user"]["name"] == "Grace Hopper"

    @pytest.mark.asyncio
    async def test_regular_user_forbidden(self, client, create_account, login):
        await create_account()
        tokens = await login()

        response = await client.post(
            "/api/users",
            json={"name": "Eve", "email": "eve@example.com", "password": "secret1"},
            headers=bearer(tokens["access_token"]),
        )

        assert response.status_code == 403
        assert response.json()["error"]["message"] == "Insufficient permissions"


class TestProfile:
    @pytest.mark.asyncio
    async def test_update_own_profile(self, client, create_account, login):
        user = await create_account()
        tokens = await login()

        response = await client.patch(
            f"/api/users/{user.id}",
            json={
                "name": "Ada King",
                "preferences": {"timezone": "Europe/London", "notifications": {"sms": True}},
            },
            headers=bearer(tokens["access_token"]),
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Ada King"
        assert data["preferences"] == {
            "timezone": "Europe/London",
            "notifications": {"email": True, "sms": True, "push": True},
        }

    @pytest.mark.asyncio
    async def test_cannot_view_or_edit_others(self, client, create_account, login):
        await create_account()
        other = await create_account(email="grace@example.com", name="Grace Hopper")
        tokens = await login()
        headers = bearer(tokens["access_token"])

        viewed = await client.get(f"/api/users/{other.id}", headers=headers)
        edited = await client.patch(f"/api/users/{other.id}", json={"name": "Eve"}, headers=headers)

        assert viewed.status_code == 403
        assert edited.status_code == 403

    @pytest.mark.asyncio
    async def test_user_cannot_promote_self(self, client, create_account, login):
        user = await create_account()
        tokens = await login()

        response = await client.patch(
            f"/api/users/{user.id}",
            json={"role": "admin"},
            headers=bearer(tokens["access_token"]),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_deactivation_blocks_access(self, client, create_account, login):
        await create_account(email="root@example.com", role=UserRole.ADMIN)
        user = await create_account()
        admin = await login("root@example.com")
        tokens = await login()

        deactivated = await client.patch(
            f"/api/users/{user.id}",
            json={"is_active": False},
            headers=bearer(admin["access_token"]),
        )
        me = await client.get("/api/auth/me", headers=bearer(tokens["access_token"]))

        assert deactivated.status_code == 200
        assert me.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_user_for_admin(self, client, create_account, login):
        await create_account(email="root@example.com", role=UserRole.ADMIN)
        admin = await login("root@example.com")

        response = await client.get(f"/api/users/{uuid7()}", headers=bearer(admin["access_token"]))

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_uuid_is_validation_error(self, client, create_account, login):
        await create_account()
        tokens = await login()

        response = await client.get("/api/users/not-a-uuid", headers=bearer(tokens["access_token"]))

        assert response.status_code == 400
        assert response.json()["error"]["details"]["fields"][0]["field"] == "path.user_id"

    @pytest.mark.asyncio
    async def test_delete_self(self, client, create_account, login):
        user = await create_account()
        tokens = await login()
        headers = bearer(tokens["access_token"])

        deleted = await client.delete(f"/api/users/{user.id}", headers=headers)
        me = await client.get("/api/auth/me", headers=headers)

        assert deleted.status_code == 200
        assert me.status_code == 401


def _change_body(new_password: str = "N3w!pass", current: str = PASSWORD) -> dict:
    return {
        "current_password": current,
        "new_password": new_password,
        "confirm_password": new_password,
    }


class TestChangePassword:
    @pytest.mark.asyncio
    async def test_request_then_confirm(self, client, outbox, create_account, login):
        user = await create_account()
        tokens = await login()
        headers = bearer(tokens["access_token"])

        requested = await client.put(
            f"/api/users/{user.id}/password", json=_change_body(), headers=headers
        )

        assert requested.status_code == 200
        assert requested.json()["message"] == "Verification code sent to your email"
        # Nothing changes until the code is confirmed.
        assert (await login())["access_token"]

        confirmed = await client.post(
            f"/api/users/{user.id}/password/verify",
            json={"code": outbox.last_code("password_change", "ada@example.com")},
            headers=headers,
        )

        assert confirmed.status_code == 200
        assert confirmed.json()["message"] == "Password updated successfully"
        refreshed = await client.post(
            "/api/auth/refresh", json={"refresh_token": tokens["refresh_token"]}
        )
        assert refreshed.status_code == 401
        assert (await login(password="N3w!pass"))["access_token"]
        stale = await client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": PASSWORD}
        )
        assert stale.status_code == 401

    @pytest.mark.asyncio
    async def test_wrong_code_keeps_password(self, client, outbox, create_account, login):
        user = await create_account()
        headers = bearer((await login())["access_token"])
        await client.put(f"/api/users/{user.id}/password", json=_change_body(), headers=headers)
        code = outbox.last_code("password_change", "ada@example.com")
        wrong = "000000" if code != "000000" else "111111"

        response = await client.post(
            f"/api/users/{user.id}/password/verify", json={"code": wrong}, headers=headers
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid or expired password change code"
        assert (await login())["access_token"]

    @pytest.mark.asyncio
    async def test_malformed_code(self, client, create_account, login):
        user = await create_account()
        headers = bearer((await login())["access_token"])

        response = await client.post(
            f"/api/users/{user.id}/password/verify", json={"code": "abc"}, headers=headers
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Verification code must be 6 digits"

    @pytest.mark.asyncio
    async def test_forgot_password_cancels_pending_change(
        self, client, outbox, create_account, login, monkeypatch
    ):
        codes = iter(["111111", "222222"])
        monkeypatch.setattr(OneTimeCodeService, "generate_code", lambda self: next(codes))
        user = await create_account()
        headers = bearer((await login())["access_token"])
        await client.put(f"/api/users/{user.id}/password", json=_change_body(), headers=headers)
        change_code = outbox.last_code("password_change", "ada@example.com")

        forgot = await client.post("/api/auth/forgot-password", json={"email": "ada@example.com"})
        reset_code = outbox.last_code("password_reset", "ada@example.com")

        assert forgot.status_code == 200
        for code in (change_code, reset_code):
            response = await client.post(
                f"/api/users/{user.id}/password/verify", json={"code": code}, headers=headers
            )
            assert response.status_code == 400
        assert (await login())["access_token"]
        # The reset code itself is still good for the forgot-password flow.
        verified = await client.post(
            "/api/auth/verify-reset-code", json={"email": "ada@example.com", "code": reset_code}
        )
        assert verified.status_code == 200

    @pytest.mark.asyncio
    async def test_change_request_replaces_reset_code(
        self, client, outbox, create_account, login, monkeypatch
    ):
        codes = iter(["111111", "222222"])
        monkeypatch.setattr(OneTimeCodeService, "generate_code", lambda self: next(codes))
        user = await create_account()
        headers = bearer((await login())["access_token"])
        await client.post("/api/auth/forgot-password", json={"email": "ada@example.com"})
        reset_code = outbox.last_code("password_reset", "ada@example.com")

        await client.put(f"/api/users/{user.id}/password", json=_change_body(), headers=headers)
        change_code = outbox.last_code("password_change", "ada@example.com")

        assert (reset_code, change_code) == ("111111", "222222")
        stale = await client.post(
            "/api/auth/verify-reset-code",
            json={"email": "ada@example.com", "code": reset_code},
        )
        assert stale.status_code == 400
        confirmed = await client.post(
            f"/api/users/{user.id}/password/verify", json={"code": change_code}, headers=headers
        )
        assert confirmed.status_code == 200

    @pytest.mark.asyncio
    async def test_wrong_current_password(self, client, outbox, create_account, login):
        user = await create_account()
        tokens = await login()

        response = await client.put(
            f"/api/users/{user.id}/password",
            json=_change_body(current="Wr0ng!pw"),
            headers=bearer(tokens["access_token"]),
        )

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Current password is incorrect"
        assert outbox.sent == []

    @pytest.mark.asyncio
    async def test_only_own_password(self, client, create_account, login):
        await create_account(email="root@example.com", role=UserRole.ADMIN)
        other = await create_account()
        admin = await login("root@example.com")

        for method, path, body in (
            ("PUT", f"/api/users/{other.id}/password", _change_body()),
            ("POST", f"/api/users/{other.id}/password/verify", {"code": "123456"}),
        ):
            response = await client.request(
                method, path, json=body, headers=bearer(admin["access_token"])
            )

            assert response.status_code == 403
            assert response.json()["error"]["message"] == "You can only change your own password"

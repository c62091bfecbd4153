"""API tests for status endpoints and the global error envelope."""

import pytest

pytestmark = pytest.mark.api


class TestSystem:
    @pytest.mark.asyncio
    async def test_status(self, client):
        response = await client.get("/api/status")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "operational"
        assert data["environment"] == "testing"
        assert response.headers["X-Trace-Id"]

    @pytest.mark.asyncio
    async def test_trace_id_is_echoed(self, client):
        response = await client.get("/api/status", headers={"X-Trace-Id": "trace-123"})

        assert response.headers["X-Trace-Id"] == "trace-123"

    @pytest.mark.asyncio
    async def test_database_status(self, client):
        response = await client.get("/api/status/db")

        assert response.status_code == 200
        assert response.json()["data"] == {"database": "connected"}

    @pytest.mark.asyncio
    async def test_unknown_route_envelope(self, client):
        response = await client.get("/api/nowhere")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": {"code": "not_found", "message": "Route GET /api/nowhere not found"},
        }

    @pytest.mark.asyncio
    async def test_malformed_json_is_validation_error(self, client):
        response = await client.post(
            "/api/auth/login",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "validation_error"

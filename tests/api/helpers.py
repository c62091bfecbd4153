"""Shared constants and request helpers for API tests."""

PASSWORD = "Str0ng!pw"


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}

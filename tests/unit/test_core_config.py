"""Unit tests for Settings validation and derived config objects."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from src.core.config import Settings

ACCESS_SECRET = "config-access-secret-0123456789abcdefghij"
REFRESH_SECRET = "config-refresh-secret-0123456789abcdefghi"


def _settings(**overrides) -> Settings:
    values = {
        "jwt_access_secret": ACCESS_SECRET,
        "jwt_refresh_secret": REFRESH_SECRET,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.mark.unit
class TestSettings:
    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError):
            _settings(jwt_access_secret="too-short")

    def test_equal_secrets_rejected(self):
        with pytest.raises(ValidationError):
            _settings(jwt_refresh_secret=ACCESS_SECRET)

    @pytest.mark.parametrize("rounds", [9, 21])
    def test_bcrypt_rounds_bounds(self, rounds):
        with pytest.raises(ValidationError):
            _settings(bcrypt_rounds=rounds)

    def test_prefix_trailing_slash_removed(self):
        assert _settings(api_prefix="/api/").api_prefix == "/api"

    def test_cors_origin_list(self):
        settings = _settings(cors_origins="http://a.test, http://b.test ,")

        assert settings.cors_origin_list == ["http://a.test", "http://b.test"]

    def test_derived_token_settings(self):
        tokens = _settings(access_token_expire_minutes=5).token_settings()

        assert tokens.access_secret == ACCESS_SECRET
        assert tokens.access_token_lifetime == timedelta(minutes=5)
        assert tokens.refresh_token_lifetime == timedelta(days=7)

    def test_derived_security_settings(self):
        security = _settings(lockout_minutes=30).account_security_settings()

        assert security.max_failed_login_attempts == 5
        assert security.lockout_duration == timedelta(minutes=30)
        assert security.password_reset_cooldown == timedelta(hours=24)

    def test_no_smtp_host_means_no_smtp_settings(self):
        assert _settings().smtp_settings() is None

    def test_derived_smtp_settings(self):
        smtp = _settings(
            smtp_host="smtp.example.com",
            smtp_port=465,
            smtp_username="mailer",
            smtp_password="hunter22",
            smtp_use_tls=True,
        ).smtp_settings()

        assert smtp is not None
        assert (smtp.host, smtp.port, smtp.use_tls) == ("smtp.example.com", 465, True)
        assert (smtp.username, smtp.password) == ("mailer", "hunter22")
        assert smtp.sender == "Almanac <no-reply@almanac.local>"

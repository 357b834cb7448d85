"""
Tests for Settings Validation
"""

import pytest
from pydantic import ValidationError

from bookstore_api.config import Settings

VALID_KEY = "a" * 32


class TestSecretKey:

    def test_placeholder_rejected(self):
        with pytest.raises(ValidationError, match="placeholder"):
            Settings(secret_key="REPLACE_WITH_YOUR_GENERATED_SECRET_KEY_0123456789")

    def test_short_key_rejected(self):
        with pytest.raises(ValidationError, match="at least 32 characters"):
            Settings(secret_key="too-short")

    def test_valid_key_accepted(self):
        assert Settings(secret_key=VALID_KEY).secret_key == VALID_KEY


class TestLogging:

    def test_log_level_normalized(self):
        assert Settings(secret_key=VALID_KEY, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(secret_key=VALID_KEY, log_level="VERBOSE")

    def test_log_file_optional(self):
        assert Settings(secret_key=VALID_KEY, log_file=None).log_file is None


class TestEnvironment:

    def test_environment_normalized(self):
        settings = Settings(secret_key=VALID_KEY, environment="Production")

        assert settings.environment == "production"
        assert settings.is_production is True

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(secret_key=VALID_KEY, environment="qa")

    def test_allowed_origins_list(self):
        settings = Settings(
            secret_key=VALID_KEY,
            allowed_origins="http://a.example, http://b.example",
        )

        assert settings.allowed_origins_list == ["http://a.example", "http://b.example"]


def test_environment_variables_override_defaults(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", VALID_KEY)
    monkeypatch.setenv("API_PREFIX", "/v2")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")

    settings = Settings()

    assert settings.api_prefix == "/v2"
    assert settings.access_token_expire_minutes == 5

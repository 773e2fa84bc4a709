"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from config.settings import Settings


class TestSettings:
    def test_secret_is_required(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_empty_secret_rejected(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "s" * 32)
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.port == 3000
        assert settings.bcrypt_rounds == 10
        assert settings.api_prefix == "/api"

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "s" * 32)
        monkeypatch.setenv("PORT", "8080")
        assert Settings(_env_file=None).port == 8080

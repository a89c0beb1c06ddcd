"""Tests for app.config."""

from __future__ import annotations

import pytest

from app.config import Settings, get_settings

ENV_VARS = (
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "CORS_ORIGINS",
    "SENTRY_DSN",
    "RATE_LIMIT_ENABLED",
    "RATE_LIMIT_PROCESS",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.usefixtures("clean_env")
class TestGetSettings:
    def test_defaults_serve_port_3000_on_all_interfaces(self) -> None:
        settings = get_settings()
        assert settings == Settings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 3000
        assert settings.rate_limit_enabled is False
        assert settings.sentry_dsn is None

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
        monkeypatch.setenv("SENTRY_DSN", "https://key@sentry.example/1")
        monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
        monkeypatch.setenv("RATE_LIMIT_PROCESS", "5/second")

        settings = get_settings()
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ("http://a.test", "http://b.test")
        assert settings.sentry_dsn == "https://key@sentry.example/1"
        assert settings.rate_limit_enabled is True
        assert settings.rate_limit_process == "5/second"

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_rate_limit_disabled_values(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("RATE_LIMIT_ENABLED", value)
        assert get_settings().rate_limit_enabled is False

    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "three-thousand")
        with pytest.raises(ValueError, match="PORT"):
            get_settings()

from __future__ import annotations

from datetime import datetime, timezone

from scratchpad_api.config import load_settings
from scratchpad_api.util import next_timestamp, rfc3339


def test_settings_defaults(monkeypatch) -> None:
    for key in ("API_AUTH_MODE", "API_AUTH_TOKEN", "API_DEBUG_LOG", "CORS_ORIGINS"):
        monkeypatch.delenv(key, raising=False)
    settings = load_settings()
    assert settings.api_auth_mode == "none"
    assert settings.api_auth_token is None
    assert settings.api_debug_log is False
    assert settings.cors_origins == ()


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("API_AUTH_MODE", " Bearer ")
    monkeypatch.setenv("API_AUTH_TOKEN", "t")
    monkeypatch.setenv("API_DEBUG_LOG", "TRUE")
    monkeypatch.setenv("CORS_ORIGINS", "http://a, ,http://b")
    settings = load_settings()
    assert settings.api_auth_mode == "bearer"
    assert settings.api_auth_token == "t"
    assert settings.api_debug_log is True
    assert settings.cors_origins == ("http://a", "http://b")


def test_rfc3339_orders_lexicographically() -> None:
    a = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    b = next_timestamp(a, a)
    assert rfc3339(a) == "2025-01-01T12:00:00.000000Z"
    assert rfc3339(b) > rfc3339(a)

from __future__ import annotations

import pytest

from findw.core.config import DEFAULT_JWT_SECRET, Settings


def _settings(**overrides) -> Settings:  # noqa: ANN003
    return Settings(_env_file=None, **overrides)


def test_production_refuses_default_secrets() -> None:
    with pytest.raises(ValueError):
        _settings(ENV="production", JWT_SECRET=DEFAULT_JWT_SECRET, VK_TOKEN_ENC_KEY="k").validate_runtime_security()
    with pytest.raises(ValueError):
        _settings(ENV="production", JWT_SECRET="real", VK_TOKEN_ENC_KEY=" ").validate_runtime_security()

    _settings(ENV="production", JWT_SECRET="real", VK_TOKEN_ENC_KEY="k").validate_runtime_security()


def test_short_refresh_tokens_are_refused() -> None:
    with pytest.raises(ValueError):
        _settings(REFRESH_TOKEN_BYTES=16).validate_runtime_security()


def test_refresh_access_lifetime_defaults_to_login_lifetime() -> None:
    assert _settings().refresh_access_token_minutes == 30
    assert _settings(REFRESH_ACCESS_TOKEN_EXPIRE_MINUTES=15).refresh_access_token_minutes == 15


def test_cors_origins_are_split() -> None:
    assert _settings(CORS_ORIGINS="http://a, http://b ,").cors_origins == ["http://a", "http://b"]

"""Tests for client configuration: mappings, env vars, masking."""

from __future__ import annotations

import pytest

from manage_api_sdk import ManageClient
from manage_api_sdk.config import ClientConfig, load_config
from manage_api_sdk.errors import ConfigError


class TestClientConfig:
    """ClientConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Defaults for optional settings."""
        cfg = ClientConfig(url="https://x", token="t")
        assert cfg.backoff_max_tries == 10
        assert cfg.user_agent is None
        assert cfg.timeout == 60.0

    def test_repr_masks_token(self) -> None:
        """Token never shows in repr."""
        cfg = ClientConfig(url="https://x", token="super-secret")
        assert "super-secret" not in repr(cfg)
        assert "***" in repr(cfg)

    def test_negative_backoff_rejected(self) -> None:
        """Negative retries are rejected."""
        with pytest.raises(ConfigError):
            ClientConfig(url="https://x", token="t", backoff_max_tries=-1)

    def test_frozen(self) -> None:
        """Config is immutable."""
        cfg = ClientConfig(url="https://x", token="t")
        with pytest.raises(Exception):
            cfg.token = "other"  # type: ignore[misc]


class TestFromMapping:
    """Building config from a mapping."""

    def test_camel_case_keys(self) -> None:
        """camelCase keys are read."""
        cfg = ClientConfig.from_mapping(
            {"url": "https://x", "token": "t", "backoffMaxTries": "0", "userAgent": "suite"}
        )
        assert cfg.backoff_max_tries == 0
        assert cfg.user_agent == "suite"

    def test_missing_token(self) -> None:
        """Missing token raises."""
        with pytest.raises(ConfigError, match="token must be set"):
            ClientConfig.from_mapping({"url": "https://x"})

    def test_missing_url(self) -> None:
        """Missing url raises."""
        with pytest.raises(ConfigError, match="url must be set"):
            ClientConfig.from_mapping({"token": "t"})

    def test_bad_backoff(self) -> None:
        """Non-numeric backoffMaxTries raises."""
        with pytest.raises(ConfigError):
            ClientConfig.from_mapping({"url": "https://x", "token": "t", "backoffMaxTries": "many"})


class TestLoadConfig:
    """Config from environment variables."""

    def test_reads_environment(self, monkeypatch) -> None:
        """KBC_MANAGE_API_* vars are read."""
        monkeypatch.setenv("KBC_MANAGE_API_URL", "https://manage.example.test")
        monkeypatch.setenv("KBC_MANAGE_API_TOKEN", "env-token")
        monkeypatch.setenv("KBC_MANAGE_API_BACKOFF_MAX_TRIES", "2")
        cfg = load_config()
        assert cfg.url == "https://manage.example.test"
        assert cfg.token == "env-token"
        assert cfg.backoff_max_tries == 2

    def test_invalid_int_falls_back(self, monkeypatch) -> None:
        """Bad integer env value uses the default."""
        monkeypatch.setenv("KBC_MANAGE_API_URL", "https://manage.example.test")
        monkeypatch.setenv("KBC_MANAGE_API_TOKEN", "env-token")
        monkeypatch.setenv("KBC_MANAGE_API_BACKOFF_MAX_TRIES", "lots")
        assert load_config().backoff_max_tries == 10

    def test_missing_token_env(self, monkeypatch) -> None:
        """Missing token env var raises."""
        monkeypatch.setenv("KBC_MANAGE_API_URL", "https://manage.example.test")
        monkeypatch.delenv("KBC_MANAGE_API_TOKEN", raising=False)
        with pytest.raises(ConfigError):
            load_config()

    def test_client_from_env(self, monkeypatch) -> None:
        """Client builds from the environment."""
        monkeypatch.setenv("KBC_MANAGE_API_URL", "https://manage.example.test")
        monkeypatch.setenv("KBC_MANAGE_API_TOKEN", "env-token")
        client = ManageClient.from_env()
        assert client.config.token == "env-token"
        client.close()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

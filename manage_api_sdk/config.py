"""Client configuration for the Manage API SDK.

Reads either a plain mapping (the ``url`` / ``token`` / ``backoffMaxTries``
keys) or environment variables. Never exposes the token in repr.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from manage_api_sdk.errors import ConfigError

DEFAULT_BACKOFF_MAX_TRIES = 10
DEFAULT_TIMEOUT = 60.0

ENV_URL = "KBC_MANAGE_API_URL"
ENV_TOKEN = "KBC_MANAGE_API_TOKEN"
ENV_BACKOFF_MAX_TRIES = "KBC_MANAGE_API_BACKOFF_MAX_TRIES"
ENV_USER_AGENT = "KBC_MANAGE_API_USER_AGENT"


def _int_env(key: str, default: int) -> int:
    """Parse an int env var with fallback."""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        return default


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration. Safe to log — the token is masked."""

    url: str
    token: str
    backoff_max_tries: int = DEFAULT_BACKOFF_MAX_TRIES
    user_agent: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.token:
            raise ConfigError("token must be set")
        if not self.url:
            raise ConfigError("url must be set")
        if self.backoff_max_tries < 0:
            raise ConfigError("backoffMaxTries must not be negative")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(url={self.url!r}, token='***', "
            f"backoff_max_tries={self.backoff_max_tries}, "
            f"user_agent={self.user_agent!r}, timeout={self.timeout})"
        )

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "ClientConfig":
        """Build from a ``{"url": ..., "token": ..., "backoffMaxTries": ...}`` mapping."""
        backoff = config.get("backoffMaxTries")
        try:
            backoff_max_tries = DEFAULT_BACKOFF_MAX_TRIES if backoff is None else int(backoff)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"backoffMaxTries must be an integer, got {backoff!r}") from e
        return cls(
            url=config.get("url") or "",
            token=config.get("token") or "",
            backoff_max_tries=backoff_max_tries,
            user_agent=config.get("userAgent"),
            timeout=float(config.get("timeout", DEFAULT_TIMEOUT)),
        )


def load_config() -> ClientConfig:
    """Build a ClientConfig from ``KBC_MANAGE_API_*`` environment variables."""
    return ClientConfig(
        url=os.environ.get(ENV_URL, ""),
        token=os.environ.get(ENV_TOKEN, ""),
        backoff_max_tries=_int_env(ENV_BACKOFF_MAX_TRIES, DEFAULT_BACKOFF_MAX_TRIES),
        user_agent=os.environ.get(ENV_USER_AGENT) or None,
    )

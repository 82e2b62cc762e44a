"""AsyncManageClient — asynchronous Python SDK for the Manage API.

Exposes the same endpoint methods as :class:`ManageClient`, as coroutines.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Dict, Mapping, Optional, Union

import httpx

from manage_api_sdk.auth import build_auth_headers, build_user_agent
from manage_api_sdk.client import decode_body, error_from_response
from manage_api_sdk.config import DEFAULT_BACKOFF_MAX_TRIES, DEFAULT_TIMEOUT, ClientConfig, load_config
from manage_api_sdk.endpoints import ManageEndpoints
from manage_api_sdk.errors import ClientError
from manage_api_sdk.utils import exponential_delay, should_retry

logger = logging.getLogger(__name__)


class AsyncManageClient(ManageEndpoints):
    """Asynchronous client for the Manage API.

    Usage::

        import asyncio
        from manage_api_sdk import AsyncManageClient

        async def main():
            async with AsyncManageClient(url="https://connection.keboola.com", token="...") as c:
                print(await c.list_maintainers())

        asyncio.run(main())
    """

    def __init__(
        self,
        url: Optional[str] = None,
        token: Optional[str] = None,
        backoff_max_tries: int = DEFAULT_BACKOFF_MAX_TRIES,
        user_agent: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize async client.

        Args:
            url: Manage API base URL
            token: Manage API token, sent as X-KBC-ManageApiToken
            backoff_max_tries: Retries for 5xx and network errors
            user_agent: Appended to the SDK user agent
            timeout: Request timeout in seconds
            transport: Custom httpx transport
        """
        config = ClientConfig(
            url=url or "",
            token=token or "",
            backoff_max_tries=backoff_max_tries,
            user_agent=user_agent,
            timeout=timeout,
        )
        self._config = config
        self._base_url = config.url.rstrip("/")
        self._backoff_max_tries = config.backoff_max_tries
        self._headers = build_auth_headers(config.token, build_user_agent(config.user_agent))
        self._client = httpx.AsyncClient(base_url=self._base_url, timeout=config.timeout, transport=transport)

    @classmethod
    def from_config(
        cls,
        config: Union[ClientConfig, Mapping[str, Any]],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AsyncManageClient":
        if not isinstance(config, ClientConfig):
            config = ClientConfig.from_mapping(config)
        return cls(
            url=config.url,
            token=config.token,
            backoff_max_tries=config.backoff_max_tries,
            user_agent=config.user_agent,
            timeout=config.timeout,
            transport=transport,
        )

    @classmethod
    def from_env(cls) -> "AsyncManageClient":
        return cls.from_config(load_config())

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ── Internal helpers ─────────────────────────────────────────

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        retries = 0
        while True:
            try:
                resp = await self._client.request(method, path, headers=self._headers, **kwargs)
            except httpx.TransportError as e:
                if not should_retry(retries, self._backoff_max_tries, error=e):
                    logger.debug("%s %s failed after %d retries: %s", method, path, retries, e)
                    raise ClientError(str(e) or type(e).__name__, 0) from e
                reason = type(e).__name__
            else:
                if not should_retry(retries, self._backoff_max_tries, response=resp):
                    return resp
                reason = str(resp.status_code)
            retries += 1
            delay = exponential_delay(retries)
            logger.warning(
                "%s %s: %s, retry %d/%d in %.1fs",
                method, path, reason, retries, self._backoff_max_tries, delay,
            )
            await asyncio.sleep(delay)

    async def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        kwargs: Dict[str, Any] = {}
        if json is not None:
            kwargs["json"] = json
        if params:
            kwargs["params"] = params
        resp = await self._send(method, path, **kwargs)
        if resp.status_code >= 400:
            error = error_from_response(resp)
            logger.debug("%s %s -> %s", method, path, error)
            raise error
        return decode_body(resp)

    async def _discard(self, result: Awaitable[Any]) -> None:
        await result

    # ── Context Manager ─────────────────────────────────────────

    async def __aenter__(self) -> "AsyncManageClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

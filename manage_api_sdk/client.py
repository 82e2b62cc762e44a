"""ManageClient — synchronous Python SDK for the Manage API."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from manage_api_sdk.auth import build_auth_headers, build_user_agent
from manage_api_sdk.config import DEFAULT_BACKOFF_MAX_TRIES, DEFAULT_TIMEOUT, ClientConfig, load_config
from manage_api_sdk.endpoints import ManageEndpoints
from manage_api_sdk.errors import ClientError, MaintenanceError, error_class_for_status
from manage_api_sdk.utils import exponential_delay, should_retry

logger = logging.getLogger(__name__)


def decode_body(resp: httpx.Response) -> Any:
    """JSON when the response says exactly ``application/json``, raw text otherwise.

    An empty or malformed JSON body decodes to None.
    """
    content_types = resp.headers.get_list("content-type")
    if content_types and content_types[0] == "application/json":
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return None
    return resp.text


def _error_body(resp: httpx.Response) -> Dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def compose_error_message(body: Mapping[str, Any], fallback: str) -> str:
    """Server ``error`` text plus one line per ``errors`` entry, or ``fallback``."""
    if body.get("error") is None:
        return fallback
    message = str(body["error"])
    errors = body.get("errors")
    if errors:
        message += "\nErrors:\n"
        for error in errors:
            if isinstance(error, Mapping):
                message += f'"{error.get("key")}": {error.get("message")}\n'
            else:
                message += f"{error}\n"
    return message


def error_from_response(resp: httpx.Response) -> ClientError:
    """Create the appropriate error from a failed response without raising."""
    body = _error_body(resp)
    if resp.status_code == 503:
        retry_after = resp.headers.get("retry-after")
        return MaintenanceError(
            body.get("reason", "Maintenance"),
            int(retry_after) if retry_after and retry_after.strip().isdigit() else None,
            body,
        )
    fallback = f"{resp.request.method} {resp.request.url} returned {resp.status_code} {resp.reason_phrase}"
    error_cls = error_class_for_status(resp.status_code)
    return error_cls(
        compose_error_message(body, fallback),
        resp.status_code,
        body.get("code") or "",
        body,
    )


class ManageClient(ManageEndpoints):
    """Synchronous client for the Manage API.

    Usage::

        from manage_api_sdk import ManageClient

        c = ManageClient(url="https://connection.keboola.com", token="...")
        token = c.verify_token()
        print(token["description"])
    """

    def __init__(
        self,
        url: Optional[str] = None,
        token: Optional[str] = None,
        backoff_max_tries: int = DEFAULT_BACKOFF_MAX_TRIES,
        user_agent: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
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
        self._client = httpx.Client(base_url=self._base_url, timeout=config.timeout, transport=transport)

    @classmethod
    def from_config(
        cls,
        config: Union[ClientConfig, Mapping[str, Any]],
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "ManageClient":
        """Build from a ClientConfig or a ``{"url", "token", "backoffMaxTries"}`` mapping."""
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
    def from_env(cls) -> "ManageClient":
        """Build from ``KBC_MANAGE_API_*`` environment variables."""
        return cls.from_config(load_config())

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ── Internal helpers ─────────────────────────────────────────

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send with retry on 5xx and transport errors.

        Returns the last response, which may still be an error.
        """
        retries = 0
        while True:
            try:
                resp = self._client.request(method, path, headers=self._headers, **kwargs)
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
            time.sleep(delay)

    def _request(
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
        resp = self._send(method, path, **kwargs)
        if resp.status_code >= 400:
            error = error_from_response(resp)
            logger.debug("%s %s -> %s", method, path, error)
            raise error
        return decode_body(resp)

    def _discard(self, result: Any) -> None:
        return None

    # ── Context Manager ─────────────────────────────────────────

    def __enter__(self) -> "ManageClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

"""Tests for the asynchronous client.

Coroutines are driven with asyncio.run; no event-loop plugin needed.
"""

from __future__ import annotations

import asyncio

import httpx
import pytest

from manage_api_sdk import AsyncManageClient
from manage_api_sdk.errors import ClientError, ConfigError, MaintenanceError, NotFoundError, ServerError
from tests.conftest import API_TOKEN, API_URL


def run_async(coro):
    """Helper to run async coroutine in sync test."""
    return asyncio.run(coro)


class TestAsyncConstruction:
    """Async client config validation."""

    def test_missing_token_raises(self) -> None:
        """Missing token is rejected."""
        with pytest.raises(ConfigError):
            AsyncManageClient(url=API_URL)

    def test_missing_url_raises(self) -> None:
        """Missing url is rejected."""
        with pytest.raises(ConfigError):
            AsyncManageClient(token=API_TOKEN)


class TestAsyncRequests:
    """Async request shapes and results."""

    def test_get_decodes_json(self, make_async_client, fake_api) -> None:
        """GET returns the decoded JSON body."""
        fake_api.queue(httpx.Response(200, json={"id": 7}))

        async def go():
            async with make_async_client() as client:
                return await client.get_project(7)

        assert run_async(go()) == {"id": 7}
        assert fake_api.last.method == "GET"
        assert fake_api.last.url.path == "/manage/projects/7"
        assert fake_api.last.headers["X-KBC-ManageApiToken"] == API_TOKEN

    def test_post_sends_body(self, make_async_client, fake_api) -> None:
        """POST sends the JSON body."""
        fake_api.queue(httpx.Response(201, json={"id": 3, "name": "Org"}))

        async def go():
            async with make_async_client() as client:
                return await client.create_organization(12, {"name": "Org"})

        assert run_async(go()) == {"id": 3, "name": "Org"}
        assert fake_api.last.url.path == "/manage/maintainers/12/organizations"
        assert fake_api.last_json() == {"name": "Org"}

    def test_delete_returns_none(self, make_async_client, fake_api) -> None:
        """DELETE resolves to None."""
        fake_api.queue(httpx.Response(204))

        async def go():
            async with make_async_client() as client:
                return await client.delete_organization(4)

        assert run_async(go()) is None
        assert fake_api.last.method == "DELETE"

    def test_empty_json_body_decodes_to_none(self, make_async_client, fake_api) -> None:
        """Empty or malformed application/json bodies resolve to None."""
        fake_api.queue(
            httpx.Response(204, headers={"Content-Type": "application/json"}),
            httpx.Response(200, content=b"{not json", headers={"Content-Type": "application/json"}),
        )

        async def go():
            async with make_async_client() as client:
                return await client.delete_organization(4), await client.verify_token()

        assert run_async(go()) == (None, None)

    def test_void_put_returns_none(self, make_async_client, fake_api) -> None:
        """Acknowledge-only PUT resolves to None."""
        fake_api.queue(httpx.Response(200, json={"status": "accepted"}))

        async def go():
            async with make_async_client() as client:
                return await client.accept_my_project_invitation(9)

        assert run_async(go()) is None
        assert fake_api.last.method == "PUT"


class TestAsyncRetry:
    """Async retry and error mapping."""

    def test_500_500_200(self, make_async_client, fake_api, sleeps) -> None:
        """Async client recovers after two 500s."""
        fake_api.queue(
            httpx.Response(500),
            httpx.Response(500),
            httpx.Response(200, json={"ok": True}),
        )

        async def go():
            async with make_async_client(backoff_max_tries=2) as client:
                return await client.verify_token()

        assert run_async(go()) == {"ok": True}
        assert sleeps == [1.0, 2.0]

    def test_exhausted_retries_raise(self, make_async_client, fake_api, sleeps) -> None:
        """Exhausted retries raise ServerError."""
        fake_api.queue(httpx.Response(500, json={"error": "broken"}))

        async def go():
            async with make_async_client(backoff_max_tries=1) as client:
                return await client.verify_token()

        with pytest.raises(ServerError) as exc_info:
            run_async(go())
        assert exc_info.value.code == 500
        assert len(fake_api.requests) == 2

    def test_404_not_retried(self, make_async_client, fake_api, sleeps) -> None:
        """404 should NOT be retried."""
        fake_api.queue(httpx.Response(404, json={"error": "missing", "code": "notFound"}))

        async def go():
            async with make_async_client() as client:
                return await client.get_user("nobody@example.com")

        with pytest.raises(NotFoundError):
            run_async(go())
        assert sleeps == []

    def test_network_error_retried(self, make_async_client, fake_api, sleeps) -> None:
        """Network errors are retried, then raised with code 0."""
        request = httpx.Request("GET", API_URL)
        fake_api.queue(httpx.ConnectError("refused", request=request))

        async def go():
            async with make_async_client(backoff_max_tries=1) as client:
                return await client.verify_token()

        with pytest.raises(ClientError) as exc_info:
            run_async(go())
        assert exc_info.value.code == 0
        assert sleeps == [1.0]

    def test_maintenance(self, make_async_client, fake_api, sleeps) -> None:
        """503 raises MaintenanceError."""
        fake_api.queue(httpx.Response(503, json={"reason": "Upgrade"}, headers={"Retry-After": "30"}))

        async def go():
            async with make_async_client(backoff_max_tries=0) as client:
                return await client.list_maintainers()

        with pytest.raises(MaintenanceError) as exc_info:
            run_async(go())
        assert exc_info.value.retry_after == 30
        assert exc_info.value.message == "Upgrade"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

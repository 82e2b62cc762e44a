"""Shared test fixtures for Manage API SDK tests.

Every client is wired to an ``httpx.MockTransport``; no network calls.
"""

from __future__ import annotations

import json
from typing import Any, Callable, List, Union

import httpx
import pytest

from manage_api_sdk import AsyncManageClient, ManageClient
from manage_api_sdk import async_client as async_client_module
from manage_api_sdk import client as client_module
from manage_api_sdk.config import ENV_BACKOFF_MAX_TRIES, ENV_TOKEN, ENV_URL, ENV_USER_AGENT

API_URL = "https://manage.example.test"
API_TOKEN = "test-manage-token"

Reply = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


class FakeApi:
    """Replays queued replies and records every request it receives.

    The last queued reply is repeated once the queue runs dry.
    """

    def __init__(self) -> None:
        self.replies: List[Reply] = []
        self.requests: List[httpx.Request] = []

    def queue(self, *replies: Reply) -> "FakeApi":
        self.replies.extend(replies)
        return self

    def _next(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            return httpx.Response(200, json={})
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(request)
        return reply

    def handler(self, request: httpx.Request) -> httpx.Response:
        return self._next(request)

    async def async_handler(self, request: httpx.Request) -> httpx.Response:
        return self._next(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture(autouse=True)
def _clean_manage_env(monkeypatch):
    """Hide any KBC_MANAGE_API_* settings from the developer's shell."""
    for var in (ENV_URL, ENV_TOKEN, ENV_BACKOFF_MAX_TRIES, ENV_USER_AGENT):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def sleeps(monkeypatch) -> List[float]:
    """Record backoff sleeps instead of waiting."""
    recorded: List[float] = []

    def fake_sleep(seconds: float) -> None:
        recorded.append(seconds)

    async def fake_async_sleep(seconds: float) -> None:
        recorded.append(seconds)

    monkeypatch.setattr(client_module.time, "sleep", fake_sleep)
    monkeypatch.setattr(async_client_module.asyncio, "sleep", fake_async_sleep)
    return recorded


@pytest.fixture
def make_client(fake_api, sleeps):
    """Factory for a ManageClient backed by ``fake_api``."""
    clients: List[ManageClient] = []

    def _make(**kwargs) -> ManageClient:
        kwargs.setdefault("url", API_URL)
        kwargs.setdefault("token", API_TOKEN)
        client = ManageClient(transport=httpx.MockTransport(fake_api.handler), **kwargs)
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()


@pytest.fixture
def make_async_client(fake_api, sleeps):
    """Factory for an AsyncManageClient backed by ``fake_api``."""

    def _make(**kwargs) -> AsyncManageClient:
        kwargs.setdefault("url", API_URL)
        kwargs.setdefault("token", API_TOKEN)
        return AsyncManageClient(transport=httpx.MockTransport(fake_api.async_handler), **kwargs)

    return _make

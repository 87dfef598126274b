"""Shared fakes for the cache tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from route_cache.context import CacheContext
from route_cache.log import CacheLogger


class FakeStore:
    """In-memory CacheStore with AsyncMock get/set for call assertions."""

    def __init__(self, data: dict[str, str] | None = None, ready: bool = True) -> None:
        self.data = dict(data or {})
        self.is_ready = ready
        self.get = AsyncMock(side_effect=lambda key: self.data.get(key))
        self.set = AsyncMock(side_effect=self._set)
        self.health_check = AsyncMock(side_effect=lambda: self.is_ready)

    def _set(self, key: str, value: str, ttl: int) -> None:
        self.data[key] = value


class FakeRequest:
    """Minimal CacheRequest."""

    def __init__(
        self,
        url: str = "/users",
        method: str = "GET",
        cookies: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.url = url
        self.method = method
        self.cookies = cookies or {}
        self.headers = headers or {}


class RecordingSink:
    """ResponseSink that records every call."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.raw: list[Any] = []
        self.structured: list[Any] = []

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    async def write_raw(self, body: Any) -> None:
        self.raw.append(body)

    async def write_structured(self, body: Any) -> None:
        self.structured.append(body)


@pytest.fixture
def store():
    """A ready, empty fake store."""
    return FakeStore()


@pytest.fixture
def logger():
    """Cache logger at debug level."""
    return CacheLogger(level="debug")


@pytest.fixture
def context(store, logger):
    """Cache context around the fake store."""
    return CacheContext(store=store, logger=logger)


@pytest.fixture
def sink():
    """A recording response sink."""
    return RecordingSink()


@pytest.fixture
def call_next():
    """Continuation that records whether the pipeline continued."""
    return AsyncMock()

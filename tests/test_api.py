"""
Tests for the FastAPI integration and the demo API.
"""

import pytest
from conftest import FakeStore
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from route_cache.api.app import USERS, app, cached
from route_cache.api.router import CachedRouter
from route_cache.context import CacheContext
from route_cache.entities import AlwaysCache, RouteConfig
from route_cache.log import CacheLogger
from route_cache.protocols import ResponseSink


@pytest.fixture
def store():
    """Fake store shared by the demo routes."""
    return FakeStore()


@pytest.fixture
def client(store):
    """Test client with the demo routes bound to a fake store."""
    context = CacheContext(store=store, logger=CacheLogger(level="silent"))
    cached.bind(context)
    app.state.cache_context = context
    yield TestClient(app)
    cached.bind(None)
    del app.state.cache_context


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Route Cache API"
    assert "/users" in data["endpoints"]["cached"]


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["cache_ready"] is True


def test_health_store_down(client, store):
    """Test health reports 503 when the store is not ready."""
    store.is_ready = False
    response = client.get("/health")
    assert response.status_code == 503


def test_health_store_unreachable(client, store):
    """Test health reports 503 when the store stops answering PING."""
    store.health_check.side_effect = lambda: False
    response = client.get("/health")
    assert response.status_code == 503
    store.health_check.assert_awaited_once()


def test_users_miss_then_hit(client, store):
    """Test the second request is served from the cache."""
    first = client.get("/users")
    assert first.status_code == 200
    assert first.json() == USERS
    assert "x-cache" not in first.headers
    store.set.assert_awaited_once()
    assert store.set.await_args.args[0] == "cache:GET:/users"
    assert store.set.await_args.args[2] == 120

    second = client.get("/users")
    assert second.status_code == 200
    assert second.headers["x-cache"] == "HIT"
    assert second.json() == USERS
    assert store.set.await_count == 1


def test_search_cached_per_url(client, store):
    """Test raw bodies are replayed byte for byte, keyed by URL."""
    first = client.get("/search?q=ad")
    second = client.get("/search?q=ad")
    other = client.get("/search?q=li")

    assert first.text == second.text == "Ada"
    assert second.headers["x-cache"] == "HIT"
    assert other.text == "Linus"
    assert "x-cache" not in other.headers
    assert set(store.data) == {"cache:GET:/search?q=ad", "cache:GET:/search?q=li"}


def test_profile_without_token_not_cached(client, store):
    """Test per-auth-token routes pass through without a token."""
    client.get("/profile")
    response = client.get("/profile")

    assert "x-cache" not in response.headers
    store.get.assert_not_called()


def test_profile_with_token(client, store):
    """Test per-auth-token routes are partitioned by the Authorization header."""
    client.get("/profile", headers={"Authorization": "Bearer abcd"})
    response = client.get("/profile", headers={"Authorization": "Bearer abcd"})

    assert response.headers["x-cache"] == "HIT"
    assert "cache:GET:/profile:Bearer abcd" in store.data


def test_cart_cookie(client, store):
    """Test per-custom-cookie routes are partitioned by cartId."""
    client.cookies.set("cartId", "c1")
    client.get("/cart")
    response = client.get("/cart")

    assert response.headers["x-cache"] == "HIT"
    assert response.json() == {"cart_id": "c1", "items": []}


def test_time_never_cached(client, store):
    """Test routes without a policy never touch the store."""
    client.get("/time")
    client.get("/time")

    store.get.assert_not_called()
    store.set.assert_not_called()


def test_unbound_router_passes_through():
    """Test routes serve uncached until the router is bound."""
    router = CachedRouter()
    calls = []

    @router.route(RouteConfig("GET", "/items", AlwaysCache()))
    async def items(request: Request, response: ResponseSink) -> None:
        calls.append(request.url.path)
        await response.write_structured({"items": [1]})

    test_app = FastAPI()
    test_app.include_router(router.router)
    client = TestClient(test_app)

    assert client.get("/items").json() == {"items": [1]}
    assert client.get("/items").json() == {"items": [1]}
    assert len(calls) == 2


def test_handler_without_body():
    """Test a handler that writes nothing returns an empty 200."""
    router = CachedRouter()
    store = FakeStore()

    @router.route(RouteConfig("GET", "/empty", AlwaysCache()))
    async def empty(request: Request, response: ResponseSink) -> None:
        response.set_status(200)

    router.bind(CacheContext(store=store, logger=CacheLogger(level="silent")))
    test_app = FastAPI()
    test_app.include_router(router.router)

    response = TestClient(test_app).get("/empty")

    assert response.status_code == 200
    assert response.content == b""
    store.set.assert_not_called()

"""Response cache interceptor.

Builds per-route middleware that replays stored bodies on a hit and
captures the handler's body on a miss. Caching problems never reach
the caller: every failure degrades to serving the request uncached.
"""

import json
from typing import Any

from route_cache.config import settings
from route_cache.context import CacheContext
from route_cache.entities import RouteConfig
from route_cache.log import CacheLogger
from route_cache.protocols import CacheRequest, CacheStore, CallNext, Middleware, ResponseSink
from route_cache.services.key_deriver import derive_key

CACHE_HEADER = "X-Cache"
CACHE_HIT = "HIT"


def serialize_body(body: Any) -> str:
    """Serialize a response body to the text form kept in the store."""
    if isinstance(body, str):
        return body
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode()
    return json.dumps(body, separators=(",", ":"))


def looks_structured(value: str) -> bool:
    """Guess whether a stored body was written as JSON."""
    return value.startswith("{") or value.startswith("[")


def resolve_ttl(route: RouteConfig) -> int:
    """TTL for a route's entries: its ``expire``, or the default when falsy."""
    expire = route.cache.expire if route.cache else None
    return expire or settings.cache_default_ttl


class CapturingResponseSink:
    """ResponseSink wrapper that stores whatever body the handler sends.

    Both write entry points are wrapped because the handler's choice is
    unknown in advance. Exactly one is expected to fire; if both fire,
    both bodies are stored and the last one wins.
    """

    def __init__(
        self,
        sink: ResponseSink,
        store: CacheStore,
        key: str,
        ttl: int,
        logger: CacheLogger,
    ) -> None:
        self._sink = sink
        self._store = store
        self._key = key
        self._ttl = ttl
        self._logger = logger

    def set_header(self, name: str, value: str) -> None:
        self._sink.set_header(name, value)

    async def write_raw(self, body: Any) -> None:
        if self._store.is_ready:
            value = self._serialize(body)
            if value is not None:
                body = value
                await self._store_body(value, "Data")
        await self._sink.write_raw(body)

    async def write_structured(self, body: Any) -> None:
        if self._store.is_ready:
            value = self._serialize(body)
            if value is not None:
                await self._store_body(value, "JSON data")
        # The caller gets the original value, only the stored copy is text
        await self._sink.write_structured(body)

    def _serialize(self, body: Any) -> str | None:
        try:
            return serialize_body(body)
        except (TypeError, ValueError) as e:
            # UnicodeDecodeError is a ValueError
            self._logger.log(f"Cannot cache body for key {self._key}: {e}", "error")
            return None

    async def _store_body(self, value: str, kind: str) -> None:
        try:
            await self._store.set(self._key, value, self._ttl)
        except Exception as e:
            self._logger.log(f"Failed to cache data for key {self._key}: {e}", "error")
            return
        self._logger.log(f"{kind} cached for key: {self._key}", "debug")

    def __getattr__(self, name: str) -> Any:
        # Anything beyond the two writes goes straight to the real sink
        return getattr(self._sink, name)


async def _pass_through(request: CacheRequest, response: ResponseSink, call_next: CallNext) -> None:
    await call_next(request, response)


def build_middleware(route: RouteConfig, context: CacheContext | None) -> Middleware:
    """Build the cache middleware for a route.

    Routes without a cache policy get a pass-through. So do all routes
    when the store is missing or not ready at construction time; that
    decision is not revisited later.

    Args:
        route: The route configuration
        context: The cache context created by ``setup_cache``

    Returns:
        An async middleware ``(request, response, call_next)``
    """
    if route.cache is None:
        return _pass_through

    logger = context.logger if context else CacheLogger()
    store = context.store if context else None
    if store is None or not store.is_ready:
        logger.log(
            "Cache store is not initialized. Call setup_cache first. "
            f"Cache will not be applied to {route.method} {route.route}.",
            "error",
        )
        return _pass_through

    ttl = resolve_ttl(route)

    async def cache_middleware(
        request: CacheRequest,
        response: ResponseSink,
        call_next: CallNext,
    ) -> None:
        if not store.is_ready:
            await call_next(request, response)
            return

        key = derive_key(route, request, logger)
        if key is None:
            logger.log("Cache key generation failed. Cache will not be applied.", "warn")
            await call_next(request, response)
            return

        try:
            data = await store.get(key)
        except Exception as e:
            logger.log(f"Cache lookup failed for key {key}: {e}", "error")
            await call_next(request, response)
            return

        if not data:
            logger.log(f"Cache miss for key: {key}", "debug")
            capturing = CapturingResponseSink(response, store, key, ttl, logger)
            await call_next(request, capturing)
            return

        logger.log(f"Cache hit for key: {key}", "debug")
        response.set_header(CACHE_HEADER, CACHE_HIT)
        if looks_structured(data):
            try:
                body = json.loads(data)
            except json.JSONDecodeError:
                await response.write_raw(data)
            else:
                await response.write_structured(body)
        else:
            await response.write_raw(data)

    return cache_middleware


# Short alias mirroring setup_cache / stop_cache
cache = build_middleware

"""Route Cache - per-route HTTP response caching backed by Redis.

This package provides a layered architecture for response caching:

Layers:
    - protocols: Interface contracts (CacheStore, CacheRequest, ResponseSink)
    - repositories: Data access implementations
    - services: Key derivation and the cache interceptor
    - api: FastAPI integration and demo app
    - dto: Route declarations and API contracts
    - entities: Domain models (internal)

Usage:
    ```python
    from route_cache import RouteConfig, AlwaysCache, build_middleware, setup_cache

    context = await setup_cache("redis://localhost:6379", log_level="debug")
    middleware = build_middleware(RouteConfig("GET", "/users", AlwaysCache()), context)
    ```

For FastAPI:
    ```python
    from route_cache.api import CachedRouter, cache_lifespan
    ```
"""

from route_cache.config import get_redis_client, settings
from route_cache.context import CacheContext, setup_cache, stop_cache
from route_cache.dto import RouteDeclaration, load_routes
from route_cache.entities import (
    AlwaysCache,
    CacheSpec,
    PerAuthTokenCache,
    PerCustomCookieCache,
    PerRequestUrlCache,
    RouteConfig,
)
from route_cache.log import CacheLogger
from route_cache.protocols import CacheRequest, CacheStore, ResponseSink
from route_cache.repositories import RedisCacheStore
from route_cache.services import build_middleware, cache, derive_key

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    "CacheLogger",
    # Lifecycle
    "CacheContext",
    "setup_cache",
    "stop_cache",
    # Protocols (interfaces)
    "CacheStore",
    "CacheRequest",
    "ResponseSink",
    # Services
    "build_middleware",
    "cache",
    "derive_key",
    # Repositories (data access)
    "RedisCacheStore",
    # Entities (domain models)
    "AlwaysCache",
    "CacheSpec",
    "PerAuthTokenCache",
    "PerCustomCookieCache",
    "PerRequestUrlCache",
    "RouteConfig",
    # DTOs
    "RouteDeclaration",
    "load_routes",
]

"""Service layer for the caching decision.

Architecture:
    Middleware (interceptor) -> Key deriver
                             -> CacheStore (protocol)

Usage:
    ```python
    from route_cache.services import build_middleware, derive_key

    key = derive_key(route, request)
    middleware = build_middleware(route, context)
    ```
"""

from .interceptor import CapturingResponseSink, build_middleware, cache
from .key_deriver import AUTH_COOKIE_NAMES, AUTH_HEADER_NAMES, derive_key, find_auth_token

__all__ = [
    "AUTH_COOKIE_NAMES",
    "AUTH_HEADER_NAMES",
    "CapturingResponseSink",
    "build_middleware",
    "cache",
    "derive_key",
    "find_auth_token",
]

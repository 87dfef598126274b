"""FastAPI integration for the response cache."""

from .adapters import StarletteCacheRequest, StarletteResponseSink
from .dependencies import CacheContextDep, cache_lifespan, get_cache_context
from .router import CachedRouter

__all__ = [
    "CacheContextDep",
    "CachedRouter",
    "StarletteCacheRequest",
    "StarletteResponseSink",
    "cache_lifespan",
    "get_cache_context",
]

"""Cache context and its setup/teardown lifecycle.

The store handle and the log level are created once at application
startup and passed to every middleware factory call, instead of living
in module globals.

Usage:
    ```python
    from route_cache import build_middleware, setup_cache, stop_cache

    context = await setup_cache("redis://localhost:6379", log_level="debug")
    middleware = build_middleware(route, context)
    ...
    await stop_cache(context)
    ```
"""

from dataclasses import dataclass, field

from route_cache.config import settings
from route_cache.log import CacheLogger, LogLevel
from route_cache.protocols import CacheStore
from route_cache.repositories import RedisCacheStore


@dataclass
class CacheContext:
    """Process-wide cache state shared by all cached routes.

    Attributes:
        store: The key-value store, or None if caching is disabled
        logger: Log sink carrying the cache log level
    """

    store: CacheStore | None
    logger: CacheLogger = field(default_factory=CacheLogger)

    @property
    def is_ready(self) -> bool:
        """Whether the store exists and is ready."""
        return self.store is not None and self.store.is_ready


async def setup_cache(
    redis_url: str | None = None,
    log_level: LogLevel | None = None,
    **redis_options,
) -> CacheContext:
    """Create and connect the Redis store.

    A failed connection is logged and leaves the store not ready, so every
    cached route built from this context serves requests uncached.

    Args:
        redis_url: Redis URL. If None, uses settings.
        log_level: Cache log level. If None, uses settings.
        **redis_options: Extra keyword arguments for ``redis.asyncio.from_url``.

    Returns:
        The cache context to pass to ``build_middleware``
    """
    logger = CacheLogger(level=log_level or settings.cache_log_level)  # type: ignore[arg-type]
    store = RedisCacheStore.create(redis_url=redis_url, logger=logger, **redis_options)
    await store.connect()
    return CacheContext(store=store, logger=logger)


async def stop_cache(context: CacheContext) -> None:
    """Close the store connection.

    Args:
        context: The context returned by ``setup_cache``
    """
    store = context.store
    if store is None:
        return

    close = getattr(store, "close", None)
    if close is not None:
        await close()
    context.logger.log("Redis connection closed")

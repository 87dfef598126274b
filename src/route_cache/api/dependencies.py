"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing the cache context.

Pattern:
    - Context created and stored in app.state during lifespan
    - Cached routes are bound to it before the first request
    - Dependency functions retrieve it from request.app.state
"""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from route_cache.api.router import CachedRouter
from route_cache.config import settings
from route_cache.context import CacheContext, setup_cache, stop_cache


def get_cache_context(request: Request) -> CacheContext:
    """Dependency injection for CacheContext from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CacheContext instance from app.state

    Raises:
        RuntimeError: If the context is not initialized
    """
    context = getattr(request.app.state, "cache_context", None)
    if context is None:
        raise RuntimeError("CacheContext not initialized. Check lifespan setup.")
    return context


def cache_lifespan(
    *routers: CachedRouter,
    redis_url: str | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build a lifespan that owns the cache context.

    Startup connects the store and binds every given router to it;
    shutdown closes the connection.

    Args:
        *routers: Cached routers to bind at startup
        redis_url: Redis URL. If None, uses settings.

    Returns:
        A lifespan callable for ``FastAPI(lifespan=...)``
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        print("Starting cached API...")
        print(f"Redis URL: {redis_url or settings.redis_url}")
        print(f"Cache log level: {settings.cache_log_level}")

        context = await setup_cache(redis_url=redis_url)
        for router in routers:
            router.bind(context)
        app.state.cache_context = context

        print(f"✓ Cache ready: {context.is_ready}")

        yield

        await stop_cache(context)
        del app.state.cache_context
        print("✓ Cache shut down")

    return lifespan


# Type alias for cleaner dependency injection
CacheContextDep = Annotated[CacheContext, Depends(get_cache_context)]

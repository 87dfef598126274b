"""FastAPI router whose endpoints run behind the cache middleware.

Handlers receive the request and a ResponseSink instead of returning a
value, so a cache hit can answer without ever calling them:

    ```python
    cached = CachedRouter()

    @cached.route(RouteConfig("GET", "/users", AlwaysCache(expire=120)))
    async def list_users(request: Request, response: ResponseSink) -> None:
        await response.write_structured([{"id": 1}])

    app.include_router(cached.router)
    ```

Middleware is built by ``bind()``, normally from the lifespan once the
cache context exists. Until then every route serves uncached.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fastapi import APIRouter, Request, Response

from route_cache.api.adapters import StarletteCacheRequest, StarletteResponseSink
from route_cache.context import CacheContext
from route_cache.entities import RouteConfig
from route_cache.protocols import CacheRequest, Middleware, ResponseSink
from route_cache.services import build_middleware

Handler = Callable[[Request, ResponseSink], Awaitable[None]]


@dataclass
class _CachedEndpoint:
    route: RouteConfig
    handler: Handler
    middleware: Middleware | None = None


class CachedRouter:
    """Registers handlers on an APIRouter with per-route response caching."""

    def __init__(self, router: APIRouter | None = None) -> None:
        """Initialize the cached router.

        Args:
            router: Router to register endpoints on. If None, creates one.
        """
        self.router = router or APIRouter()
        self._endpoints: list[_CachedEndpoint] = []

    def add_route(self, route: RouteConfig, handler: Handler, **route_kwargs) -> None:
        """Register a handler for a route.

        Args:
            route: Route configuration (method, path and cache policy)
            handler: ``async (request, response_sink) -> None``
            **route_kwargs: Extra arguments for ``APIRouter.add_api_route``
        """
        entry = _CachedEndpoint(route=route, handler=handler)
        self._endpoints.append(entry)

        async def endpoint(request: Request) -> Response:
            sink = StarletteResponseSink()

            async def call_next(_: CacheRequest, response: ResponseSink) -> None:
                await entry.handler(request, response)

            if entry.middleware is None:
                await call_next(StarletteCacheRequest(request), sink)
            else:
                await entry.middleware(StarletteCacheRequest(request), sink, call_next)
            return sink.to_response()

        endpoint.__name__ = handler.__name__
        endpoint.__doc__ = handler.__doc__
        self.router.add_api_route(route.route, endpoint, methods=[route.method], **route_kwargs)

    def route(self, route: RouteConfig, **route_kwargs) -> Callable[[Handler], Handler]:
        """Decorator form of ``add_route``."""

        def decorator(handler: Handler) -> Handler:
            self.add_route(route, handler, **route_kwargs)
            return handler

        return decorator

    def bind(self, context: CacheContext | None) -> None:
        """Build the cache middleware of every registered route.

        Args:
            context: The cache context from ``setup_cache``
        """
        for entry in self._endpoints:
            entry.middleware = build_middleware(entry.route, context)

    @property
    def routes(self) -> list[RouteConfig]:
        """Registered route configurations."""
        return [entry.route for entry in self._endpoints]

import time
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status

from route_cache.api.dependencies import CacheContextDep, cache_lifespan
from route_cache.api.router import CachedRouter
from route_cache.config import settings
from route_cache.dto import HealthCheckResponse, load_routes
from route_cache.protocols import ResponseSink

# Route declarations, validated once at import
ROUTES = {
    route.route: route
    for route in load_routes(
        [
            {"method": "GET", "route": "/users", "cache": {"type": "always", "expire": 120}},
            {"method": "GET", "route": "/profile", "cache": {"type": "per-auth-token"}},
            {"method": "GET", "route": "/search", "cache": {"type": "per-request-url", "expire": 30}},
            {
                "method": "GET",
                "route": "/cart",
                "cache": {"type": "per-custom-cookie", "customCookie": "cartId"},
            },
            {"method": "GET", "route": "/time"},
        ]
    )
}

USERS = [
    {"id": 1, "name": "Ada"},
    {"id": 2, "name": "Linus"},
]

cached = CachedRouter()


@cached.route(ROUTES["/users"])
async def list_users(request: Request, response: ResponseSink) -> None:
    """List users (shared cache for every caller)."""
    await response.write_structured(USERS)


@cached.route(ROUTES["/profile"])
async def get_profile(request: Request, response: ResponseSink) -> None:
    """Profile of the caller (cached per auth token)."""
    token = request.headers.get("authorization") or request.cookies.get("jwt") or ""
    await response.write_structured({"token_suffix": token[-4:], "generated_at": time.time()})


@cached.route(ROUTES["/search"])
async def search(request: Request, response: ResponseSink) -> None:
    """Plain-text search results (cached per URL)."""
    query = request.query_params.get("q", "")
    matches = [user["name"] for user in USERS if query.lower() in user["name"].lower()]
    await response.write_raw(", ".join(matches))


@cached.route(ROUTES["/cart"])
async def get_cart(request: Request, response: ResponseSink) -> None:
    """Cart contents (cached per cartId cookie)."""
    await response.write_structured({"cart_id": request.cookies.get("cartId"), "items": []})


@cached.route(ROUTES["/time"])
async def current_time(request: Request, response: ResponseSink) -> None:
    """Server time (never cached)."""
    await response.write_raw(str(time.time()))


app = FastAPI(
    title="Route Cache API",
    description="Per-route response caching with Redis",
    version="0.1.0",
    lifespan=cache_lifespan(cached),
)

app.include_router(cached.router)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Route Cache API",
        "version": "0.1.0",
        "description": "Per-route response caching with Redis",
        "endpoints": {
            "cached": [route.route for route in cached.routes],
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(context: CacheContextDep) -> HealthCheckResponse:
    """Health check endpoint."""
    if not context.is_ready or not await context.store.health_check():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Cache store is not reachable",
        )
    return HealthCheckResponse(
        status="healthy",
        cache_ready=True,
        log_level=context.logger.level,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "route_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )

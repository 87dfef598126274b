"""Data Transfer Objects for declarations and API contracts.

These Pydantic models validate external input (route declarations) and
define the demo API's responses.

Internal logic should use entities from the entities package.
"""

from .responses import HealthCheckResponse
from .routes import (
    AlwaysCachePolicy,
    CachePolicy,
    PerAuthTokenCachePolicy,
    PerCustomCookieCachePolicy,
    PerRequestUrlCachePolicy,
    RouteDeclaration,
    load_routes,
)

__all__ = [
    "AlwaysCachePolicy",
    "CachePolicy",
    "HealthCheckResponse",
    "PerAuthTokenCachePolicy",
    "PerCustomCookieCachePolicy",
    "PerRequestUrlCachePolicy",
    "RouteDeclaration",
    "load_routes",
]

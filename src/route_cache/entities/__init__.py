"""Domain entities for internal representation.

These are pure dataclasses (frozen) used by the key deriver and the
interceptor. They are NOT used for parsing declarations - use DTOs
from the dto package for that.
"""

from .route import (
    AlwaysCache,
    CacheSpec,
    PerAuthTokenCache,
    PerCustomCookieCache,
    PerRequestUrlCache,
    RouteConfig,
)

__all__ = [
    "AlwaysCache",
    "CacheSpec",
    "PerAuthTokenCache",
    "PerCustomCookieCache",
    "PerRequestUrlCache",
    "RouteConfig",
]

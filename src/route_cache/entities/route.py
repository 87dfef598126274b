"""Route configuration domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AlwaysCache:
    """One shared cache entry per route, for every caller."""

    expire: int | None = None


@dataclass(frozen=True)
class PerAuthTokenCache:
    """One cache entry per auth token found on the request."""

    expire: int | None = None


@dataclass(frozen=True)
class PerRequestUrlCache:
    """One cache entry per raw request URL (path plus query string)."""

    expire: int | None = None


@dataclass(frozen=True)
class PerCustomCookieCache:
    """One cache entry per value of a named cookie.

    Attributes:
        expire: Time-to-live in seconds (falsy means the default)
        custom_cookie: Name of the cookie that partitions the cache
    """

    expire: int | None = None
    custom_cookie: str | None = None


CacheSpec = AlwaysCache | PerAuthTokenCache | PerRequestUrlCache | PerCustomCookieCache


@dataclass(frozen=True)
class RouteConfig:
    """Static declaration of an endpoint and its cache policy.

    Attributes:
        method: HTTP method, used as a key namespace component
        route: Declared path pattern, used as a key component only
        cache: Cache policy, or None for a pass-through route
    """

    method: str
    route: str
    cache: CacheSpec | None = None

    @property
    def is_cached(self) -> bool:
        """Whether the route has a cache policy."""
        return self.cache is not None

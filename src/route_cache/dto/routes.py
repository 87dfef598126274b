"""Route declaration DTOs.

Lets routes be declared as plain data (a dict, JSON or YAML document)
and validated before being turned into RouteConfig entities.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from route_cache.entities import (
    AlwaysCache,
    CacheSpec,
    PerAuthTokenCache,
    PerCustomCookieCache,
    PerRequestUrlCache,
    RouteConfig,
)


class _CachePolicyBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    expire: int | None = Field(
        None,
        description="Time-to-live in seconds (empty or 0 uses the default)",
    )


class AlwaysCachePolicy(_CachePolicyBase):
    """Cache one shared response for every caller."""

    type: Literal["always"]

    def to_entity(self) -> CacheSpec:
        return AlwaysCache(expire=self.expire)


class PerAuthTokenCachePolicy(_CachePolicyBase):
    """Cache one response per auth token."""

    type: Literal["per-auth-token"]

    def to_entity(self) -> CacheSpec:
        return PerAuthTokenCache(expire=self.expire)


class PerRequestUrlCachePolicy(_CachePolicyBase):
    """Cache one response per request URL."""

    type: Literal["per-request-url"]

    def to_entity(self) -> CacheSpec:
        return PerRequestUrlCache(expire=self.expire)


class PerCustomCookieCachePolicy(_CachePolicyBase):
    """Cache one response per value of a named cookie."""

    type: Literal["per-custom-cookie"]
    custom_cookie: str | None = Field(
        None,
        alias="customCookie",
        description="Cookie whose value partitions the cache",
    )

    def to_entity(self) -> CacheSpec:
        return PerCustomCookieCache(expire=self.expire, custom_cookie=self.custom_cookie)


CachePolicy = Annotated[
    AlwaysCachePolicy | PerAuthTokenCachePolicy | PerRequestUrlCachePolicy | PerCustomCookieCachePolicy,
    Field(discriminator="type"),
]


class RouteDeclaration(BaseModel):
    """A route and its optional cache policy, as declared by the application."""

    method: str = Field(..., description="HTTP method", min_length=1)
    route: str = Field(..., description="Declared path pattern", min_length=1)
    cache: CachePolicy | None = Field(None, description="Cache policy (absent = no caching)")

    def to_entity(self) -> RouteConfig:
        """Convert to the internal RouteConfig entity."""
        return RouteConfig(
            method=self.method.upper(),
            route=self.route,
            cache=self.cache.to_entity() if self.cache else None,
        )


_route_list = TypeAdapter(list[RouteDeclaration])


def load_routes(data: list[dict[str, Any]]) -> list[RouteConfig]:
    """Validate a list of route declarations.

    Args:
        data: Route declarations, e.g. ``[{"method": "GET", "route": "/users",
            "cache": {"type": "always", "expire": 120}}]``

    Returns:
        The corresponding RouteConfig entities

    Raises:
        pydantic.ValidationError: If a declaration is malformed
    """
    return [declaration.to_entity() for declaration in _route_list.validate_python(data)]

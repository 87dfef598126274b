"""Cache key derivation.

Maps a route's cache policy and an incoming request to the key its
response is stored under, or None when the request cannot be cached.
Keys have the shape ``cache:<method>:<suffix>``.
"""

from collections.abc import Mapping
from typing import assert_never

from route_cache.entities import (
    AlwaysCache,
    PerAuthTokenCache,
    PerCustomCookieCache,
    PerRequestUrlCache,
    RouteConfig,
)
from route_cache.log import CacheLogger
from route_cache.protocols import CacheRequest

AUTH_COOKIE_NAMES = (
    "authToken",
    "accessToken",
    "refreshToken",
    "idToken",
    "jwt",
    "token",
    "sessionToken",
    "auth_token",
    "access_token",
    "refresh_token",
    "bearer_token",
)

AUTH_HEADER_NAMES = (
    "Authorization",
    "X-Auth-Token",
    "X-Access-Token",
    "X-Refresh-Token",
    "X-ID-Token",
    "X-API-key",
    "Token",
    "Auth-Token",
)


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    # Plain dicts are case-sensitive
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def find_auth_token(request: CacheRequest) -> str | None:
    """Locate an auth token on the request.

    Cookies are checked first, then headers (case-insensitively), each
    in a fixed order. The first name present wins, even if its value is
    an empty string. The token is never validated.

    Args:
        request: The incoming request

    Returns:
        The token value, or None if no known cookie or header is present
    """
    cookies = request.cookies or {}
    for name in AUTH_COOKIE_NAMES:
        if name in cookies:
            return cookies[name]

    headers = request.headers or {}
    for name in AUTH_HEADER_NAMES:
        value = _get_header(headers, name)
        if value is not None:
            return value

    return None


def derive_key(
    route: RouteConfig,
    request: CacheRequest,
    logger: CacheLogger | None = None,
) -> str | None:
    """Derive the cache key for a request to a route.

    Args:
        route: The route configuration
        request: The incoming request
        logger: Log sink for derivation failures

    Returns:
        The cache key, or None if the request is not cacheable
    """
    logger = logger or CacheLogger()
    method, route_path = route.method, route.route
    spec = route.cache

    if spec is None:
        return None

    match spec:
        case AlwaysCache():
            return f"cache:{method}:{route_path}"
        case PerRequestUrlCache():
            return f"cache:{method}:{request.url}"
        case PerAuthTokenCache():
            token = find_auth_token(request)
            if token is None:
                logger.log(
                    "No auth token found in request. Cache will not be applied. "
                    "Use per-custom-cookie and set your custom cookie name instead.",
                    "warn",
                )
                return None
            return f"cache:{method}:{route_path}:{token}"
        case PerCustomCookieCache(custom_cookie=None | ""):
            logger.log("Custom cookie is not defined for per-custom-cookie cache type.", "error")
            return None
        case PerCustomCookieCache(custom_cookie=cookie_name):
            value = (request.cookies or {}).get(cookie_name) or ""
            if not value:
                logger.log(
                    f'Custom cookie "{cookie_name}" not found in request. Cache will not be applied.',
                    "warn",
                )
                return None
            return f"cache:{method}:{route_path}:{value}"
        case _:
            assert_never(spec)

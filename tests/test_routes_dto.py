"""
Tests for route declaration DTOs.
"""

import pytest
from pydantic import ValidationError

from route_cache.dto import RouteDeclaration, load_routes
from route_cache.entities import (
    AlwaysCache,
    PerAuthTokenCache,
    PerCustomCookieCache,
    PerRequestUrlCache,
    RouteConfig,
)


def test_load_routes_all_variants():
    """Test each policy type maps to its entity."""
    routes = load_routes(
        [
            {"method": "get", "route": "/users", "cache": {"type": "always", "expire": 120}},
            {"method": "GET", "route": "/profile", "cache": {"type": "per-auth-token"}},
            {"method": "GET", "route": "/search", "cache": {"type": "per-request-url"}},
            {
                "method": "GET",
                "route": "/cart",
                "cache": {"type": "per-custom-cookie", "customCookie": "cartId", "expire": 5},
            },
            {"method": "POST", "route": "/orders"},
        ]
    )

    assert routes == [
        RouteConfig("GET", "/users", AlwaysCache(expire=120)),
        RouteConfig("GET", "/profile", PerAuthTokenCache()),
        RouteConfig("GET", "/search", PerRequestUrlCache()),
        RouteConfig("GET", "/cart", PerCustomCookieCache(expire=5, custom_cookie="cartId")),
        RouteConfig("POST", "/orders"),
    ]
    assert not routes[-1].is_cached


def test_custom_cookie_is_optional():
    """Test a missing cookie name parses (it is reported at request time)."""
    declaration = RouteDeclaration.model_validate(
        {"method": "GET", "route": "/cart", "cache": {"type": "per-custom-cookie"}}
    )

    assert declaration.to_entity().cache == PerCustomCookieCache()


def test_custom_cookie_by_field_name():
    """Test the snake_case field name is accepted too."""
    declaration = RouteDeclaration.model_validate(
        {"method": "GET", "route": "/cart", "cache": {"type": "per-custom-cookie", "custom_cookie": "c"}}
    )

    assert declaration.to_entity().cache == PerCustomCookieCache(custom_cookie="c")


def test_unknown_type_rejected():
    """Test an unknown policy type fails validation."""
    with pytest.raises(ValidationError):
        load_routes([{"method": "GET", "route": "/x", "cache": {"type": "per-moon-phase"}}])


def test_empty_route_rejected():
    """Test method and route are required."""
    with pytest.raises(ValidationError):
        load_routes([{"method": "", "route": "/x"}])

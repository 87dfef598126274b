"""HTTP pipeline protocols.

The interceptor does not depend on a web framework. It sees the
incoming request through ``CacheRequest`` and the outgoing response
through ``ResponseSink``. Adapters for FastAPI live in ``route_cache.api``.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheRequest(Protocol):
    """The request attributes used for cache key derivation."""

    @property
    def method(self) -> str:
        """HTTP method of the request."""
        ...

    @property
    def url(self) -> str:
        """Raw path plus query string, e.g. ``/search?q=1``."""
        ...

    @property
    def cookies(self) -> Mapping[str, str]:
        """Request cookies by name."""
        ...

    @property
    def headers(self) -> Mapping[str, str]:
        """Request headers. Lookups must be case-insensitive."""
        ...


@runtime_checkable
class ResponseSink(Protocol):
    """Outgoing response with two write entry points.

    A handler produces its body through exactly one of ``write_raw``
    (pre-serialized text) or ``write_structured`` (JSON-serializable
    values). The interceptor wraps both on a cache miss.
    """

    def set_header(self, name: str, value: str) -> None:
        """Set a response header."""
        ...

    async def write_raw(self, body: Any) -> None:
        """Send a raw body (usually ``str`` or ``bytes``)."""
        ...

    async def write_structured(self, body: Any) -> None:
        """Send a structured body, serialized as JSON."""
        ...


# Downstream continuation: runs the handler with the (possibly wrapped) sink
CallNext = Callable[[CacheRequest, ResponseSink], Awaitable[None]]

# Middleware signature returned by the interceptor factory
Middleware = Callable[[CacheRequest, ResponseSink, CallNext], Awaitable[None]]

"""Cache storage protocol.

Defines the interface for the key-value store that holds cached
response bodies. The interceptor only needs three things from it:
a readiness flag, a read and a write with expiry.

Implementations can include:
- Redis (default)
- Memcached
- Any other key-value store with per-key expiry
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for response cache storage backends.

    Any type that implements these members satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from route_cache.protocols import CacheStore

        store: CacheStore = RedisCacheStore.create()
        ```
    """

    @property
    def is_ready(self) -> bool:
        """Whether the store is connected and able to serve commands.

        Returns:
            True if ready, False otherwise
        """
        ...

    async def get(self, key: str) -> str | None:
        """Read a cached body.

        Args:
            key: The cache key

        Returns:
            The stored body, or None if absent or expired
        """
        ...

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store a body with an expiry.

        Args:
            key: The cache key
            value: The serialized response body
            ttl: Time-to-live in seconds
        """
        ...

"""Redis implementation of CacheStore.

Cached bodies are plain string values written with ``SET key value EX ttl``.
It's the default implementation and satisfies the CacheStore protocol.
"""

import redis.asyncio as redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from route_cache.config import get_redis_client
from route_cache.log import CacheLogger


class RedisCacheStore:
    """Redis implementation of the response cache store.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    The store is not ready until ``connect()`` has succeeded, and stops
    being ready after ``close()`` or a lost connection. It never reconnects
    on its own.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        logger: CacheLogger | None = None,
    ) -> None:
        """Initialize the Redis cache store.

        Args:
            redis_client: asyncio Redis client instance. If None, creates default.
            logger: Log sink for connection events.
        """
        self._client = redis_client or get_redis_client()
        self._logger = logger or CacheLogger()
        self._ready = False

    @classmethod
    def create(
        cls,
        redis_url: str | None = None,
        logger: CacheLogger | None = None,
        **redis_options,
    ) -> "RedisCacheStore":
        """Factory method to create RedisCacheStore with defaults.

        Args:
            redis_url: Redis URL. If None, uses settings.
            logger: Log sink for connection events.
            **redis_options: Extra keyword arguments for ``redis.asyncio.from_url``.

        Returns:
            Configured (not yet connected) RedisCacheStore
        """
        return cls(
            redis_client=get_redis_client(redis_url, **redis_options),
            logger=logger,
        )

    async def connect(self) -> bool:
        """Open the connection and mark the store ready.

        Returns:
            True if Redis answered PING, False otherwise
        """
        try:
            await self._client.ping()
        except (RedisError, OSError) as e:
            self._ready = False
            self._logger.log(f"Redis client error: {e}", "error")
            return False

        self._ready = True
        self._logger.log("Connected to Redis")
        return True

    async def close(self) -> None:
        """Close the connection. The store is not ready afterwards."""
        self._ready = False
        await self._client.aclose()

    @property
    def is_ready(self) -> bool:
        """Whether the store is connected and has not lost its connection."""
        return self._ready

    async def get(self, key: str) -> str | None:
        """Read a cached body.

        Args:
            key: The cache key

        Returns:
            The stored body, or None if absent or expired
        """
        try:
            value = await self._client.get(key)
        except RedisConnectionError as e:
            self._connection_lost(e)
            raise
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store a body with an expiry.

        Args:
            key: The cache key
            value: The serialized response body
            ttl: Time-to-live in seconds
        """
        try:
            await self._client.set(key, value, ex=ttl)
        except RedisConnectionError as e:
            self._connection_lost(e)
            raise

    def _connection_lost(self, error: Exception) -> None:
        self._ready = False
        self._logger.log(f"Redis client error: {error}", "error")

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            result = await self._client.ping()
            return bool(result)
        except (RedisError, OSError):
            return False

"""Repository layer for data access.

This layer hides the key-value store behind the CacheStore protocol.
The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required members will satisfy the protocol.
"""

from route_cache.protocols import CacheStore

from .redis_repository import RedisCacheStore

__all__ = [
    "CacheStore",
    "RedisCacheStore",
]

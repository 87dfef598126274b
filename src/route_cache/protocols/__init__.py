"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → Memcached, FastAPI → other frameworks)
- Unit testing with mock implementations
- Clear separation of concerns

Usage:
    ```python
    from route_cache.protocols import CacheStore, ResponseSink

    # Type hints work with any implementation
    store: CacheStore = RedisCacheStore.create()  # works
    store: CacheStore = FakeStore()               # also works
    ```
"""

from .cache_store import CacheStore
from .http import CacheRequest, CallNext, Middleware, ResponseSink

__all__ = [
    "CacheStore",
    "CacheRequest",
    "CallNext",
    "Middleware",
    "ResponseSink",
]

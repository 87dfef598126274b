import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("normal", "debug", "silent")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Cache
    cache_log_level: str = os.getenv("CACHE_LOG_LEVEL", "normal")
    cache_default_ttl: int = int(os.getenv("CACHE_DEFAULT_TTL", "60"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_log_level not in LOG_LEVELS:
            raise ValueError(
                f"CACHE_LOG_LEVEL must be one of {list(LOG_LEVELS)}, "
                f"got {self.cache_log_level!r}"
            )

        if self.cache_default_ttl < 1:
            raise ValueError("CACHE_DEFAULT_TTL must be at least 1 second")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client(redis_url: str | None = None, **options) -> redis.Redis:
    """Create an asyncio Redis client instance.

    Values come back decoded so cached bodies are plain ``str``.
    """
    options.setdefault("password", settings.redis_password)
    options.setdefault("decode_responses", True)
    return redis.from_url(redis_url or settings.redis_url, **options)

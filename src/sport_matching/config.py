import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
import redis.asyncio
from dotenv import load_dotenv

load_dotenv()

CACHE_BACKENDS = ("memory", "redis")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Match cache
    match_cache_backend: str = os.getenv("MATCH_CACHE_BACKEND", "memory")
    match_cache_ttl: int = int(os.getenv("MATCH_CACHE_TTL", "120"))  # 2 minutes
    match_cache_prefix: str = os.getenv("MATCH_CACHE_PREFIX", "matches")

    # Profiles
    profile_store_backend: str = os.getenv("PROFILE_STORE_BACKEND", "memory")
    profile_key_prefix: str = os.getenv("PROFILE_KEY_PREFIX", "user")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def uses_redis(self) -> bool:
        """Check if any component is configured to talk to Redis."""
        return "redis" in (self.match_cache_backend, self.profile_store_backend)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.match_cache_ttl <= 0:
            raise ValueError("MATCH_CACHE_TTL must be a positive number of seconds")

        if self.match_cache_backend not in CACHE_BACKENDS:
            raise ValueError(
                f"MATCH_CACHE_BACKEND must be one of {list(CACHE_BACKENDS)}, "
                f"got {self.match_cache_backend!r}"
            )

        if self.profile_store_backend not in CACHE_BACKENDS:
            raise ValueError(
                f"PROFILE_STORE_BACKEND must be one of {list(CACHE_BACKENDS)}, "
                f"got {self.profile_store_backend!r}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the API process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )


def get_async_redis_client() -> redis.asyncio.Redis:
    """Create an asyncio Redis client instance."""
    return redis.asyncio.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )

"""Redis client configuration for the session and course caches."""

from typing import Annotated

from fastapi import Depends
from redis import Redis

from lms.config import Settings, get_settings

# Module-level singleton (application-scoped)
_client: Redis | None = None


def initialize_cache(settings: Settings) -> None:
    """Create the Redis client once at startup.

    The client connects lazily, so startup does not fail when Redis is down;
    the first cache call does.
    """
    global _client  # noqa: PLW0603
    _client = Redis.from_url(settings.REDIS_URL, decode_responses=True)


def close_cache() -> None:
    """Close the Redis connection pool on shutdown."""
    global _client  # noqa: PLW0603
    if _client is not None:
        _client.close()
        _client = None


def get_cache(settings: Annotated[Settings, Depends(get_settings)]) -> Redis:
    """Get the Redis client (returns singleton)."""
    if _client is None:
        initialize_cache(settings)

    if _client is None:
        raise RuntimeError("Failed to initialize cache client.")

    return _client


# Type alias for cache dependency
CacheClient = Annotated[Redis, Depends(get_cache)]

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from lms.cache import CacheClient
from lms.core import container
from lms.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession, CacheClient], T]:
    """
    Create a FastAPI dependency for a container provider.

    Overrides container.db and container.cache with the request-scoped
    database session and the Redis client while the provider builds.
    """

    def dependency(db: DatabaseSession, cache: CacheClient) -> T:
        try:
            container.db.override(db)
            container.cache.override(cache)
            return provider()
        finally:
            container.db.reset_override()
            container.cache.reset_override()

    return dependency

"""Read-through cache for the public course projections."""

import logging

from redis import Redis

from lms.config import Settings, get_settings

logger = logging.getLogger(__name__)

ALL_COURSES_KEY = "courses"


def course_key(course_id: int) -> str:
    return f"course-{course_id}"


class RedisCourseCache:
    """Stores serialized course payloads; values are JSON strings."""

    def __init__(self, cache: Redis, settings: Settings | None = None) -> None:
        self.cache = cache
        self.ttl_seconds = (settings or get_settings()).COURSE_CACHE_TTL_SECONDS

    def get_course(self, course_id: int) -> str | None:
        return self.cache.get(course_key(course_id))

    def set_course(self, course_id: int, payload: str) -> None:
        self.cache.set(course_key(course_id), payload, ex=self.ttl_seconds)

    def get_courses(self) -> str | None:
        return self.cache.get(ALL_COURSES_KEY)

    def set_courses(self, payload: str) -> None:
        self.cache.set(ALL_COURSES_KEY, payload, ex=self.ttl_seconds)

    def invalidate(self, course_id: int | None = None) -> None:
        """Drop the list entry and, when given, one course's entry."""
        keys = [ALL_COURSES_KEY]
        if course_id is not None:
            keys.append(course_key(course_id))
        self.cache.delete(*keys)
        logger.debug(f"Invalidated course cache keys: {keys}")

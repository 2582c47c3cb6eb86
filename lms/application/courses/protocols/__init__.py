from .course_cache import CourseCacheProtocol
from .course_repository import CourseRepositoryProtocol

__all__ = [
    "CourseCacheProtocol",
    "CourseRepositoryProtocol",
]

"""Use case for course reads, public and enrolled."""

import structlog
from pydantic import TypeAdapter

from lms.application.courses.protocols.course_cache import CourseCacheProtocol
from lms.application.courses.protocols.course_repository import CourseRepositoryProtocol
from lms.application.identity.protocols.user_repository import UserRepositoryProtocol
from lms.domain.courses.exceptions import CourseNotFoundError, CourseNotPurchasedError
from lms.infrastructure.courses.schemas import CoursePreview
from lms.models import CourseContent

logger = structlog.get_logger(__name__)

preview_list_adapter = TypeAdapter(list[CoursePreview])


class CourseQueryUseCase:
    """
    Read-through cached public course projections plus enrolled-only content.

    The cached value is the serialized projection itself, so a cache hit
    decodes to exactly what a miss would have built.
    """

    def __init__(
        self,
        course_repository: CourseRepositoryProtocol,
        course_cache: CourseCacheProtocol,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        self.course_repository = course_repository
        self.course_cache = course_cache
        self.user_repository = user_repository

    def get_course_preview(self, course_id: int) -> CoursePreview:
        """
        Get the public projection of one course.

        Raises:
            CourseNotFoundError: If the course does not exist
        """
        cached = self.course_cache.get_course(course_id)
        if cached is not None:
            logger.debug("course_cache_hit", course_id=course_id)
            return CoursePreview.model_validate_json(cached)

        course = self.course_repository.find_by_id(course_id)
        if not course:
            raise CourseNotFoundError(course_id)

        preview = CoursePreview.model_validate(course)
        self.course_cache.set_course(course_id, preview.model_dump_json(by_alias=True))
        logger.debug("course_cache_miss", course_id=course_id)

        return preview

    def get_course_previews(self) -> list[CoursePreview]:
        """Public projections of all courses, newest first."""
        cached = self.course_cache.get_courses()
        if cached is not None:
            logger.debug("courses_cache_hit")
            return preview_list_adapter.validate_json(cached)

        previews = [
            CoursePreview.model_validate(course) for course in self.course_repository.list_recent()
        ]
        self.course_cache.set_courses(
            preview_list_adapter.dump_json(previews, by_alias=True).decode()
        )
        logger.debug("courses_cache_miss", count=len(previews))

        return previews

    def get_course_content(self, course_id: int, user_id: int) -> list[CourseContent]:
        """
        Get the full content list of a course the user is enrolled in.

        Raises:
            CourseNotPurchasedError: If the user is not enrolled
            CourseNotFoundError: If the course no longer exists
        """
        if not self.user_repository.is_enrolled(user_id, course_id):
            raise CourseNotPurchasedError

        course = self.course_repository.find_by_id(course_id)
        if not course:
            raise CourseNotFoundError(course_id)

        return list(course.course_data)

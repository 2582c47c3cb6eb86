"""Use case for admin course management."""

from typing import Any

import structlog

from lms.application.common.protocols.media_storage import MediaStorageProtocol
from lms.application.courses.protocols.course_cache import CourseCacheProtocol
from lms.application.courses.protocols.course_repository import CourseRepositoryProtocol
from lms.domain.courses.exceptions import CourseNotFoundError
from lms.models import Course, CourseContent

logger = structlog.get_logger(__name__)

THUMBNAIL_FOLDER = "courses"

COURSE_FIELDS = (
    "name",
    "description",
    "price",
    "estimated_price",
    "tags",
    "level",
    "demo_url",
    "benefits",
    "prerequisites",
)

CONTENT_FIELDS = (
    "title",
    "description",
    "video_url",
    "video_thumbnail",
    "video_section",
    "video_length",
    "video_player_url",
    "links",
    "suggestions",
)


class CourseManagementUseCase:
    """
    Create, edit and delete courses.

    Every mutation drops the cached public projections of the course.
    """

    def __init__(
        self,
        course_repository: CourseRepositoryProtocol,
        course_cache: CourseCacheProtocol,
        media_storage: MediaStorageProtocol,
    ) -> None:
        self.course_repository = course_repository
        self.course_cache = course_cache
        self.media_storage = media_storage

    def list_courses(self) -> list[Course]:
        """All courses with full content, newest first."""
        return self.course_repository.list_recent()

    def get_course(self, course_id: int) -> Course:
        course = self.course_repository.find_by_id(course_id)
        if not course:
            raise CourseNotFoundError(course_id)
        return course

    def create_course(self, data: dict[str, Any]) -> Course:
        """
        Create a course from request data.

        Args:
            data: Course fields in snake_case. `thumbnail` may be a data URL
                to upload or an already stored `{public_id, url}` asset;
                `course_data` is a list of content item dicts.

        Returns:
            The created course
        """
        course = Course(**{field: data[field] for field in COURSE_FIELDS if field in data})
        course.thumbnail = self._resolve_thumbnail(data.get("thumbnail"))
        course.course_data = [
            self._build_content(item, position)
            for position, item in enumerate(data.get("course_data") or [])
        ]

        course = self.course_repository.save(course)
        self.course_cache.invalidate(course.id)

        logger.info("course_created", course_id=course.id, name=course.name)

        return course

    def edit_course(self, course_id: int, data: dict[str, Any]) -> Course:
        """
        Apply a partial update.

        Args:
            course_id: ID of the course to edit
            data: Only the fields being changed. A string `thumbnail` replaces
                the stored image and `None` removes it; `course_data`, when
                present, becomes the new content list.

        Raises:
            CourseNotFoundError: If the course does not exist
        """
        course = self.get_course(course_id)

        for field in COURSE_FIELDS:
            if field in data:
                setattr(course, field, data[field])

        if "thumbnail" in data:
            thumbnail = data["thumbnail"]
            current = (course.thumbnail or {}).get("public_id")
            if not isinstance(thumbnail, dict) or thumbnail.get("public_id") != current:
                self._destroy_thumbnail(course)
            course.thumbnail = self._resolve_thumbnail(thumbnail)

        if data.get("course_data") is not None:
            self._sync_content(course, data["course_data"])

        course = self.course_repository.save(course)
        self.course_cache.invalidate(course.id)

        logger.info("course_updated", course_id=course.id)

        return course

    def delete_course(self, course_id: int) -> None:
        course = self.get_course(course_id)

        self.course_repository.delete(course)
        self.course_cache.invalidate(course_id)

        logger.info("course_deleted", course_id=course_id)

    def _resolve_thumbnail(self, thumbnail: str | dict[str, Any] | None) -> dict[str, Any] | None:
        if isinstance(thumbnail, str):
            return self.media_storage.upload(thumbnail, THUMBNAIL_FOLDER).to_dict()
        return thumbnail

    def _destroy_thumbnail(self, course: Course) -> None:
        if course.thumbnail and course.thumbnail.get("public_id"):
            self.media_storage.destroy(course.thumbnail["public_id"])

    @staticmethod
    def _build_content(item: dict[str, Any], position: int) -> CourseContent:
        content = CourseContent(**{field: item[field] for field in CONTENT_FIELDS if field in item})
        content.position = position
        return content

    def _sync_content(self, course: Course, items: list[dict[str, Any]]) -> None:
        """Update items by id, add new ones, drop the ones no longer listed."""
        existing = {content.id: content for content in course.course_data}
        synced: list[CourseContent] = []

        for position, item in enumerate(items):
            content = existing.get(item.get("id"))
            if content is None:
                synced.append(self._build_content(item, position))
                continue
            for field in CONTENT_FIELDS:
                if field in item:
                    setattr(content, field, item[field])
            content.position = position
            synced.append(content)

        # delete-orphan cascade removes items (and their questions) left out
        course.course_data = synced

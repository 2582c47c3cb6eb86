"""Use case for admin user management."""

import structlog

from lms.application.courses.protocols.course_cache import CourseCacheProtocol
from lms.application.courses.protocols.course_repository import CourseRepositoryProtocol
from lms.application.identity.protocols.session_store import SessionStoreProtocol
from lms.application.identity.protocols.user_repository import UserRepositoryProtocol
from lms.domain.identity.exceptions import UserNotFoundError
from lms.models import User

logger = structlog.get_logger(__name__)


class UserAdminUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        session_store: SessionStoreProtocol,
        course_repository: CourseRepositoryProtocol,
        course_cache: CourseCacheProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.session_store = session_store
        self.course_repository = course_repository
        self.course_cache = course_cache

    def list_users(self) -> list[User]:
        """All users, newest first."""
        return self.user_repository.list_recent()

    def update_role(self, user_id: int, role: str) -> User:
        """
        Change a user's role.

        The cached session is refreshed only when one exists, so the change
        applies to a logged-in user's next request without logging anyone in.
        """
        user = self.user_repository.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)

        user.role = role
        user = self.user_repository.save(user)
        if self.session_store.get(user_id) is not None:
            self.session_store.save(user)
        self._invalidate_reviewed_courses(user_id)

        logger.info("user_role_updated", user_id=user_id, role=role)

        return user

    def delete_user(self, user_id: int) -> None:
        user = self.user_repository.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)

        reviewed = self.course_repository.find_ids_reviewed_by(user_id)
        self.user_repository.delete(user)
        self.session_store.delete(user_id)
        for course_id in reviewed:
            self.course_cache.invalidate(course_id)

        logger.info("user_deleted", user_id=user_id)

    def _invalidate_reviewed_courses(self, user_id: int) -> None:
        for course_id in self.course_repository.find_ids_reviewed_by(user_id):
            self.course_cache.invalidate(course_id)

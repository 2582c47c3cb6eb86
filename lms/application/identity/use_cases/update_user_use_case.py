"""Use case for user profile management."""

import structlog

from lms.application.common.protocols.media_storage import MediaStorageProtocol
from lms.application.courses.protocols.course_cache import CourseCacheProtocol
from lms.application.courses.protocols.course_repository import CourseRepositoryProtocol
from lms.application.identity.protocols.password_service import PasswordServiceProtocol
from lms.application.identity.protocols.session_store import SessionStoreProtocol
from lms.application.identity.protocols.user_repository import UserRepositoryProtocol
from lms.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    PasswordVerificationError,
    UserNotFoundError,
)
from lms.models import User

logger = structlog.get_logger(__name__)

AVATAR_FOLDER = "avatars"


class UpdateUserUseCase:
    """
    Use case for profile operations of the signed-in user.

    Every mutation re-caches the session so the next request sees it. Name
    and avatar changes also drop the cached courses that show the user as a
    review author.
    """

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        session_store: SessionStoreProtocol,
        media_storage: MediaStorageProtocol,
        course_repository: CourseRepositoryProtocol,
        course_cache: CourseCacheProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service
        self.session_store = session_store
        self.media_storage = media_storage
        self.course_repository = course_repository
        self.course_cache = course_cache

    def get_user(self, user_id: int) -> User:
        user = self.user_repository.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def update_info(self, user_id: int, name: str | None = None, email: str | None = None) -> User:
        """
        Update the user's name and/or email.

        Raises:
            UserNotFoundError: If user is not found
            EmailAlreadyExistsError: If the email belongs to another account
        """
        user = self.get_user(user_id)

        if email is not None and email != user.email:
            if self.user_repository.find_by_email(email):
                raise EmailAlreadyExistsError(email, "Email already exists")
            user.email = email

        renamed = False
        if name is not None and name != user.name:
            user.name = name
            renamed = True

        user = self.user_repository.save(user)
        self.session_store.save(user)
        if renamed:
            self._invalidate_reviewed_courses(user_id)

        logger.info("user_profile_updated", user_id=user_id)

        return user

    def update_password(self, user_id: int, old_password: str, new_password: str) -> User:
        """
        Change the password after verifying the current one.

        Raises:
            UserNotFoundError: If user is not found
            PasswordVerificationError: If the account has no password or the
                current password is incorrect
        """
        user = self.get_user(user_id)

        # Social-login accounts have no password to change
        if not user.hashed_password:
            raise PasswordVerificationError("Invalid user")

        if not self.password_service.verify_password(old_password, user.hashed_password):
            raise PasswordVerificationError

        user.hashed_password = self.password_service.hash_password(new_password)
        user = self.user_repository.save(user)
        self.session_store.save(user)

        logger.info("user_password_updated", user_id=user_id)

        return user

    def update_avatar(self, user_id: int, avatar: str) -> User:
        """Replace the stored avatar with a newly uploaded image."""
        user = self.get_user(user_id)

        if user.avatar and user.avatar.get("public_id"):
            self.media_storage.destroy(user.avatar["public_id"])

        user.avatar = self.media_storage.upload(avatar, AVATAR_FOLDER).to_dict()
        user = self.user_repository.save(user)
        self.session_store.save(user)
        self._invalidate_reviewed_courses(user_id)

        logger.info("user_avatar_updated", user_id=user_id)

        return user

    def _invalidate_reviewed_courses(self, user_id: int) -> None:
        for course_id in self.course_repository.find_ids_reviewed_by(user_id):
            self.course_cache.invalidate(course_id)

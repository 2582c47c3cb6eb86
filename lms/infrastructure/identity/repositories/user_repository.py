"""Repository for User models."""

import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lms.domain.identity.exceptions import EmailAlreadyExistsError
from lms.models import Enrollment, User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User models and their course enrollments."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, user_id: int) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(User.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_email(self, email: str) -> User | None:
        """
        Find a user by email.

        Args:
            email: The user's email address

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(User.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_recent(self) -> list[User]:
        stmt = select(User).order_by(User.created_at.desc(), User.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def save(self, user: User) -> User:
        """
        Insert or update a user.

        Raises:
            EmailAlreadyExistsError: If the email belongs to another user
        """
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "email" in str(e.orig):
                raise EmailAlreadyExistsError(user.email) from e
            raise
        self.db.refresh(user)
        logger.info(f"Saved user {user.id} ({user.email})")
        return user

    def delete(self, user: User) -> None:
        user_id = user.id
        self.db.delete(user)
        self.db.commit()
        logger.info(f"Deleted user {user_id}")

    def is_enrolled(self, user_id: int, course_id: int) -> bool:
        stmt = select(Enrollment.id).where(
            Enrollment.user_id == user_id, Enrollment.course_id == course_id
        )
        return self.db.execute(stmt).first() is not None

    def enroll(self, user: User, course_id: int) -> User:
        """Append a course id to the user's enrolled list."""
        user.courses.append(Enrollment(course_id=course_id))
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Enrolled user {user.id} in course {course_id}")
        return user

    def count_created_between(self, start: datetime, end: datetime) -> int:
        stmt = select(func.count(User.id)).where(User.created_at >= start, User.created_at < end)
        return self.db.execute(stmt).scalar_one()

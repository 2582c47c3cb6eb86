"""Repository for courses and their nested threads."""

import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lms.domain.courses.exceptions import AlreadyReviewedError
from lms.models import Comment, Course, CourseContent, Review

logger = logging.getLogger(__name__)


class CourseRepository:
    """
    Repository for Course models.

    Questions, answers, reviews and review replies are stored as rows, so
    appending one never rewrites the rest of the course.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, course_id: int) -> Course | None:
        stmt = select(Course).where(Course.id == course_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_recent(self) -> list[Course]:
        stmt = select(Course).order_by(Course.created_at.desc(), Course.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def save(self, course: Course) -> Course:
        self.db.add(course)
        self.db.commit()
        self.db.refresh(course)
        logger.info(f"Saved course {course.id}")
        return course

    def delete(self, course: Course) -> None:
        course_id = course.id
        self.db.delete(course)
        self.db.commit()
        logger.info(f"Deleted course {course_id}")

    def add_question(self, content: CourseContent, user_id: int, text: str) -> Comment:
        """Append a question node to a content item."""
        question = Comment(user_id=user_id, comment=text)
        content.questions.append(question)
        self.db.commit()
        self.db.refresh(question)
        logger.info(f"Added question {question.id} to content item {content.id}")
        return question

    def add_reply(self, parent: Comment, user_id: int, text: str) -> Comment:
        """Append an answer node under a question."""
        reply = Comment(user_id=user_id, comment=text)
        parent.comment_replies.append(reply)
        self.db.commit()
        self.db.refresh(reply)
        logger.info(f"Added reply {reply.id} to comment {parent.id}")
        return reply

    def add_review(self, course: Course, user_id: int, rating: int, comment: str) -> Review:
        """
        Append a review without committing.

        The course row stays locked until the caller commits, so concurrent
        reviews of one course recompute its rating one at a time.

        Raises:
            AlreadyReviewedError: If the user already reviewed this course
        """
        self.db.execute(select(Course.id).where(Course.id == course.id).with_for_update())
        review = Review(user_id=user_id, rating=rating, comment=comment)
        course.reviews.append(review)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise AlreadyReviewedError from e
        return review

    def review_ratings(self, course_id: int) -> list[int]:
        stmt = select(Review.rating).where(Review.course_id == course_id)
        return list(self.db.execute(stmt).scalars().all())

    def find_ids_reviewed_by(self, user_id: int) -> list[int]:
        """Courses whose reviews or review replies were written by the user."""
        reviews = select(Review.course_id).where(Review.user_id == user_id)
        replies = (
            select(Review.course_id)
            .join(Comment, Comment.review_id == Review.id)
            .where(Comment.user_id == user_id)
        )
        return list(self.db.execute(reviews.union(replies)).scalars().all())

    def add_review_reply(self, review: Review, user_id: int, text: str) -> Comment:
        reply = Comment(user_id=user_id, comment=text)
        review.comment_replies.append(reply)
        self.db.commit()
        self.db.refresh(reply)
        logger.info(f"Added reply {reply.id} to review {review.id}")
        return reply

    def count_created_between(self, start: datetime, end: datetime) -> int:
        stmt = select(func.count(Course.id)).where(
            Course.created_at >= start, Course.created_at < end
        )
        return self.db.execute(stmt).scalar_one()

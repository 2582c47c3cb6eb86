"""Use case for questions, answers, reviews and review replies."""

import structlog

from lms.application.common.protocols.mail_service import MailServiceProtocol
from lms.application.courses.protocols.course_cache import CourseCacheProtocol
from lms.application.courses.protocols.course_repository import CourseRepositoryProtocol
from lms.application.identity.protocols.user_repository import UserRepositoryProtocol
from lms.application.notifications.services.notifier import Notifier
from lms.domain.courses.exceptions import (
    CourseNotFoundError,
    InvalidContentIdError,
    InvalidQuestionIdError,
    ReviewNotAllowedError,
    ReviewNotFoundError,
)
from lms.domain.courses.services.rating_service import CourseRatingService
from lms.models import Course, CourseContent

logger = structlog.get_logger(__name__)


class CourseDiscussionUseCase:
    """Appends comment nodes to a course's question and review threads."""

    def __init__(
        self,
        course_repository: CourseRepositoryProtocol,
        course_cache: CourseCacheProtocol,
        user_repository: UserRepositoryProtocol,
        notifier: Notifier,
        mail_service: MailServiceProtocol,
        rating_service: CourseRatingService,
    ) -> None:
        self.course_repository = course_repository
        self.course_cache = course_cache
        self.user_repository = user_repository
        self.notifier = notifier
        self.mail_service = mail_service
        self.rating_service = rating_service

    def add_question(self, user_id: int, course_id: int, content_id: int, question: str) -> Course:
        """
        Ask a question on a content item.

        Raises:
            CourseNotFoundError: If the course does not exist
            InvalidContentIdError: If the course has no such content item
        """
        course = self._get_course(course_id)
        content = self._find_content(course, content_id)

        self.course_repository.add_question(content, user_id, question)

        self.notifier.notify(
            user_id,
            title="New Question Received",
            message=f"You have a new question in {content.title}",
        )

        logger.info("question_added", course_id=course_id, content_id=content_id, user_id=user_id)

        return course

    def add_answer(
        self, user_id: int, course_id: int, content_id: int, question_id: int, answer: str
    ) -> Course:
        """
        Reply to a question.

        The asker is emailed when someone else answers; answering your own
        question only produces a feed notification.

        Raises:
            CourseNotFoundError: If the course does not exist
            InvalidContentIdError: If the course has no such content item
            InvalidQuestionIdError: If the content item has no such question
        """
        course = self._get_course(course_id)
        content = self._find_content(course, content_id)

        question = next((item for item in content.questions if item.id == question_id), None)
        if question is None:
            raise InvalidQuestionIdError(question_id)

        self.course_repository.add_reply(question, user_id, answer)

        asker = question.user
        if asker is not None and asker.id != user_id:
            self.mail_service.send(
                email=asker.email,
                subject="Question Reply",
                template="question-reply.html",
                data={"user": {"name": asker.name}, "title": content.title},
            )
        else:
            self.notifier.notify(
                user_id,
                title="New Question Reply Received",
                message=f"You have a new question reply in {content.title}",
            )

        logger.info("answer_added", course_id=course_id, question_id=question_id, user_id=user_id)

        return course

    def add_review(self, user_id: int, course_id: int, review: str, rating: int) -> Course:
        """
        Review a course the user is enrolled in and recompute its rating.

        Raises:
            ReviewNotAllowedError: If the user is not enrolled
            CourseNotFoundError: If the course does not exist
            AlreadyReviewedError: If the user already reviewed the course
        """
        if not self.user_repository.is_enrolled(user_id, course_id):
            raise ReviewNotAllowedError

        course = self._get_course(course_id)

        self.course_repository.add_review(course, user_id, rating, review)
        course.ratings = self.rating_service.average(
            self.course_repository.review_ratings(course_id)
        )
        course = self.course_repository.save(course)
        self.course_cache.invalidate(course_id)

        reviewer = self.user_repository.find_by_id(user_id)
        reviewer_name = reviewer.name if reviewer else "A user"
        self.notifier.notify(
            user_id,
            title="New Review Received",
            message=f"{reviewer_name} has given a review in {course.name}",
        )

        logger.info("review_added", course_id=course_id, user_id=user_id, rating=rating)

        return course

    def add_reply_to_review(self, user_id: int, course_id: int, review_id: int, comment: str) -> Course:
        """
        Reply to a review (admin only at the route level).

        Raises:
            CourseNotFoundError: If the course does not exist
            ReviewNotFoundError: If the course has no such review
        """
        course = self._get_course(course_id)

        review = next((item for item in course.reviews if item.id == review_id), None)
        if review is None:
            raise ReviewNotFoundError(review_id)

        self.course_repository.add_review_reply(review, user_id, comment)
        self.course_cache.invalidate(course_id)

        logger.info("review_reply_added", course_id=course_id, review_id=review_id)

        return course

    def _get_course(self, course_id: int) -> Course:
        course = self.course_repository.find_by_id(course_id)
        if not course:
            raise CourseNotFoundError(course_id)
        return course

    @staticmethod
    def _find_content(course: Course, content_id: int) -> CourseContent:
        content = next((item for item in course.course_data if item.id == content_id), None)
        if content is None:
            raise InvalidContentIdError(content_id)
        return content

"""Course domain exceptions."""

from lms.domain.common.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)


class CourseNotFoundError(EntityNotFoundError):
    """Raised when a course cannot be found."""

    def __init__(self, course_id: int | None = None) -> None:
        super().__init__("Course", course_id)


class ReviewNotFoundError(EntityNotFoundError):
    """Raised when a review cannot be found on a course."""

    def __init__(self, review_id: int | None = None) -> None:
        super().__init__("Review", review_id)


class InvalidContentIdError(ValidationError):
    """Raised when no content item of the course has the given id."""

    def __init__(self, content_id: int) -> None:
        super().__init__("Invalid content id", field="contentId", value=content_id)


class InvalidQuestionIdError(ValidationError):
    """Raised when no question of the content item has the given id."""

    def __init__(self, question_id: int) -> None:
        super().__init__("Invalid question id", field="questionId", value=question_id)


class CourseNotPurchasedError(BusinessRuleViolationError):
    """Raised when a non-enrolled user requests course content."""

    def __init__(self) -> None:
        super().__init__("enrolled_only", "Please buy this course to access the content")


class ReviewNotAllowedError(BusinessRuleViolationError):
    """Raised when a non-enrolled user tries to review a course."""

    def __init__(self) -> None:
        super().__init__("enrolled_only", "You are not eligible to access this course")


class AlreadyReviewedError(BusinessRuleViolationError):
    """Raised when a user reviews the same course twice."""

    def __init__(self) -> None:
        super().__init__("one_review_per_user", "You have already reviewed this course")

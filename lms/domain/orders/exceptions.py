"""Order domain exceptions."""

from lms.domain.common.exceptions import BusinessRuleViolationError


class AlreadyEnrolledError(BusinessRuleViolationError):
    """Raised when ordering a course the user is already enrolled in."""

    def __init__(self) -> None:
        super().__init__("single_enrollment", "You are already enrolled in this course")

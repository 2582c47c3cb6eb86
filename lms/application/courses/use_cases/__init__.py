from .course_discussion_use_case import CourseDiscussionUseCase
from .course_management_use_case import CourseManagementUseCase
from .course_query_use_case import CourseQueryUseCase

__all__ = [
    "CourseDiscussionUseCase",
    "CourseManagementUseCase",
    "CourseQueryUseCase",
]

import logging

from fastapi import APIRouter, Depends
from starlette import status

from lms.application.courses.use_cases.course_discussion_use_case import CourseDiscussionUseCase
from lms.application.courses.use_cases.course_management_use_case import CourseManagementUseCase
from lms.application.courses.use_cases.course_query_use_case import CourseQueryUseCase
from lms.core import container
from lms.infrastructure.common.di import inject_use_case
from lms.infrastructure.common.schemas import SuccessResponse
from lms.infrastructure.courses.schemas import (
    AddAnswerRequest,
    AddQuestionRequest,
    AddReviewReplyRequest,
    AddReviewRequest,
    CourseContentItem,
    CourseContentResponse,
    CourseCreateRequest,
    CourseDetail,
    CourseEnvelope,
    CourseListResponse,
    CoursePreviewEnvelope,
    CoursePreviewListResponse,
    CourseUpdateRequest,
)
from lms.infrastructure.identity.dependencies import AdminUser, CurrentUser

logger = logging.getLogger(__name__)
router = APIRouter(tags=["courses"])


@router.post("/create-course", status_code=status.HTTP_201_CREATED)
async def create_course(
    data: CourseCreateRequest,
    _: AdminUser,
    use_case: CourseManagementUseCase = Depends(
        inject_use_case(container.course_management_use_case)
    ),
) -> CourseEnvelope:
    """
    Create a course with its content items.

    `thumbnail` may be a base64 data URL, which is uploaded, or an already
    stored `{publicId, url}` asset, which is kept as is.
    """
    course = use_case.create_course(data.model_dump())
    return CourseEnvelope(message="Course created successfully", course=CourseDetail.model_validate(course))


@router.put("/edit-course/{course_id}")
async def edit_course(
    course_id: int,
    data: CourseUpdateRequest,
    _: AdminUser,
    use_case: CourseManagementUseCase = Depends(
        inject_use_case(container.course_management_use_case)
    ),
) -> CourseEnvelope:
    """
    Partially update a course.

    When `courseData` is sent it replaces the content list: items carrying
    the id of an existing item update it and keep its questions, items
    without an id are added, and items left out are removed.
    """
    course = use_case.edit_course(course_id, data.model_dump(exclude_unset=True))
    return CourseEnvelope(message="Course updated successfully", course=CourseDetail.model_validate(course))


@router.delete("/delete-course/{course_id}")
async def delete_course(
    course_id: int,
    _: AdminUser,
    use_case: CourseManagementUseCase = Depends(
        inject_use_case(container.course_management_use_case)
    ),
) -> SuccessResponse:
    use_case.delete_course(course_id)
    return SuccessResponse(message="Course deleted successfully")


@router.get("/get-all-courses")
async def get_all_courses(
    _: AdminUser,
    use_case: CourseManagementUseCase = Depends(
        inject_use_case(container.course_management_use_case)
    ),
) -> CourseListResponse:
    """All courses with full content, newest first."""
    courses = use_case.list_courses()
    return CourseListResponse(courses=[CourseDetail.model_validate(course) for course in courses])


@router.get("/get-course/{course_id}")
async def get_course(
    course_id: int,
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
) -> CoursePreviewEnvelope:
    """Public view of one course, without video URLs, links or questions."""
    return CoursePreviewEnvelope(course=use_case.get_course_preview(course_id))


@router.get("/get-courses")
async def get_courses(
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
) -> CoursePreviewListResponse:
    return CoursePreviewListResponse(courses=use_case.get_course_previews())


@router.get("/get-course-content/{course_id}")
async def get_course_content(
    course_id: int,
    current_user: CurrentUser,
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
) -> CourseContentResponse:
    """Full content of a course, for users enrolled in it."""
    content = use_case.get_course_content(course_id, current_user.id)
    return CourseContentResponse(
        content=[CourseContentItem.model_validate(item) for item in content]
    )


@router.put("/add-question")
async def add_question(
    data: AddQuestionRequest,
    current_user: CurrentUser,
    use_case: CourseDiscussionUseCase = Depends(
        inject_use_case(container.course_discussion_use_case)
    ),
) -> CourseEnvelope:
    course = use_case.add_question(current_user.id, data.course_id, data.content_id, data.question)
    return CourseEnvelope(message="Question added successfully", course=CourseDetail.model_validate(course))


@router.put("/add-answer")
async def add_answer(
    data: AddAnswerRequest,
    current_user: CurrentUser,
    use_case: CourseDiscussionUseCase = Depends(
        inject_use_case(container.course_discussion_use_case)
    ),
) -> CourseEnvelope:
    course = use_case.add_answer(
        current_user.id, data.course_id, data.content_id, data.question_id, data.answer
    )
    return CourseEnvelope(message="Answer added successfully", course=CourseDetail.model_validate(course))


@router.put("/add-review/{course_id}")
async def add_review(
    course_id: int,
    data: AddReviewRequest,
    current_user: CurrentUser,
    use_case: CourseDiscussionUseCase = Depends(
        inject_use_case(container.course_discussion_use_case)
    ),
) -> CourseEnvelope:
    """Review a course you are enrolled in; one review per user and course."""
    course = use_case.add_review(current_user.id, course_id, data.review, data.rating)
    return CourseEnvelope(message="Review added successfully", course=CourseDetail.model_validate(course))


@router.put("/add-reply-to-review")
async def add_reply_to_review(
    data: AddReviewReplyRequest,
    current_user: AdminUser,
    use_case: CourseDiscussionUseCase = Depends(
        inject_use_case(container.course_discussion_use_case)
    ),
) -> CourseEnvelope:
    course = use_case.add_reply_to_review(
        current_user.id, data.course_id, data.review_id, data.comment
    )
    return CourseEnvelope(message="Reply added successfully", course=CourseDetail.model_validate(course))

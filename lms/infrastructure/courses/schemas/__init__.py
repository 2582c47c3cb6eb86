from .course_schemas import (
    AddAnswerRequest,
    AddQuestionRequest,
    AddReviewReplyRequest,
    AddReviewRequest,
    CommentAuthor,
    CommentNode,
    CourseContentInput,
    CourseContentItem,
    CourseContentPreview,
    CourseContentResponse,
    CourseCreateRequest,
    CourseDetail,
    CourseEnvelope,
    CourseListResponse,
    CoursePreview,
    CoursePreviewEnvelope,
    CoursePreviewListResponse,
    CourseUpdateRequest,
    LinkItem,
    ReviewSchema,
    TitledItem,
)

__all__ = [
    "AddAnswerRequest",
    "AddQuestionRequest",
    "AddReviewReplyRequest",
    "AddReviewRequest",
    "CommentAuthor",
    "CommentNode",
    "CourseContentInput",
    "CourseContentItem",
    "CourseContentPreview",
    "CourseContentResponse",
    "CourseCreateRequest",
    "CourseDetail",
    "CourseEnvelope",
    "CourseListResponse",
    "CoursePreview",
    "CoursePreviewEnvelope",
    "CoursePreviewListResponse",
    "CourseUpdateRequest",
    "LinkItem",
    "ReviewSchema",
    "TitledItem",
]

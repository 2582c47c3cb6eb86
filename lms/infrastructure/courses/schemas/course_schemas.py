from datetime import datetime

from pydantic import Field

from lms.infrastructure.common.schemas.response_wrappers import ApiModel, MediaAsset


class TitledItem(ApiModel):
    """Benefit or prerequisite line of a course."""

    title: str
    description: str | None = None


class LinkItem(ApiModel):
    title: str
    url: str


class CommentAuthor(ApiModel):
    id: int
    name: str
    role: str
    avatar: MediaAsset | None = None


class CommentNode(ApiModel):
    """A question, answer or review reply with its nested replies."""

    id: int
    user: CommentAuthor | None = None
    comment: str
    comment_replies: list["CommentNode"] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReviewSchema(ApiModel):
    id: int
    user: CommentAuthor | None = None
    rating: int
    comment: str
    comment_replies: list[CommentNode] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CourseContentPreview(ApiModel):
    """Content item as shown to visitors who have not bought the course."""

    id: int
    title: str
    description: str | None = None
    video_thumbnail: MediaAsset | None = None
    video_section: str | None = None
    video_length: int | None = None
    video_player_url: str | None = None


class CourseContentItem(CourseContentPreview):
    """Content item as shown to enrolled users and admins."""

    video_url: str | None = None
    links: list[LinkItem] = Field(default_factory=list)
    suggestions: str | None = None
    questions: list[CommentNode] = Field(default_factory=list)


class CoursePreview(ApiModel):
    """Public course projection; this is also the cached payload."""

    id: int
    name: str
    description: str
    price: float
    estimated_price: float | None = None
    thumbnail: MediaAsset | None = None
    tags: str
    level: str
    demo_url: str
    benefits: list[TitledItem] = Field(default_factory=list)
    prerequisites: list[TitledItem] = Field(default_factory=list)
    reviews: list[ReviewSchema] = Field(default_factory=list)
    course_data: list[CourseContentPreview] = Field(default_factory=list)
    ratings: float = 0
    purchased: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CourseDetail(CoursePreview):
    course_data: list[CourseContentItem] = Field(default_factory=list)


class CourseContentInput(ApiModel):
    """
    Content item in a create or edit request.

    On edit, items carrying the id of an existing item update it in place
    and keep its questions; items without an id are added.
    """

    id: int | None = None
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    video_url: str | None = None
    video_thumbnail: MediaAsset | None = None
    video_section: str | None = None
    video_length: int | None = Field(None, ge=0)
    video_player_url: str | None = None
    links: list[LinkItem] = Field(default_factory=list)
    suggestions: str | None = None


class CourseCreateRequest(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    estimated_price: float | None = Field(None, ge=0)
    thumbnail: MediaAsset | str | None = Field(
        None, description="Image as a base64 data URL, or an already stored asset"
    )
    tags: str = Field(..., min_length=1)
    level: str = Field(..., min_length=1)
    demo_url: str = Field(..., min_length=1)
    benefits: list[TitledItem] = Field(default_factory=list)
    prerequisites: list[TitledItem] = Field(default_factory=list)
    course_data: list[CourseContentInput] = Field(default_factory=list)


class CourseUpdateRequest(ApiModel):
    """Partial course update; only the fields sent are changed."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    price: float | None = Field(None, ge=0)
    estimated_price: float | None = Field(None, ge=0)
    thumbnail: MediaAsset | str | None = None
    tags: str | None = Field(None, min_length=1)
    level: str | None = Field(None, min_length=1)
    demo_url: str | None = Field(None, min_length=1)
    benefits: list[TitledItem] | None = None
    prerequisites: list[TitledItem] | None = None
    course_data: list[CourseContentInput] | None = None


class AddQuestionRequest(ApiModel):
    question: str = Field(..., min_length=1)
    course_id: int
    content_id: int


class AddAnswerRequest(ApiModel):
    answer: str = Field(..., min_length=1)
    course_id: int
    content_id: int
    question_id: int


class AddReviewRequest(ApiModel):
    review: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)


class AddReviewReplyRequest(ApiModel):
    comment: str = Field(..., min_length=1)
    course_id: int
    review_id: int


class CourseEnvelope(ApiModel):
    success: bool = True
    message: str | None = None
    course: CourseDetail


class CoursePreviewEnvelope(ApiModel):
    success: bool = True
    course: CoursePreview


class CoursePreviewListResponse(ApiModel):
    success: bool = True
    courses: list[CoursePreview]


class CourseListResponse(ApiModel):
    success: bool = True
    courses: list[CourseDetail]


class CourseContentResponse(ApiModel):
    success: bool = True
    content: list[CourseContentItem]

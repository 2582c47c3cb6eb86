from datetime import datetime

from pydantic import Field

from lms.infrastructure.common.schemas.response_wrappers import ApiModel, MediaAsset


class FaqItem(ApiModel):
    question: str
    answer: str


class CategoryItem(ApiModel):
    title: str


class BannerBlock(ApiModel):
    image: MediaAsset | None = None
    title: str | None = None
    subtitle: str | None = None


class LayoutRequest(ApiModel):
    """
    Body of create-layout and edit-layout.

    Which fields are read depends on `type`: Banner uses image, title and
    subtitle; Faq uses faq; Category uses categories; Layout uses any of
    faq, categories and banner.
    """

    type: str = Field(..., min_length=1, description="Banner, Faq, Category or Layout")
    image: str | None = Field(None, description="Banner image as a base64 data URL")
    title: str | None = None
    subtitle: str | None = None
    faq: list[FaqItem] | None = None
    categories: list[CategoryItem] | None = None
    banner: BannerBlock | None = None


class LayoutResponse(ApiModel):
    id: int
    type: str
    faq: list[FaqItem] = Field(default_factory=list)
    categories: list[CategoryItem] = Field(default_factory=list)
    banner: BannerBlock | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LayoutEnvelope(ApiModel):
    success: bool = True
    layout: LayoutResponse

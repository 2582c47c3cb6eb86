"""Use case for singleton-per-type layout blocks."""

from typing import Any

import structlog

from lms.application.common.protocols.media_storage import MediaStorageProtocol
from lms.application.layout.protocols.layout_repository import LayoutRepositoryProtocol
from lms.domain.common.exceptions import ValidationError
from lms.domain.layout.exceptions import (
    LAYOUT_TYPES,
    InvalidLayoutTypeError,
    LayoutNotFoundError,
    LayoutTypeExistsError,
)
from lms.models import Layout

logger = structlog.get_logger(__name__)

BANNER_FOLDER = "layout"


class LayoutUseCase:
    """
    Create, edit and read layout blocks.

    Banner blocks hold an uploaded image; Faq and Category blocks hold
    lists; a Layout block may carry any of the three.
    """

    def __init__(
        self,
        layout_repository: LayoutRepositoryProtocol,
        media_storage: MediaStorageProtocol,
    ) -> None:
        self.layout_repository = layout_repository
        self.media_storage = media_storage

    def get_layout(self, layout_type: str) -> Layout:
        layout = self.layout_repository.find_by_type(layout_type)
        if not layout:
            raise LayoutNotFoundError(layout_type)
        return layout

    def create_layout(
        self,
        layout_type: str,
        image: str | None = None,
        title: str | None = None,
        subtitle: str | None = None,
        faq: list[dict[str, Any]] | None = None,
        categories: list[dict[str, Any]] | None = None,
        banner: dict[str, Any] | None = None,
    ) -> str:
        """
        Create the block for a type.

        Returns:
            Confirmation message naming what was created

        Raises:
            LayoutTypeExistsError: If a block of this type already exists
            InvalidLayoutTypeError: If the type is unknown
            ValidationError: If a Banner is missing its image, title or subtitle
        """
        if self.layout_repository.find_by_type(layout_type):
            raise LayoutTypeExistsError(layout_type)
        if layout_type not in LAYOUT_TYPES:
            raise InvalidLayoutTypeError(layout_type)

        layout = Layout(type=layout_type, faq=[], categories=[])

        if layout_type == "Banner":
            layout.banner = self._upload_banner(image, title, subtitle)
        elif layout_type == "Faq":
            layout.faq = _faq_items(faq or [])
        elif layout_type == "Category":
            layout.categories = _category_items(categories or [])
        else:
            layout.faq = _faq_items(faq or [])
            layout.categories = _category_items(categories or [])
            layout.banner = banner

        layout = self.layout_repository.save(layout)

        logger.info("layout_created", layout_id=layout.id, type=layout_type)

        return f"{layout_type} created successfully"

    def edit_layout(
        self,
        layout_type: str,
        image: str | None = None,
        title: str | None = None,
        subtitle: str | None = None,
        faq: list[dict[str, Any]] | None = None,
        categories: list[dict[str, Any]] | None = None,
        banner: dict[str, Any] | None = None,
    ) -> str:
        """
        Replace the content of an existing block.

        A Banner edit destroys the previous image before uploading the new one.

        Raises:
            InvalidLayoutTypeError: If the type is unknown
            LayoutNotFoundError: If no block of this type exists yet
            ValidationError: If the fields the type needs are missing
        """
        if layout_type not in LAYOUT_TYPES:
            raise InvalidLayoutTypeError(layout_type)
        layout = self.get_layout(layout_type)

        if layout_type == "Banner":
            _require_banner_fields(image, title, subtitle)
            old_image = (layout.banner or {}).get("image") or {}
            if old_image.get("public_id"):
                self.media_storage.destroy(old_image["public_id"])
            layout.banner = self._upload_banner(image, title, subtitle)
            message = "Banner updated successfully"
        elif layout_type == "Faq":
            if faq is None:
                raise ValidationError("FAQ array is required", field="faq")
            layout.faq = _faq_items(faq)
            message = "FAQ updated successfully"
        elif layout_type == "Category":
            if categories is None:
                raise ValidationError("Categories array is required", field="categories")
            layout.categories = _category_items(categories)
            message = "Categories updated successfully"
        else:
            if faq is not None:
                layout.faq = _faq_items(faq)
            if categories is not None:
                layout.categories = _category_items(categories)
            if banner is not None:
                layout.banner = banner
            message = "Layout updated successfully"

        self.layout_repository.save(layout)

        logger.info("layout_updated", layout_id=layout.id, type=layout_type)

        return message

    def _upload_banner(
        self, image: str | None, title: str | None, subtitle: str | None
    ) -> dict[str, Any]:
        _require_banner_fields(image, title, subtitle)
        asset = self.media_storage.upload(image or "", BANNER_FOLDER)
        return {"image": asset.to_dict(), "title": title, "subtitle": subtitle}


def _require_banner_fields(image: str | None, title: str | None, subtitle: str | None) -> None:
    if not image or not title or not subtitle:
        raise ValidationError("Image, title, and subtitle are required for Banner", field="banner")


def _faq_items(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [{"question": item.get("question"), "answer": item.get("answer")} for item in items]


def _category_items(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [{"title": item.get("title")} for item in items]

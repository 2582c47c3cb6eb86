from .layout_schemas import (
    BannerBlock,
    CategoryItem,
    FaqItem,
    LayoutEnvelope,
    LayoutRequest,
    LayoutResponse,
)

__all__ = [
    "BannerBlock",
    "CategoryItem",
    "FaqItem",
    "LayoutEnvelope",
    "LayoutRequest",
    "LayoutResponse",
]

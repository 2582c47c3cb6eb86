from .layout_repository import LayoutRepositoryProtocol

__all__ = ["LayoutRepositoryProtocol"]

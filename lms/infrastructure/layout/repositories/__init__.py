from .layout_repository import LayoutRepository

__all__ = ["LayoutRepository"]

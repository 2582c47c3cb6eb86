from .layout_use_case import LayoutUseCase

__all__ = ["LayoutUseCase"]

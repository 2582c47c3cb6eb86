"""Layout domain exceptions."""

from lms.domain.common.exceptions import BusinessRuleViolationError, EntityNotFoundError, ValidationError

LAYOUT_TYPES = ("Banner", "Faq", "Category", "Layout")


class LayoutNotFoundError(EntityNotFoundError):
    """Raised when no layout block exists for a type."""

    def __init__(self, layout_type: str) -> None:
        super().__init__("Layout", layout_type)


class LayoutTypeExistsError(BusinessRuleViolationError):
    """Raised when creating a second block of the same type."""

    def __init__(self, layout_type: str) -> None:
        super().__init__("one_layout_per_type", "Layout type already exists")
        self.layout_type = layout_type


class InvalidLayoutTypeError(ValidationError):
    """Raised for a type outside LAYOUT_TYPES."""

    def __init__(self, layout_type: str) -> None:
        super().__init__("Invalid layout type", field="type", value=layout_type)

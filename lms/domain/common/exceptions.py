"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They are translated to `{success: false, message}` responses by the
exception handlers registered in `lms.main`.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    status_code: int = 400

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Missing banner title, unknown layout type, etc.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up a course by ID that doesn't exist.
    """

    status_code = 404

    def __init__(self, entity_type: str, entity_id: object = None) -> None:
        super().__init__(f"{entity_type} not found", {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: Reviewing the same course twice.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class AuthenticationError(DomainError):
    """Raised when the caller has no valid session."""

    status_code = 401

    def __init__(self, message: str = "Please login to access this resource") -> None:
        super().__init__(message)


class AuthorizationError(DomainError):
    """
    Raised when an operation is not authorized.

    Example: A regular user calling an admin-only route.
    """

    status_code = 403

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)

"""Identity domain exceptions."""

from lms.domain.common.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
)


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: int | None = None) -> None:
        super().__init__("User", user_id)


class EmailAlreadyExistsError(DomainError):
    """Raised when attempting to register with an email that already exists."""

    def __init__(self, email: str, message: str = "User already exists") -> None:
        super().__init__(message, {"email": email})
        self.email = email


class InvalidCredentialsError(DomainError):
    """Raised when authentication fails due to invalid credentials."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class UserNotVerifiedError(BusinessRuleViolationError):
    """Raised when an unverified user tries to log in."""

    def __init__(self) -> None:
        super().__init__("verified_login", "Please verify your email first")


class InvalidActivationCodeError(DomainError):
    """Raised when the activation code does not match the signed token."""

    def __init__(self) -> None:
        super().__init__("Invalid activation code")


class UserAlreadyActivatedError(BusinessRuleViolationError):
    """Raised when activating an already verified account."""

    def __init__(self) -> None:
        super().__init__("one_way_activation", "User already activated")


class PasswordVerificationError(DomainError):
    """Raised when the current password does not match."""

    def __init__(self, message: str = "Old password is incorrect") -> None:
        super().__init__(message)


class RegistrationDisabledError(DomainError):
    """Raised when registration is disabled via feature flag."""

    status_code = 403

    def __init__(self) -> None:
        super().__init__("User registration is currently disabled")


class SessionNotFoundError(AuthenticationError):
    """Raised when a token subject has no cached session."""

    def __init__(self) -> None:
        super().__init__("Session not found, please login again")


class RoleNotAllowedError(AuthorizationError):
    """Raised when the caller's role is not in a route's allow-list."""

    def __init__(self, role: str) -> None:
        super().__init__(f"Role: {role} is not allowed to access this resource")
        self.role = role

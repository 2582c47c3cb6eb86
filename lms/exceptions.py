"""Infrastructure-level exception hierarchy for the LMS application."""


class LmsError(Exception):
    """Base exception for errors that carry their own HTTP status."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidMediaError(LmsError):
    """Uploaded media payload could not be decoded."""

    def __init__(self, reason: str) -> None:
        """Initialize with reason for the rejection."""
        self.reason = reason
        super().__init__(f"Invalid image data: {reason}", status_code=400)

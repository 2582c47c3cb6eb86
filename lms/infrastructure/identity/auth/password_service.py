"""Password hashing and verification service."""

from pwdlib import PasswordHash

from lms.config import Settings, get_settings

DUMMY_PASSWORD = "lms-dummy-password"  # noqa: S105


class PasswordService:
    """Argon2 password hashing with an optional application-wide pepper."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.pepper = (settings or get_settings()).PASSWORD_PEPPER
        self.password_hash = PasswordHash.recommended()
        self._dummy_hash: str | None = None

    def hash_password(self, plain_password: str) -> str:
        """Hash a plain password for storage with pepper."""
        return self.password_hash.hash(plain_password + self.pepper)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a plain password against a hashed password."""
        return self.password_hash.verify(plain_password + self.pepper, hashed_password)

    def get_dummy_hash(self) -> str:
        """Get a real hash to verify against when the user does not exist.

        Verifying against a well-formed hash keeps unknown-email logins as slow
        as wrong-password logins.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash_password(DUMMY_PASSWORD)
        return self._dummy_hash

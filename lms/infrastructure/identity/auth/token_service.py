"""Token creation and verification service."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from lms.config import Settings, get_settings

ALGORITHM = "HS256"


class TokenWithRefresh(BaseModel):
    """DTO for token pair with access and refresh tokens."""

    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int


class TokenService:
    """
    Signs and verifies the three token kinds the API hands out.

    Access and refresh tokens carry `{"sub": user_id, "type": ...}`. The
    activation token additionally carries the 6-digit activation code.
    Decoding raises `jwt.InvalidTokenError` (or `jwt.ExpiredSignatureError`)
    so the central error handler can normalize it.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @property
    def access_token_max_age(self) -> int:
        """Access token lifetime in seconds."""
        return self.settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    @property
    def refresh_token_max_age(self) -> int:
        """Refresh token lifetime in seconds."""
        return self.settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60

    def create_access_token(self, user_id: int) -> str:
        expire = datetime.now(UTC) + timedelta(seconds=self.access_token_max_age)
        to_encode = {"sub": str(user_id), "exp": expire, "type": "access"}
        return jwt.encode(to_encode, self.settings.SECRET_KEY, algorithm=ALGORITHM)

    def create_refresh_token(self, user_id: int) -> str:
        expire = datetime.now(UTC) + timedelta(seconds=self.refresh_token_max_age)
        to_encode = {"sub": str(user_id), "exp": expire, "type": "refresh"}
        return jwt.encode(to_encode, self.settings.refresh_secret, algorithm=ALGORITHM)

    def create_token_pair(self, user_id: int) -> TokenWithRefresh:
        """Create a token pair (access + refresh) for a user."""
        return TokenWithRefresh(
            access_token=self.create_access_token(user_id),
            refresh_token=self.create_refresh_token(user_id),
            token_type="bearer",  # noqa: S106
            expires_in=self.access_token_max_age,
        )

    def decode_access_token(self, token: str) -> int:
        """Verify an access token and return the user id."""
        payload = jwt.decode(token, self.settings.SECRET_KEY, algorithms=[ALGORITHM])
        # Refresh tokens are only accepted at the /refresh endpoint
        if payload.get("type") != "access":
            raise InvalidTokenError("Not an access token")
        return self._subject(payload)

    def decode_refresh_token(self, token: str) -> int:
        """Verify a refresh token and return the user id."""
        payload = jwt.decode(token, self.settings.refresh_secret, algorithms=[ALGORITHM])
        if payload.get("type") != "refresh":
            raise InvalidTokenError("Not a refresh token")
        return self._subject(payload)

    def create_activation_token(self, user_id: int, activation_code: str) -> str:
        """Embed an activation code in a short-lived signed token."""
        expire = datetime.now(UTC) + timedelta(
            minutes=self.settings.ACTIVATION_TOKEN_EXPIRE_MINUTES
        )
        to_encode = {
            "sub": str(user_id),
            "activation_code": activation_code,
            "exp": expire,
            "type": "activation",
        }
        return jwt.encode(to_encode, self.settings.activation_secret, algorithm=ALGORITHM)

    def decode_activation_token(self, token: str) -> tuple[int, str]:
        """Verify an activation token and return (user_id, activation_code)."""
        payload = jwt.decode(token, self.settings.activation_secret, algorithms=[ALGORITHM])
        if payload.get("type") != "activation" or "activation_code" not in payload:
            raise InvalidTokenError("Not an activation token")
        return self._subject(payload), str(payload["activation_code"])

    @staticmethod
    def _subject(payload: dict[str, object]) -> int:
        subject = payload.get("sub")
        if subject is None:
            raise InvalidTokenError("Token has no subject")
        try:
            return int(str(subject))
        except ValueError:
            raise InvalidTokenError("Token subject is not a user id") from None

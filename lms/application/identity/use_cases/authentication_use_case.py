"""Use case for authentication operations."""

from dataclasses import dataclass
from typing import Any

import structlog

from lms.application.identity.protocols.password_service import PasswordServiceProtocol
from lms.application.identity.protocols.session_store import SessionStoreProtocol
from lms.application.identity.protocols.token_service import TokenServiceProtocol
from lms.application.identity.protocols.user_repository import UserRepositoryProtocol
from lms.domain.identity.exceptions import (
    InvalidCredentialsError,
    SessionNotFoundError,
    UserNotVerifiedError,
)
from lms.infrastructure.identity.auth.token_service import TokenWithRefresh
from lms.infrastructure.identity.schemas import UserSession
from lms.models import User

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AuthenticatedSession:
    """Token pair plus the cached session it was issued for."""

    session: UserSession
    tokens: TokenWithRefresh
    created: bool = False


class AuthenticationUseCase:
    """Use case for login, social login, refresh and logout."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
        session_store: SessionStoreProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service
        self.session_store = session_store

    def authenticate_user(self, email: str, password: str) -> AuthenticatedSession:
        """
        Authenticate a user with email and password.

        Args:
            email: User's email address
            password: User's plain text password

        Returns:
            Cached session and a fresh token pair

        Raises:
            InvalidCredentialsError: If credentials are invalid
            UserNotVerifiedError: If the account has not been activated
        """
        user = self.user_repository.find_by_email(email)

        # Use constant-time comparison to prevent timing attacks
        if not user:
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            raise InvalidCredentialsError

        if not user.hashed_password or not self.password_service.verify_password(
            password, user.hashed_password
        ):
            raise InvalidCredentialsError

        if not user.is_verified:
            raise UserNotVerifiedError

        logger.info("user_authenticated", user_id=user.id, email=email)

        return self._start_session(user)

    def social_auth(
        self, email: str, name: str, avatar: dict[str, Any] | None = None
    ) -> AuthenticatedSession:
        """
        Log in a user vouched for by an external identity provider.

        Unknown emails get a verified, password-less account.
        """
        user = self.user_repository.find_by_email(email)
        created = user is None
        if user is None:
            user = User(
                name=name,
                email=email,
                hashed_password=None,
                role="user",
                is_verified=True,
                avatar=avatar,
            )
            user = self.user_repository.save(user)
            logger.info("user_registered", user_id=user.id, email=email, provider="social")

        logger.info("user_authenticated", user_id=user.id, email=email, provider="social")

        result = self._start_session(user)
        return AuthenticatedSession(session=result.session, tokens=result.tokens, created=created)

    def refresh_access_token(self, refresh_token: str) -> AuthenticatedSession:
        """
        Reissue the token pair from a refresh token.

        Raises:
            jwt.InvalidTokenError: If the refresh token is invalid or expired
            SessionNotFoundError: If the session expired or the user logged out
        """
        user_id = self.token_service.decode_refresh_token(refresh_token)
        if self.session_store.get(user_id) is None:
            raise SessionNotFoundError

        user = self.user_repository.find_by_id(user_id)
        if not user:
            self.session_store.delete(user_id)
            raise SessionNotFoundError

        logger.info("access_token_refreshed", user_id=user_id)

        return self._start_session(user)

    def logout(self, user_id: int) -> None:
        self.session_store.delete(user_id)
        logger.info("user_logged_out", user_id=user_id)

    def get_session(self, user_id: int) -> UserSession:
        """
        Resolve the cached session for a token subject.

        Raises:
            SessionNotFoundError: If no session is cached for the user
        """
        session = self.session_store.get(user_id)
        if session is None:
            raise SessionNotFoundError
        return session

    def _start_session(self, user: User) -> AuthenticatedSession:
        session = self.session_store.save(user)
        tokens = self.token_service.create_token_pair(user.id)
        return AuthenticatedSession(session=session, tokens=tokens)

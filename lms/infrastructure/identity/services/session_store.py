"""Redis-backed cache of authenticated user sessions."""

import logging

from redis import Redis

from lms.config import Settings, get_settings
from lms.infrastructure.identity.schemas import UserSession
from lms.models import User

logger = logging.getLogger(__name__)


class RedisSessionStore:
    """
    Caches the public user payload under the user's id.

    Entries expire together with the refresh token, so a session can never
    outlive the credential that renews it.
    """

    def __init__(self, cache: Redis, settings: Settings | None = None) -> None:
        self.cache = cache
        settings = settings or get_settings()
        self.ttl_seconds = settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60

    @staticmethod
    def _key(user_id: int) -> str:
        return str(user_id)

    def get(self, user_id: int) -> UserSession | None:
        """Return the cached session, or None when it expired or never existed."""
        raw = self.cache.get(self._key(user_id))
        if raw is None:
            return None
        return UserSession.model_validate_json(raw)

    def save(self, user: User) -> UserSession:
        """Cache (or re-cache) the session payload for a user."""
        session = UserSession.model_validate(user)
        self.cache.set(
            self._key(user.id), session.model_dump_json(by_alias=True), ex=self.ttl_seconds
        )
        logger.debug(f"Cached session for user {user.id}")
        return session

    def delete(self, user_id: int) -> None:
        self.cache.delete(self._key(user_id))

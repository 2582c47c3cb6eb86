from typing import Protocol

from lms.infrastructure.identity.schemas import UserSession
from lms.models import User


class SessionStoreProtocol(Protocol):
    def get(self, user_id: int) -> UserSession | None: ...

    def save(self, user: User) -> UserSession: ...

    def delete(self, user_id: int) -> None: ...

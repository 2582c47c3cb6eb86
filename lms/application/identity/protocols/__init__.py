from .password_service import PasswordServiceProtocol
from .session_store import SessionStoreProtocol
from .token_service import TokenServiceProtocol
from .user_repository import UserRepositoryProtocol

__all__ = [
    "PasswordServiceProtocol",
    "SessionStoreProtocol",
    "TokenServiceProtocol",
    "UserRepositoryProtocol",
]

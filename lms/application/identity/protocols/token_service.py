from typing import Protocol

from lms.infrastructure.identity.auth.token_service import TokenWithRefresh


class TokenServiceProtocol(Protocol):
    def create_token_pair(self, user_id: int) -> TokenWithRefresh: ...

    def decode_refresh_token(self, token: str) -> int: ...

    def create_activation_token(self, user_id: int, activation_code: str) -> str: ...

    def decode_activation_token(self, token: str) -> tuple[int, str]: ...

from datetime import datetime
from typing import Protocol

from lms.models import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: int) -> User | None: ...

    def find_by_email(self, email: str) -> User | None: ...

    def list_recent(self) -> list[User]: ...

    def save(self, user: User) -> User: ...

    def delete(self, user: User) -> None: ...

    def is_enrolled(self, user_id: int, course_id: int) -> bool: ...

    def enroll(self, user: User, course_id: int) -> User: ...

    def count_created_between(self, start: datetime, end: datetime) -> int: ...

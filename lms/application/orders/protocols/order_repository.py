from datetime import datetime
from typing import Any, Protocol

from lms.models import Order


class OrderRepositoryProtocol(Protocol):
    def create(self, course_id: int, user_id: int, payment_info: dict[str, Any] | None) -> Order: ...

    def list_recent(self) -> list[Order]: ...

    def count_created_between(self, start: datetime, end: datetime) -> int: ...

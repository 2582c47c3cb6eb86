from typing import Protocol

from lms.models import Notification


class NotificationRepositoryProtocol(Protocol):
    def create(self, user_id: int, title: str, message: str) -> Notification: ...

    def find_by_id(self, notification_id: int) -> Notification | None: ...

    def list_recent(self) -> list[Notification]: ...

    def mark_read(self, notification: Notification) -> Notification: ...

    def delete_read(self) -> int: ...

"""Use case for the admin notification feed."""

import structlog

from lms.application.notifications.protocols.notification_repository import (
    NotificationRepositoryProtocol,
)
from lms.domain.common.exceptions import EntityNotFoundError
from lms.models import Notification

logger = structlog.get_logger(__name__)


class NotificationUseCase:
    def __init__(self, notification_repository: NotificationRepositoryProtocol) -> None:
        self.notification_repository = notification_repository

    def list_notifications(self) -> list[Notification]:
        """All notifications, newest first."""
        return self.notification_repository.list_recent()

    def mark_read(self, notification_id: int) -> list[Notification]:
        """
        Mark one notification read and return the refreshed feed.

        Raises:
            EntityNotFoundError: If the notification does not exist
        """
        notification = self.notification_repository.find_by_id(notification_id)
        if not notification:
            raise EntityNotFoundError("Notification", notification_id)

        self.notification_repository.mark_read(notification)
        logger.info("notification_read", notification_id=notification_id)

        return self.notification_repository.list_recent()

    def delete_read(self) -> int:
        deleted = self.notification_repository.delete_read()
        logger.info("read_notifications_deleted", count=deleted)
        return deleted

"""Best-effort creation of admin feed notifications."""

import structlog

from lms.application.notifications.protocols.notification_repository import (
    NotificationRepositoryProtocol,
)

logger = structlog.get_logger(__name__)


class Notifier:
    """
    Creates notifications as a side effect of other operations.

    A failure here must never fail the operation that triggered it, so
    errors are logged and reported as False.
    """

    def __init__(self, notification_repository: NotificationRepositoryProtocol) -> None:
        self.notification_repository = notification_repository

    def notify(self, user_id: int, title: str, message: str) -> bool:
        try:
            notification = self.notification_repository.create(user_id, title, message)
        except Exception:
            logger.exception("notification_failed", user_id=user_id, title=title)
            return False

        logger.info("notification_created", notification_id=notification.id, title=title)
        return True

"""Repository for Notification models."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from lms.models import Notification

logger = logging.getLogger(__name__)


class NotificationRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, user_id: int, title: str, message: str) -> Notification:
        notification = Notification(user_id=user_id, title=title, message=message)
        self.db.add(notification)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(notification)
        return notification

    def find_by_id(self, notification_id: int) -> Notification | None:
        stmt = select(Notification).where(Notification.id == notification_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_recent(self) -> list[Notification]:
        """All notifications, newest first."""
        stmt = select(Notification).order_by(
            Notification.created_at.desc(), Notification.id.desc()
        )
        return list(self.db.execute(stmt).scalars().all())

    def mark_read(self, notification: Notification) -> Notification:
        notification.status = "read"
        self.db.commit()
        self.db.refresh(notification)
        return notification

    def delete_read(self) -> int:
        """Delete every read notification and return how many were removed."""
        stmt = delete(Notification).where(Notification.status == "read")
        result = self.db.execute(stmt)
        self.db.commit()
        logger.info(f"Deleted {result.rowcount} read notifications")
        return result.rowcount

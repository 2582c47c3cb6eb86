from .notification_repository import NotificationRepositoryProtocol

__all__ = ["NotificationRepositoryProtocol"]

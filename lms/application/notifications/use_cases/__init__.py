from .notification_use_case import NotificationUseCase

__all__ = ["NotificationUseCase"]

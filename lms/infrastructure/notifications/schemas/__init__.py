from .notification_schemas import NotificationListResponse, NotificationResponse

__all__ = ["NotificationListResponse", "NotificationResponse"]

from datetime import datetime
from typing import Literal

from lms.infrastructure.common.schemas.response_wrappers import ApiModel


class NotificationResponse(ApiModel):
    id: int
    title: str
    message: str
    status: Literal["unread", "read"]
    user_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NotificationListResponse(ApiModel):
    success: bool = True
    notifications: list[NotificationResponse]

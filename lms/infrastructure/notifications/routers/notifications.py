from fastapi import APIRouter, Depends

from lms.application.notifications.use_cases.notification_use_case import NotificationUseCase
from lms.core import container
from lms.infrastructure.common.di import inject_use_case
from lms.infrastructure.common.schemas import SuccessResponse
from lms.infrastructure.identity.dependencies import AdminUser
from lms.infrastructure.notifications.schemas import (
    NotificationListResponse,
    NotificationResponse,
)

router = APIRouter(tags=["notifications"])


def _feed(notifications: list) -> NotificationListResponse:
    return NotificationListResponse(
        notifications=[NotificationResponse.model_validate(item) for item in notifications]
    )


@router.get("/get-all-notifications")
async def get_all_notifications(
    _: AdminUser,
    use_case: NotificationUseCase = Depends(inject_use_case(container.notification_use_case)),
) -> NotificationListResponse:
    """All notifications, newest first."""
    return _feed(use_case.list_notifications())


@router.put("/update-notification/{notification_id}")
async def update_notification(
    notification_id: int,
    _: AdminUser,
    use_case: NotificationUseCase = Depends(inject_use_case(container.notification_use_case)),
) -> NotificationListResponse:
    """Mark a notification read and return the refreshed feed."""
    return _feed(use_case.mark_read(notification_id))


@router.delete("/delete-all-notifications")
async def delete_all_notifications(
    _: AdminUser,
    use_case: NotificationUseCase = Depends(inject_use_case(container.notification_use_case)),
) -> SuccessResponse:
    """Delete every notification that has been read."""
    use_case.delete_read()
    return SuccessResponse(message="All notifications deleted successfully")

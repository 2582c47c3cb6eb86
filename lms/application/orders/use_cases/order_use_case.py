"""Use case for course orders and enrollment."""

from typing import Any

import structlog

from lms.application.common.protocols.mail_service import MailServiceProtocol
from lms.application.courses.protocols.course_cache import CourseCacheProtocol
from lms.application.courses.protocols.course_repository import CourseRepositoryProtocol
from lms.application.identity.protocols.session_store import SessionStoreProtocol
from lms.application.identity.protocols.user_repository import UserRepositoryProtocol
from lms.application.notifications.services.notifier import Notifier
from lms.application.orders.protocols.order_repository import OrderRepositoryProtocol
from lms.config import get_settings
from lms.domain.courses.exceptions import CourseNotFoundError
from lms.domain.identity.exceptions import UserNotFoundError
from lms.domain.orders.exceptions import AlreadyEnrolledError
from lms.models import Order

logger = structlog.get_logger(__name__)


class OrderUseCase:
    """
    Enrolls a user in a course.

    The steps after the order row is written are not atomic with it: the
    email and notification are best-effort, and a failure while enrolling
    leaves the order in place.
    """

    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        course_repository: CourseRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
        session_store: SessionStoreProtocol,
        course_cache: CourseCacheProtocol,
        notifier: Notifier,
        mail_service: MailServiceProtocol,
    ) -> None:
        self.order_repository = order_repository
        self.course_repository = course_repository
        self.user_repository = user_repository
        self.session_store = session_store
        self.course_cache = course_cache
        self.notifier = notifier
        self.mail_service = mail_service

    def create_order(
        self, user_id: int, course_id: int, payment_info: dict[str, Any] | None = None
    ) -> Order:
        """
        Place an order for a course.

        Args:
            user_id: Buyer
            course_id: Course being bought
            payment_info: Opaque payment metadata stored with the order

        Returns:
            The placed order

        Raises:
            UserNotFoundError: If the buyer no longer exists
            AlreadyEnrolledError: If the buyer is already enrolled
            CourseNotFoundError: If the course does not exist
        """
        user = self.user_repository.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)

        if self.user_repository.is_enrolled(user_id, course_id):
            raise AlreadyEnrolledError

        course = self.course_repository.find_by_id(course_id)
        if not course:
            raise CourseNotFoundError(course_id)

        order = self.order_repository.create(course_id, user_id, payment_info)

        self.mail_service.send(
            email=user.email,
            subject="Order Confirmed",
            template="order-confirmation.html",
            data={
                "user": {"name": user.name},
                "order": {
                    "id": str(order.id),
                    "date": order.created_at.strftime("%B %d, %Y"),
                    "items": [{"title": course.name, "quantity": 1, "price": course.price}],
                    "total_amount": course.price,
                },
                "dashboard_url": f"{get_settings().CLIENT_URL}/dashboard",
            },
        )

        user = self.user_repository.enroll(user, course_id)

        course.purchased = (course.purchased or 0) + 1
        self.course_repository.save(course)
        self.course_cache.invalidate(course_id)

        self.notifier.notify(
            user_id,
            title="New Course Enrolled",
            message=f"You have successfully enrolled in {course.name}",
        )

        self.session_store.save(user)

        logger.info("order_created", order_id=order.id, user_id=user_id, course_id=course_id)

        return order

    def list_orders(self) -> list[Order]:
        """All orders, newest first."""
        return self.order_repository.list_recent()

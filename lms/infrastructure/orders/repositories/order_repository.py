"""Repository for Order models."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lms.models import Order

logger = logging.getLogger(__name__)


class OrderRepository:
    """Append-only store of enrollment orders."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, course_id: int, user_id: int, payment_info: dict[str, Any] | None) -> Order:
        order = Order(course_id=course_id, user_id=user_id, payment_info=payment_info)
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        logger.info(f"Created order {order.id} for user {user_id}, course {course_id}")
        return order

    def list_recent(self) -> list[Order]:
        stmt = select(Order).order_by(Order.created_at.desc(), Order.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def count_created_between(self, start: datetime, end: datetime) -> int:
        stmt = select(func.count(Order.id)).where(Order.created_at >= start, Order.created_at < end)
        return self.db.execute(stmt).scalar_one()

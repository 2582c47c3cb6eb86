"""Use case for the admin analytics charts."""

from dataclasses import dataclass
from datetime import datetime

import structlog

from lms.application.analytics.protocols.created_counter import CreatedCounterProtocol
from lms.domain.analytics.services.month_buckets import MonthBucketService

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MonthCount:
    month: str
    count: int


class AnalyticsUseCase:
    """Counts users, courses and orders created in each of the last 12 months."""

    def __init__(
        self,
        user_repository: CreatedCounterProtocol,
        course_repository: CreatedCounterProtocol,
        order_repository: CreatedCounterProtocol,
        month_bucket_service: MonthBucketService,
    ) -> None:
        self.user_repository = user_repository
        self.course_repository = course_repository
        self.order_repository = order_repository
        self.month_bucket_service = month_bucket_service

    def users_last_12_months(self, now: datetime | None = None) -> list[MonthCount]:
        return self._count_by_month(self.user_repository, now)

    def courses_last_12_months(self, now: datetime | None = None) -> list[MonthCount]:
        return self._count_by_month(self.course_repository, now)

    def orders_last_12_months(self, now: datetime | None = None) -> list[MonthCount]:
        return self._count_by_month(self.order_repository, now)

    def _count_by_month(
        self, repository: CreatedCounterProtocol, now: datetime | None
    ) -> list[MonthCount]:
        return [
            MonthCount(
                month=bucket.label,
                count=repository.count_created_between(bucket.start, bucket.end),
            )
            for bucket in self.month_bucket_service.last_months(now)
        ]

from fastapi import APIRouter, Depends

from lms.application.analytics.use_cases.analytics_use_case import AnalyticsUseCase, MonthCount
from lms.core import container
from lms.infrastructure.analytics.schemas import (
    CoursesAnalyticsResponse,
    MonthCountSchema,
    MonthlyReport,
    OrdersAnalyticsResponse,
    UsersAnalyticsResponse,
)
from lms.infrastructure.common.di import inject_use_case
from lms.infrastructure.identity.dependencies import AdminUser

router = APIRouter(tags=["analytics"])


def _report(counts: list[MonthCount]) -> MonthlyReport:
    return MonthlyReport(
        last12_months=[MonthCountSchema(month=item.month, count=item.count) for item in counts]
    )


@router.get("/get-users-analytics")
async def get_users_analytics(
    _: AdminUser,
    use_case: AnalyticsUseCase = Depends(inject_use_case(container.analytics_use_case)),
) -> UsersAnalyticsResponse:
    """Users created in each of the last 12 months, oldest month first."""
    return UsersAnalyticsResponse(users=_report(use_case.users_last_12_months()))


@router.get("/get-courses-analytics")
async def get_courses_analytics(
    _: AdminUser,
    use_case: AnalyticsUseCase = Depends(inject_use_case(container.analytics_use_case)),
) -> CoursesAnalyticsResponse:
    return CoursesAnalyticsResponse(courses=_report(use_case.courses_last_12_months()))


@router.get("/get-orders-analytics")
async def get_orders_analytics(
    _: AdminUser,
    use_case: AnalyticsUseCase = Depends(inject_use_case(container.analytics_use_case)),
) -> OrdersAnalyticsResponse:
    return OrdersAnalyticsResponse(orders=_report(use_case.orders_last_12_months()))

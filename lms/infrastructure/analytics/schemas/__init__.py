from .analytics_schemas import (
    CoursesAnalyticsResponse,
    MonthCountSchema,
    MonthlyReport,
    OrdersAnalyticsResponse,
    UsersAnalyticsResponse,
)

__all__ = [
    "CoursesAnalyticsResponse",
    "MonthCountSchema",
    "MonthlyReport",
    "OrdersAnalyticsResponse",
    "UsersAnalyticsResponse",
]

from lms.infrastructure.common.schemas.response_wrappers import ApiModel


class MonthCountSchema(ApiModel):
    month: str
    count: int


class MonthlyReport(ApiModel):
    last12_months: list[MonthCountSchema]


class UsersAnalyticsResponse(ApiModel):
    success: bool = True
    users: MonthlyReport


class CoursesAnalyticsResponse(ApiModel):
    success: bool = True
    courses: MonthlyReport


class OrdersAnalyticsResponse(ApiModel):
    success: bool = True
    orders: MonthlyReport

from .analytics_use_case import AnalyticsUseCase, MonthCount

__all__ = ["AnalyticsUseCase", "MonthCount"]

"""Domain models package."""

from .charts import ArcPath, ArcTo, ChartData, ChartSector, MoveTo, Point
from .stats import (
    BudgetStatus,
    CategoryTotal,
    SubscriptionStats,
    UpcomingPayment,
)
from .subscriptions import BillingCycle, ReportingPeriod, Subscription

__all__ = [
    "Subscription",
    "ReportingPeriod",
    "BillingCycle",
    "ChartSector",
    "ChartData",
    "Point",
    "MoveTo",
    "ArcTo",
    "ArcPath",
    "CategoryTotal",
    "UpcomingPayment",
    "SubscriptionStats",
    "BudgetStatus",
]

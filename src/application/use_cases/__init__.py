"""Application use cases package."""

from .get_budget_status import GetBudgetStatusUseCase
from .get_subscription_chart import GetSubscriptionChartUseCase
from .get_subscription_stats import GetSubscriptionStatsUseCase
from .get_upcoming_renewals import GetUpcomingRenewalsUseCase

__all__ = [
    "GetSubscriptionChartUseCase",
    "GetSubscriptionStatsUseCase",
    "GetBudgetStatusUseCase",
    "GetUpcomingRenewalsUseCase",
]

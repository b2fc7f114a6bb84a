"""Domain package for subscription spend rules and core models."""

from .constants import REPORTING_PERIODS, SUPPORTED_BILLING_CYCLES
from .errors import UnsupportedPeriodError
from .models import (
    ArcPath,
    BudgetStatus,
    CategoryTotal,
    ChartData,
    ChartSector,
    Point,
    Subscription,
    SubscriptionStats,
    UpcomingPayment,
)
from .services import (
    amount_for_period,
    build_category_breakdown,
    build_chart_data,
    compute_budget_status,
    compute_subscription_stats,
    describe_arc,
    due_reminders,
    next_payment_date,
    parse_period,
    polar_to_cartesian,
    total_for_period,
    upcoming_payments,
)

__all__ = [
    "REPORTING_PERIODS",
    "SUPPORTED_BILLING_CYCLES",
    "UnsupportedPeriodError",
    "Subscription",
    "ChartSector",
    "ChartData",
    "Point",
    "ArcPath",
    "CategoryTotal",
    "UpcomingPayment",
    "SubscriptionStats",
    "BudgetStatus",
    "amount_for_period",
    "total_for_period",
    "parse_period",
    "build_chart_data",
    "build_category_breakdown",
    "polar_to_cartesian",
    "describe_arc",
    "next_payment_date",
    "upcoming_payments",
    "due_reminders",
    "compute_subscription_stats",
    "compute_budget_status",
]

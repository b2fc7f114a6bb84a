"""Domain models for subscription spend summaries."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal

from src.domain.models.subscriptions import Subscription

BudgetLevel = Literal["ok", "warning", "over"]


@dataclass(frozen=True)
class CategoryTotal:
    """Spend aggregated for a subscription category."""

    category: str
    amount: Decimal
    count: int


@dataclass(frozen=True)
class UpcomingPayment:
    """Next charge of a subscription within a look-ahead window."""

    subscription: Subscription
    payment_date: date
    days_until_payment: int


@dataclass(frozen=True)
class SubscriptionStats:
    """Summary figures for the active subscriptions.

    Attributes:
        total_subscriptions: Count of all subscriptions, active or not.
        active_subscriptions: Count of active subscriptions.
        monthly_total: Monthly-equivalent spend of active subscriptions.
        yearly_total: ``monthly_total`` times twelve.
        average_amount: Monthly spend per active subscription.
        category_breakdown: Monthly spend by category, largest first.
        upcoming_payments: Charges due inside the look-ahead window.
        excluded_subscriptions: Active subscriptions whose billing cycle
            cannot be converted, so they count as zero in the totals.
    """

    total_subscriptions: int
    active_subscriptions: int
    monthly_total: Decimal
    yearly_total: Decimal
    average_amount: Decimal
    category_breakdown: list[CategoryTotal]
    upcoming_payments: list[UpcomingPayment]
    excluded_subscriptions: int = 0


@dataclass(frozen=True)
class BudgetStatus:
    """Monthly spend compared to the user's budget."""

    budget: Decimal
    spent: Decimal
    usage_percent: Decimal
    level: BudgetLevel
    reached_thresholds: tuple[int, ...]

    @property
    def remaining(self) -> Decimal:
        """Return budget minus spend (negative when exceeded)."""
        return self.budget - self.spent

    @property
    def progress_percent(self) -> Decimal:
        """Return usage clamped to 0-100 for progress bars."""
        return max(min(self.usage_percent, Decimal("100")), Decimal("0"))


__all__ = [
    "BudgetLevel",
    "CategoryTotal",
    "UpcomingPayment",
    "SubscriptionStats",
    "BudgetStatus",
]

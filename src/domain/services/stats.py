"""Spend statistics and budget tracking."""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    BUDGET_WARNING_RATIO,
    DEFAULT_BUDGET_THRESHOLDS,
    DEFAULT_UPCOMING_DAYS,
)
from src.domain.models.stats import BudgetStatus, SubscriptionStats
from src.domain.models.subscriptions import Subscription
from src.domain.services.charts import build_category_breakdown
from src.domain.services.periods import (
    total_for_period,
    unsupported_cycle_subscriptions,
)
from src.domain.services.schedule import upcoming_payments
from src.utils.decimal_utils import coerce_decimal


def compute_subscription_stats(
    subscriptions: Iterable[Subscription],
    *,
    today: date,
    upcoming_days: int = DEFAULT_UPCOMING_DAYS,
    logger: Logger | None = None,
) -> SubscriptionStats:
    """Compute monthly spend figures for the active subscriptions.

    Args:
        subscriptions: All subscriptions of the user.
        today: Reference date for upcoming payments.
        upcoming_days: Look-ahead window for upcoming payments.
        logger: Optional logger forwarded to the period normalizer.

    Returns:
        SubscriptionStats: Counts, totals, breakdown and upcoming charges.
    """
    items = list(subscriptions)
    active = [subscription for subscription in items if subscription.is_active]
    monthly_total = total_for_period(active, "monthly", logger=logger)
    average_amount = (
        monthly_total / len(active) if active else Decimal("0")
    )
    return SubscriptionStats(
        total_subscriptions=len(items),
        active_subscriptions=len(active),
        monthly_total=monthly_total,
        yearly_total=monthly_total * 12,
        average_amount=average_amount,
        category_breakdown=build_category_breakdown(
            active,
            "monthly",
            logger=logger,
        ),
        upcoming_payments=upcoming_payments(
            active,
            today=today,
            days=upcoming_days,
        ),
        excluded_subscriptions=len(unsupported_cycle_subscriptions(active)),
    )


def compute_budget_status(
    monthly_total: Decimal,
    budget: Decimal,
    thresholds: Sequence[int] = DEFAULT_BUDGET_THRESHOLDS,
) -> BudgetStatus:
    """Compare monthly spend with a budget.

    The level is ``over`` once spend exceeds the budget and ``warning`` once
    it exceeds 80% of it. Usage is zero and no threshold is reached when the
    budget is not positive.

    Args:
        monthly_total: Monthly-equivalent spend.
        budget: Monthly budget.
        thresholds: Usage percentages that trigger alerts.

    Returns:
        BudgetStatus: Usage, level and reached thresholds.
    """
    spent = coerce_decimal(monthly_total)
    budget = coerce_decimal(budget)
    if budget > 0:
        usage_percent = spent / budget * 100
        reached = tuple(
            threshold
            for threshold in sorted(thresholds)
            if usage_percent >= threshold
        )
    else:
        usage_percent = Decimal("0")
        reached = ()

    if spent > budget:
        level = "over"
    elif spent > budget * BUDGET_WARNING_RATIO:
        level = "warning"
    else:
        level = "ok"

    return BudgetStatus(
        budget=budget,
        spent=spent,
        usage_percent=usage_percent,
        level=level,
        reached_thresholds=reached,
    )


__all__ = ["compute_subscription_stats", "compute_budget_status"]

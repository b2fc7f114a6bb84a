"""Billing-cycle normalization and period aggregation."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import MONTHS_PER_PERIOD, REPORTING_PERIODS
from src.domain.errors import UnsupportedPeriodError
from src.domain.models.subscriptions import ReportingPeriod, Subscription
from src.domain.services.normalization import normalize_period
from src.utils.decimal_utils import coerce_decimal


def amount_for_period(
    subscription: Subscription,
    target_period: str,
    *,
    logger: Logger | None = None,
) -> Decimal:
    """Convert a subscription charge into the target reporting period.

    Factors are exact: a yearly charge is divided by 12 for a monthly view,
    a monthly charge is multiplied by 3 for a quarterly view, and so on.
    Unknown target periods and unsupported billing cycles (``weekly``
    included) contribute zero instead of raising, so one malformed record
    never aborts an aggregation. Amount signs are not checked.

    Args:
        subscription: Subscription to convert.
        target_period: Reporting period (monthly, quarterly or yearly).
        logger: Optional logger warned about zeroed contributions.

    Returns:
        Decimal: Equivalent amount for the target period.
    """
    target_months = MONTHS_PER_PERIOD.get(target_period)
    if target_months is None:
        if logger is not None:
            logger.warning(
                f"Unsupported reporting period {target_period!r}; "
                f"subscription {subscription.id} counts as zero"
            )
        return Decimal("0")
    cycle_months = MONTHS_PER_PERIOD.get(subscription.billing_cycle)
    if cycle_months is None:
        if logger is not None:
            logger.warning(
                f"Unsupported billing cycle {subscription.billing_cycle!r}; "
                f"subscription {subscription.id} counts as zero"
            )
        return Decimal("0")
    amount = coerce_decimal(subscription.amount)
    if cycle_months == target_months:
        return amount
    return amount * target_months / cycle_months


def total_for_period(
    subscriptions: Iterable[Subscription],
    target_period: str,
    *,
    logger: Logger | None = None,
) -> Decimal:
    """Sum the period amounts of all subscriptions in input order.

    Args:
        subscriptions: Subscriptions to aggregate.
        target_period: Reporting period.
        logger: Optional logger forwarded to ``amount_for_period``.

    Returns:
        Decimal: Period total, zero for an empty collection.
    """
    return sum(
        (
            amount_for_period(subscription, target_period, logger=logger)
            for subscription in subscriptions
        ),
        start=Decimal("0"),
    )


def parse_period(period: str | None) -> ReportingPeriod:
    """Validate a reporting period before it reaches the engine.

    Args:
        period: Raw period value.

    Returns:
        ReportingPeriod: Normalized period.

    Raises:
        UnsupportedPeriodError: If the value is not a known period.
    """
    normalized = normalize_period(period)
    if normalized not in REPORTING_PERIODS:
        raise UnsupportedPeriodError(period)
    return normalized


def unsupported_cycle_subscriptions(
    subscriptions: Iterable[Subscription],
) -> list[Subscription]:
    """Return the subscriptions left out of period totals by their cycle."""
    return [
        subscription
        for subscription in subscriptions
        if subscription.billing_cycle not in MONTHS_PER_PERIOD
    ]


__all__ = [
    "amount_for_period",
    "total_for_period",
    "parse_period",
    "unsupported_cycle_subscriptions",
]

"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    SUBSCRIPTION_CATEGORIES,
    SUPPORTED_BILLING_CYCLES,
)


def validate_amount_sign(
    subscription_id: str,
    amount: Decimal,
    logger: Logger,
) -> None:
    """Warn when a subscription carries a negative charge.

    Args:
        subscription_id: Identifier of the subscription row.
        amount: Charge per billing cycle.
        logger: Logger used for warnings.
    """
    if amount < 0:
        logger.warning(
            f"Subscription amount is negative for id={subscription_id}: {amount}"
        )


def validate_billing_cycle(
    subscription_id: str,
    billing_cycle: str,
    logger: Logger,
) -> None:
    """Warn when a billing cycle cannot be normalized to a period."""
    if billing_cycle not in SUPPORTED_BILLING_CYCLES:
        logger.warning(
            f"Unsupported billing cycle for id={subscription_id}: "
            f"{billing_cycle!r} counts as zero in period totals"
        )


def validate_category(
    subscription_id: str,
    category: str,
    logger: Logger,
) -> None:
    """Log categories outside the known list; breakdowns still keep them."""
    if category not in SUBSCRIPTION_CATEGORIES:
        logger.info(
            f"Custom category for id={subscription_id}: {category!r}"
        )


__all__ = [
    "validate_amount_sign",
    "validate_billing_cycle",
    "validate_category",
]

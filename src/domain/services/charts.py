"""Proportional chart data built from subscription spend."""

from collections.abc import Iterable
from decimal import Decimal
from functools import partial, reduce
from logging import Logger

from src.domain.constants import CHART_START_ANGLE, FULL_CIRCLE_DEGREES
from src.domain.models.charts import ChartData, ChartSector
from src.domain.models.stats import CategoryTotal
from src.domain.models.subscriptions import Subscription
from src.domain.services.periods import amount_for_period, total_for_period
from src.utils.decimal_utils import coerce_decimal


def build_chart_data(
    subscriptions: Iterable[Subscription],
    target_period: str,
    *,
    logger: Logger | None = None,
) -> ChartData:
    """Build ordered chart sectors for the reporting period.

    Percentages use the total of the unfiltered input as denominator, so
    zero or negative subscriptions still count toward the total even though
    they get no sector. Sectors are sorted by period amount, largest first;
    ties keep their input order. The last sector is not snapped to close
    the circle.

    Args:
        subscriptions: Subscriptions to chart.
        target_period: Reporting period.
        logger: Optional logger forwarded to the period normalizer.

    Returns:
        ChartData: Contiguous sectors starting at -90 degrees and the total.
    """
    items = list(subscriptions)
    total = total_for_period(items, target_period, logger=logger)
    if not items or total == 0:
        return ChartData(sectors=[], total_for_period=Decimal("0"))

    annotated = [
        (
            subscription,
            amount_for_period(subscription, target_period, logger=logger),
        )
        for subscription in items
        if coerce_decimal(subscription.amount) > 0
    ]
    # sorted() is stable, reverse=True included.
    ordered = sorted(annotated, key=lambda item: item[1], reverse=True)

    _cursor, sectors = reduce(
        partial(_append_sector, total=total),
        ordered,
        (CHART_START_ANGLE, ()),
    )
    return ChartData(sectors=list(sectors), total_for_period=total)


def _append_sector(
    acc: tuple[float, tuple[ChartSector, ...]],
    item: tuple[Subscription, Decimal],
    *,
    total: Decimal,
) -> tuple[float, tuple[ChartSector, ...]]:
    cursor, sectors = acc
    subscription, period_amount = item
    percentage = float(period_amount / total * 100)
    angle = percentage / 100 * FULL_CIRCLE_DEGREES
    sector = ChartSector(
        subscription=subscription,
        period_amount=period_amount,
        percentage=percentage,
        start_angle=cursor,
        end_angle=cursor + angle,
        angle=angle,
    )
    return sector.end_angle, (*sectors, sector)


def build_category_breakdown(
    subscriptions: Iterable[Subscription],
    target_period: str,
    *,
    logger: Logger | None = None,
) -> list[CategoryTotal]:
    """Aggregate period spend by category, largest first.

    Categories whose total is not positive are dropped. Ties keep the order
    in which categories first appear.

    Args:
        subscriptions: Subscriptions to aggregate.
        target_period: Reporting period.
        logger: Optional logger forwarded to the period normalizer.

    Returns:
        list[CategoryTotal]: Category totals with subscription counts.
    """
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    for subscription in subscriptions:
        category = subscription.category
        amount = amount_for_period(subscription, target_period, logger=logger)
        totals[category] = totals.get(category, Decimal("0")) + amount
        counts[category] = counts.get(category, 0) + 1

    breakdown = [
        CategoryTotal(category=category, amount=amount, count=counts[category])
        for category, amount in totals.items()
        if amount > 0
    ]
    return sorted(breakdown, key=lambda item: item.amount, reverse=True)


__all__ = ["build_chart_data", "build_category_breakdown"]

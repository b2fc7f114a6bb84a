"""CLI adapter printing a subscription spend report.

This module wires the chart and budget use cases to the concrete database
adapter and prints per-period totals, chart sectors and budget usage.
"""

import argparse

from src.application.use_cases.get_budget_status import GetBudgetStatusUseCase
from src.application.use_cases.get_subscription_chart import (
    GetSubscriptionChartUseCase,
)
from src.domain.constants import REPORTING_PERIODS
from src.domain.errors import UnsupportedPeriodError
from src.domain.services.periods import (
    parse_period,
    unsupported_cycle_subscriptions,
)
from src.infrastructure.container import (
    build_settings,
    build_subscriptions_repository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import round_money


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print subscription spend for a reporting period.",
    )
    parser.add_argument(
        "--period",
        default=None,
        help=f"Reporting period ({', '.join(REPORTING_PERIODS)}).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Print totals, chart sectors and budget status.

    Returns:
        int: Process exit code, 2 when the period is invalid.
    """
    logger = get_app_logger()
    args = _parse_args(argv)
    settings = build_settings()
    try:
        period = parse_period(args.period or settings.reporting_period)
    except UnsupportedPeriodError as exc:
        logger.error(str(exc))
        return 2
    repository = build_subscriptions_repository()

    chart_use_case = GetSubscriptionChartUseCase(
        subscriptions_repository=repository,
        logger=logger,
    )
    chart = chart_use_case.execute(period)

    print(
        f"Total ({period}): "
        f"{round_money(chart.total_for_period)} {settings.currency}"
    )
    for sector in chart.sectors:
        print(
            f"  {sector.subscription.name}: "
            f"{round_money(sector.period_amount)} "
            f"({sector.percentage:.2f}%, "
            f"{sector.start_angle:.2f} -> {sector.end_angle:.2f})"
        )
    excluded = unsupported_cycle_subscriptions(
        repository.fetch_subscriptions(active_only=True)
    )
    if excluded:
        names = ", ".join(
            f"{item.name} ({item.billing_cycle})" for item in excluded
        )
        print(f"Not counted (unsupported billing cycle): {names}")

    if settings.monthly_budget is not None:
        budget_use_case = GetBudgetStatusUseCase(
            subscriptions_repository=repository,
            logger=logger,
        )
        status = budget_use_case.execute(settings.monthly_budget)
        print(
            f"Budget: {round_money(status.spent)} of "
            f"{round_money(status.budget)} "
            f"({status.usage_percent:.1f}%, {status.level})"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

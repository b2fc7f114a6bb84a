"""Use case to build spend chart sectors for a reporting period."""

from src.application.ports.subscriptions_repository import (
    SubscriptionsRepositoryPort,
)
from src.domain.models.charts import ChartData
from src.domain.services.charts import build_chart_data
from src.domain.services.periods import parse_period
from src.infrastructure.logging.logger import get_app_logger


class GetSubscriptionChartUseCase:
    """Build proportional chart data for the active subscriptions."""

    def __init__(
        self,
        subscriptions_repository: SubscriptionsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            subscriptions_repository: Port providing subscriptions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = subscriptions_repository
        self._logger = logger or get_app_logger()

    def execute(self, period: str = "monthly") -> ChartData:
        """Return chart sectors and the period total.

        Args:
            period: Reporting period (monthly, quarterly or yearly).

        Returns:
            ChartData: Ordered sectors and the unfiltered period total.

        Raises:
            UnsupportedPeriodError: If ``period`` is not a known period.
        """
        target_period = parse_period(period)
        subscriptions = self._repository.fetch_subscriptions(active_only=True)
        chart = build_chart_data(
            subscriptions,
            target_period,
            logger=self._logger,
        )
        self._logger.info(
            f"Chart built for {target_period}: "
            f"{len(chart.sectors)} sectors, total={chart.total_for_period}"
        )
        return chart


__all__ = ["GetSubscriptionChartUseCase"]

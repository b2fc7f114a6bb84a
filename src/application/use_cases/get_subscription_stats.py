"""Use case to summarize subscription spend."""

from datetime import date

from src.application.ports.subscriptions_repository import (
    SubscriptionsRepositoryPort,
)
from src.domain.constants import DEFAULT_UPCOMING_DAYS
from src.domain.models.stats import SubscriptionStats
from src.domain.services.stats import compute_subscription_stats
from src.infrastructure.logging.logger import get_app_logger


class GetSubscriptionStatsUseCase:
    """Compute counts, totals and upcoming charges for all subscriptions."""

    def __init__(
        self,
        subscriptions_repository: SubscriptionsRepositoryPort,
        logger=None,
        upcoming_days: int = DEFAULT_UPCOMING_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            subscriptions_repository: Port providing subscriptions.
            logger: Optional logger compatible with logging.Logger-like API.
            upcoming_days: Look-ahead window for upcoming payments.
        """
        self._repository = subscriptions_repository
        self._logger = logger or get_app_logger()
        self._upcoming_days = upcoming_days

    def execute(self, today: date | None = None) -> SubscriptionStats:
        """Return spend statistics.

        Args:
            today: Reference date, defaults to the current day.

        Returns:
            SubscriptionStats: Summary of active subscriptions.
        """
        reference = today or date.today()
        subscriptions = self._repository.fetch_subscriptions()
        stats = compute_subscription_stats(
            subscriptions,
            today=reference,
            upcoming_days=self._upcoming_days,
            logger=self._logger,
        )
        self._logger.info(
            f"Stats computed: active={stats.active_subscriptions}, "
            f"monthly_total={stats.monthly_total}"
        )
        return stats


__all__ = ["GetSubscriptionStatsUseCase"]

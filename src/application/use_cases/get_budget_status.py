"""Use case to compare monthly subscription spend with a budget."""

from decimal import Decimal

from src.application.ports.subscriptions_repository import (
    SubscriptionsRepositoryPort,
)
from src.domain.models.stats import BudgetStatus
from src.domain.services.periods import total_for_period
from src.domain.services.stats import compute_budget_status
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetStatusUseCase:
    """Compare active monthly spend with the user's budget."""

    def __init__(
        self,
        subscriptions_repository: SubscriptionsRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = subscriptions_repository
        self._logger = logger or get_app_logger()

    def execute(self, budget: Decimal) -> BudgetStatus:
        """Return the budget status for the current subscriptions.

        Args:
            budget: Monthly budget.

        Returns:
            BudgetStatus: Usage, level and reached thresholds.
        """
        subscriptions = self._repository.fetch_subscriptions(active_only=True)
        monthly_total = total_for_period(
            subscriptions,
            "monthly",
            logger=self._logger,
        )
        status = compute_budget_status(monthly_total, budget)
        if status.level != "ok":
            self._logger.warning(
                f"Budget {status.level}: spent {status.spent} "
                f"of {status.budget} ({status.usage_percent:.1f}%)"
            )
        return status


__all__ = ["GetBudgetStatusUseCase"]

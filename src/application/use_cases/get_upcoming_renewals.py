"""Use case to list upcoming renewals and due reminders."""

from datetime import date

from src.application.ports.subscriptions_repository import (
    SubscriptionsRepositoryPort,
)
from src.domain.constants import DEFAULT_UPCOMING_DAYS
from src.domain.models.stats import UpcomingPayment
from src.domain.services.schedule import due_reminders, upcoming_payments
from src.infrastructure.logging.logger import get_app_logger


class GetUpcomingRenewalsUseCase:
    """List subscriptions renewing soon."""

    def __init__(
        self,
        subscriptions_repository: SubscriptionsRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = subscriptions_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        days: int = DEFAULT_UPCOMING_DAYS,
        today: date | None = None,
    ) -> list[UpcomingPayment]:
        """Return charges due within ``days`` days, soonest first."""
        reference = today or date.today()
        subscriptions = self._repository.fetch_subscriptions(active_only=True)
        return upcoming_payments(subscriptions, today=reference, days=days)

    def reminders(self, today: date | None = None) -> list[UpcomingPayment]:
        """Return charges whose reminder window is open."""
        reference = today or date.today()
        subscriptions = self._repository.fetch_subscriptions(active_only=True)
        due = due_reminders(subscriptions, today=reference)
        for payment in due:
            self._logger.info(
                f"Reminder: {payment.subscription.name} renews on "
                f"{payment.payment_date.isoformat()}"
            )
        return due


__all__ = ["GetUpcomingRenewalsUseCase"]

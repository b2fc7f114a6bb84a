"""SQLAlchemy-backed repository for tracked subscriptions."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.subscriptions_repository import (
    SubscriptionsRepositoryPort,
)
from src.domain.models.subscriptions import Subscription
from src.domain.services.normalization import (
    normalize_billing_cycle,
    normalize_category,
)
from src.domain.services.validation import (
    validate_amount_sign,
    validate_billing_cycle,
    validate_category,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemySubscriptionsRepository(SubscriptionsRepositoryPort):
    """Repository backed by SQLAlchemy for the ``subscriptions`` table."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the subscriptions engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_subscriptions(
        self,
        active_only: bool = False,
    ) -> list[Subscription]:
        """Return subscriptions ordered by name.

        Args:
            active_only: Skip cancelled subscriptions when true.

        Returns:
            list[Subscription]: Read-only subscription records.
        """
        sql = """
            SELECT id, name, amount, billing_cycle, category, color, logo,
                   payment_day, description, currency, start_date,
                   next_payment, reminder, reminder_days, is_active
            FROM subscriptions
            """
        if active_only:
            sql += " WHERE is_active = :is_active"
        sql += " ORDER BY name"
        params = {"is_active": True} if active_only else {}

        engine = self._db_port.get_subscriptions_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()

        subscriptions = [self._to_subscription(row) for row in rows]
        self._logger.info(f"Fetched {len(subscriptions)} subscriptions")
        return subscriptions

    def _to_subscription(self, row) -> Subscription:
        subscription_id = str(row.id)
        amount = coerce_decimal(row.amount)
        billing_cycle = normalize_billing_cycle(row.billing_cycle)
        validate_amount_sign(subscription_id, amount, self._logger)
        validate_billing_cycle(subscription_id, billing_cycle, self._logger)
        category = normalize_category(row.category)
        validate_category(subscription_id, category, self._logger)
        return Subscription(
            id=subscription_id,
            name=row.name,
            amount=amount,
            billing_cycle=billing_cycle,
            category=category,
            color=row.color or "#000000",
            logo=row.logo,
            payment_day=row.payment_day or 1,
            description=row.description,
            currency=row.currency or "USD",
            start_date=row.start_date,
            next_payment=row.next_payment,
            reminder=bool(row.reminder),
            reminder_days=(
                row.reminder_days if row.reminder_days is not None else 3
            ),
            is_active=bool(row.is_active),
        )


__all__ = ["SqlAlchemySubscriptionsRepository"]

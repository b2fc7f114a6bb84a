"""Tests for the SQLAlchemy subscriptions repository."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.infrastructure.subscriptions_repository import (
    SqlAlchemySubscriptionsRepository,
)


def _row(**overrides) -> SimpleNamespace:
    values = dict(
        id=1,
        name="Netflix",
        amount=15.99,
        billing_cycle=" Monthly ",
        category="Video",
        color="#e50914",
        logo=None,
        payment_day=5,
        description=None,
        currency="USD",
        start_date=date(2023, 1, 5),
        next_payment=None,
        reminder=1,
        reminder_days=None,
        is_active=1,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class _FakeConnection:
    def __init__(self, rows) -> None:
        self.rows = rows
        self.statements: list[tuple[str, dict]] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def execute(self, statement, params):
        self.statements.append((str(statement), params))
        return SimpleNamespace(all=lambda: self.rows)


class _FakeDbPort:
    def __init__(self, connection: _FakeConnection) -> None:
        self._connection = connection

    def get_subscriptions_engine(self):
        return SimpleNamespace(connect=lambda: self._connection)


def test_fetch_subscriptions_maps_rows():
    connection = _FakeConnection([_row()])
    repository = SqlAlchemySubscriptionsRepository(
        _FakeDbPort(connection),
        logger=MagicMock(),
    )

    (subscription,) = repository.fetch_subscriptions()

    assert subscription.id == "1"
    assert subscription.amount == Decimal("15.99")
    assert subscription.billing_cycle == "monthly"
    assert subscription.category == "video"
    assert subscription.reminder is True
    assert subscription.reminder_days == 3
    assert subscription.is_active is True
    sql, params = connection.statements[0]
    assert "FROM subscriptions" in sql
    assert "WHERE" not in sql
    assert params == {}


def test_fetch_subscriptions_filters_active_rows():
    connection = _FakeConnection([])
    repository = SqlAlchemySubscriptionsRepository(
        _FakeDbPort(connection),
        logger=MagicMock(),
    )

    assert repository.fetch_subscriptions(active_only=True) == []

    sql, params = connection.statements[0]
    assert "is_active = :is_active" in sql
    assert params == {"is_active": True}


def test_fetch_subscriptions_warns_about_suspicious_rows():
    logger = MagicMock()
    connection = _FakeConnection(
        [_row(amount=-3, billing_cycle="weekly", category=None)]
    )
    repository = SqlAlchemySubscriptionsRepository(
        _FakeDbPort(connection),
        logger=logger,
    )

    (subscription,) = repository.fetch_subscriptions()

    assert subscription.category == "other"
    assert subscription.billing_cycle == "weekly"
    warnings = [call.args[0] for call in logger.warning.call_args_list]
    assert any("negative" in message for message in warnings)
    assert any("weekly" in message for message in warnings)

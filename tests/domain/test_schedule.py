"""Tests for renewal dates, upcoming payments and reminders."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models.subscriptions import Subscription
from src.domain.services.schedule import (
    due_reminders,
    next_payment_date,
    resolve_next_payment,
    upcoming_payments,
)

TODAY = date(2024, 1, 10)


def _sub(sub_id: str, payment_day: int, **kwargs) -> Subscription:
    return Subscription(
        id=sub_id,
        name=sub_id.title(),
        amount=Decimal("10"),
        payment_day=payment_day,
        **kwargs,
    )


@pytest.mark.parametrize(
    ("payment_day", "cycle", "today", "expected"),
    [
        (15, "monthly", date(2024, 1, 10), date(2024, 1, 15)),
        (10, "monthly", date(2024, 1, 10), date(2024, 2, 10)),
        (31, "monthly", date(2024, 1, 31), date(2024, 2, 29)),
        (31, "monthly", date(2024, 2, 10), date(2024, 2, 29)),
        (1, "quarterly", date(2024, 11, 20), date(2025, 2, 1)),
        (5, "yearly", date(2024, 3, 10), date(2025, 3, 5)),
        (5, "weekly", date(2024, 1, 10), date(2024, 1, 17)),
        (5, "daily", date(2024, 1, 10), date(2024, 1, 5)),
    ],
)
def test_next_payment_date(payment_day, cycle, today, expected):
    assert next_payment_date(payment_day, cycle, today) == expected


@pytest.mark.parametrize("payment_day", [0, 32, -1])
def test_next_payment_date_rejects_invalid_day(payment_day):
    with pytest.raises(ValueError):
        next_payment_date(payment_day, "monthly", TODAY)


def test_resolve_next_payment_prefers_stored_future_date():
    stored = date(2024, 1, 20)
    subscription = _sub("a", 12, next_payment=stored)

    assert resolve_next_payment(subscription, TODAY) == stored


def test_resolve_next_payment_recomputes_stale_date():
    subscription = _sub("a", 12, next_payment=date(2023, 12, 12))

    assert resolve_next_payment(subscription, TODAY) == date(2024, 1, 12)


def test_upcoming_payments_filters_window_and_sorts():
    subs = [
        _sub("later", 15),
        _sub("soon", 12),
        _sub("outside", 25),
        _sub("cancelled", 11, is_active=False),
        _sub("tie", 12),
    ]

    payments = upcoming_payments(subs, today=TODAY, days=7)

    assert [p.subscription.id for p in payments] == ["soon", "tie", "later"]
    assert [p.days_until_payment for p in payments] == [2, 2, 5]
    assert payments[0].payment_date == date(2024, 1, 12)


def test_upcoming_payments_skip_past_dates():
    """Unsupported cycles can keep a past date; it is not upcoming."""
    subs = [_sub("daily", 5, billing_cycle="daily")]

    assert upcoming_payments(subs, today=TODAY, days=30) == []


def test_due_reminders_respects_reminder_days():
    subs = [
        _sub("due", 12, reminder=True, reminder_days=3),
        _sub("not_yet", 20, reminder=True, reminder_days=3),
        _sub("disabled", 11, reminder=False),
        _sub("wide", 20, reminder=True, reminder_days=14),
    ]

    reminders = due_reminders(subs, today=TODAY)

    assert [r.subscription.id for r in reminders] == ["due", "wide"]

"""Tests for spend statistics and budget tracking."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models.subscriptions import Subscription
from src.domain.services.stats import (
    compute_budget_status,
    compute_subscription_stats,
)


def _subscriptions() -> list[Subscription]:
    return [
        Subscription(
            id="netflix",
            name="Netflix",
            amount=Decimal("10"),
            billing_cycle="monthly",
            category="entertainment",
            payment_day=12,
        ),
        Subscription(
            id="office",
            name="Office",
            amount=Decimal("120"),
            billing_cycle="yearly",
            category="productivity",
            payment_day=20,
        ),
        Subscription(
            id="old",
            name="Old",
            amount=Decimal("5"),
            category="music",
            payment_day=11,
            is_active=False,
        ),
    ]


def test_compute_subscription_stats_uses_active_subscriptions():
    stats = compute_subscription_stats(
        _subscriptions(),
        today=date(2024, 1, 10),
    )

    assert stats.total_subscriptions == 3
    assert stats.active_subscriptions == 2
    assert stats.monthly_total == Decimal("20")
    assert stats.yearly_total == Decimal("240")
    assert stats.average_amount == Decimal("10")
    assert [c.category for c in stats.category_breakdown] == [
        "entertainment",
        "productivity",
    ]
    assert [p.subscription.id for p in stats.upcoming_payments] == [
        "netflix"
    ]


def test_compute_subscription_stats_handles_no_active():
    stats = compute_subscription_stats([], today=date(2024, 1, 10))

    assert stats.active_subscriptions == 0
    assert stats.monthly_total == Decimal("0")
    assert stats.average_amount == Decimal("0")
    assert stats.category_breakdown == []
    assert stats.upcoming_payments == []


def test_upcoming_window_is_configurable():
    stats = compute_subscription_stats(
        _subscriptions(),
        today=date(2024, 1, 10),
        upcoming_days=14,
    )

    assert [p.subscription.id for p in stats.upcoming_payments] == [
        "netflix",
        "office",
    ]


@pytest.mark.parametrize(
    ("spent", "level", "reached"),
    [
        ("50", "ok", ()),
        ("80", "ok", (75,)),
        ("85", "warning", (75,)),
        ("95", "warning", (75, 90)),
        ("100", "warning", (75, 90, 100)),
        ("120", "over", (75, 90, 100)),
    ],
)
def test_compute_budget_status_levels(spent, level, reached):
    status = compute_budget_status(Decimal(spent), Decimal("100"))

    assert status.level == level
    assert status.reached_thresholds == reached
    assert status.usage_percent == Decimal(spent)


def test_budget_status_remaining_and_progress():
    status = compute_budget_status(Decimal("120"), Decimal("100"))

    assert status.remaining == Decimal("-20")
    assert status.progress_percent == Decimal("100")


def test_budget_status_without_budget_has_no_usage():
    status = compute_budget_status(Decimal("10"), Decimal("0"))

    assert status.usage_percent == Decimal("0")
    assert status.reached_thresholds == ()
    assert status.level == "over"


def test_budget_status_accepts_custom_thresholds():
    status = compute_budget_status(
        Decimal("60"),
        Decimal("100"),
        thresholds=(90, 50),
    )

    assert status.reached_thresholds == (50,)


def test_budget_progress_is_never_negative():
    """Refunds can make spend negative; progress bars need 0-100."""
    status = compute_budget_status(Decimal("-30"), Decimal("100"))

    assert status.usage_percent == Decimal("-30")
    assert status.progress_percent == Decimal("0")
    assert status.level == "ok"


def test_stats_count_active_subscriptions_left_out_of_totals():
    weekly = Subscription(
        id="gym",
        name="Gym",
        amount=Decimal("9"),
        billing_cycle="weekly",
        payment_day=1,
    )
    stats = compute_subscription_stats(
        [*_subscriptions(), weekly],
        today=date(2024, 1, 10),
    )

    assert stats.excluded_subscriptions == 1
    assert stats.monthly_total == Decimal("20")


def test_stats_without_unsupported_cycles_exclude_nothing():
    stats = compute_subscription_stats(
        _subscriptions(),
        today=date(2024, 1, 10),
    )

    assert stats.excluded_subscriptions == 0

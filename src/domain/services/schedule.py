"""Renewal dates, upcoming payments and reminders."""

import calendar
from collections.abc import Iterable
from datetime import date, timedelta

from src.domain.constants import (
    DEFAULT_UPCOMING_DAYS,
    MONTHS_PER_PERIOD,
    WEEKLY_INTERVAL_DAYS,
)
from src.domain.models.stats import UpcomingPayment
from src.domain.models.subscriptions import Subscription


def next_payment_date(
    payment_day: int,
    billing_cycle: str,
    today: date,
) -> date:
    """Compute the next charge date from the day of month.

    The charge falls on ``payment_day`` of the current month, clamped to the
    month length. Once that date is on or before ``today`` it moves forward
    by one billing cycle (weekly charges move to a week from today).
    Unsupported cycles keep the current-month date.

    Args:
        payment_day: Day of month the charge is due (1-31).
        billing_cycle: Recurrence unit of the charge.
        today: Reference date.

    Returns:
        date: Next charge date.

    Raises:
        ValueError: If ``payment_day`` is outside 1-31.
    """
    if not 1 <= payment_day <= 31:
        raise ValueError(
            f"Payment day must be between 1 and 31, got {payment_day}"
        )
    candidate = _clamped_date(today.year, today.month, payment_day)
    if candidate > today:
        return candidate
    if billing_cycle == "weekly":
        return today + timedelta(days=WEEKLY_INTERVAL_DAYS)
    months = MONTHS_PER_PERIOD.get(billing_cycle)
    if months is None:
        return candidate
    return _add_months(today, months, payment_day)


def resolve_next_payment(subscription: Subscription, today: date) -> date:
    """Return the stored next payment, recomputing stale or missing ones."""
    stored = subscription.next_payment
    if stored is not None and stored >= today:
        return stored
    return next_payment_date(
        subscription.payment_day,
        subscription.billing_cycle,
        today,
    )


def upcoming_payments(
    subscriptions: Iterable[Subscription],
    *,
    today: date,
    days: int = DEFAULT_UPCOMING_DAYS,
) -> list[UpcomingPayment]:
    """List active subscriptions charged within the next ``days`` days.

    Args:
        subscriptions: Subscriptions to scan.
        today: Reference date.
        days: Look-ahead window, inclusive.

    Returns:
        list[UpcomingPayment]: Soonest first; ties keep input order.
    """
    payments = [
        payment
        for payment in _payments(subscriptions, today)
        if 0 <= payment.days_until_payment <= days
    ]
    return sorted(payments, key=lambda item: item.days_until_payment)


def due_reminders(
    subscriptions: Iterable[Subscription],
    *,
    today: date,
) -> list[UpcomingPayment]:
    """List charges whose reminder window has opened."""
    reminders = [
        payment
        for payment in _payments(subscriptions, today)
        if payment.subscription.reminder
        and 0 <= payment.days_until_payment <= payment.subscription.reminder_days
    ]
    return sorted(reminders, key=lambda item: item.days_until_payment)


def _payments(
    subscriptions: Iterable[Subscription],
    today: date,
) -> list[UpcomingPayment]:
    payments = []
    for subscription in subscriptions:
        if not subscription.is_active:
            continue
        payment_date = resolve_next_payment(subscription, today)
        payments.append(
            UpcomingPayment(
                subscription=subscription,
                payment_date=payment_date,
                days_until_payment=(payment_date - today).days,
            )
        )
    return payments


def _clamped_date(year: int, month: int, day: int) -> date:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def _add_months(reference: date, months: int, day: int) -> date:
    index = reference.year * 12 + reference.month - 1 + months
    year, month_index = divmod(index, 12)
    return _clamped_date(year, month_index + 1, day)


__all__ = [
    "next_payment_date",
    "resolve_next_payment",
    "upcoming_payments",
    "due_reminders",
]

"""Domain models for tracked subscriptions."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal

ReportingPeriod = Literal["monthly", "quarterly", "yearly"]
BillingCycle = Literal["weekly", "monthly", "quarterly", "yearly"]


@dataclass(frozen=True)
class Subscription:
    """Read-only view of a recurring subscription.

    Attributes:
        id: Stable identifier of the subscription.
        name: Display label.
        amount: Charge per billing cycle.
        billing_cycle: Recurrence unit of the charge.
        category: Spending category used for breakdowns.
        color: Display color used by charts.
        logo: Optional logo URL or path.
        payment_day: Day of month the charge is due (1-31).
        description: Optional free-form notes.
        currency: ISO currency code of ``amount``.
        start_date: Date the subscription started.
        next_payment: Stored next charge date, when known.
        reminder: Whether the user wants a renewal reminder.
        reminder_days: Days before the charge to remind.
        is_active: False once the subscription was cancelled.
    """

    id: str
    name: str
    amount: Decimal
    billing_cycle: str = "monthly"
    category: str = "other"
    color: str = "#000000"
    logo: str | None = None
    payment_day: int = 1
    description: str | None = None
    currency: str = "USD"
    start_date: date | None = None
    next_payment: date | None = None
    reminder: bool = False
    reminder_days: int = 3
    is_active: bool = True


__all__ = ["Subscription", "ReportingPeriod", "BillingCycle"]

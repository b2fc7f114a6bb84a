"""Domain services package."""

from .charts import build_category_breakdown, build_chart_data
from .geometry import describe_arc, polar_to_cartesian, sector_label_position
from .normalization import (
    normalize_billing_cycle,
    normalize_category,
    normalize_period,
)
from .periods import (
    amount_for_period,
    parse_period,
    total_for_period,
    unsupported_cycle_subscriptions,
)
from .schedule import (
    due_reminders,
    next_payment_date,
    resolve_next_payment,
    upcoming_payments,
)
from .stats import compute_budget_status, compute_subscription_stats
from .validation import (
    validate_amount_sign,
    validate_billing_cycle,
    validate_category,
)

__all__ = [
    "amount_for_period",
    "total_for_period",
    "parse_period",
    "unsupported_cycle_subscriptions",
    "build_chart_data",
    "build_category_breakdown",
    "polar_to_cartesian",
    "describe_arc",
    "sector_label_position",
    "next_payment_date",
    "resolve_next_payment",
    "upcoming_payments",
    "due_reminders",
    "compute_subscription_stats",
    "compute_budget_status",
    "normalize_billing_cycle",
    "normalize_category",
    "normalize_period",
    "validate_amount_sign",
    "validate_billing_cycle",
    "validate_category",
]

"""Domain constants for subscription spend analytics."""

from decimal import Decimal

REPORTING_PERIODS = ("monthly", "quarterly", "yearly")

# Billing cycles the period normalizer can convert. ``weekly`` exists in
# stored records but has no exact month factor, so it is left out.
SUPPORTED_BILLING_CYCLES = REPORTING_PERIODS

MONTHS_PER_PERIOD = {
    "monthly": 1,
    "quarterly": 3,
    "yearly": 12,
}

DEFAULT_BILLING_CYCLE = "monthly"
DEFAULT_CATEGORY = "other"

SUBSCRIPTION_CATEGORIES = (
    "entertainment",
    "productivity",
    "utilities",
    "gaming",
    "music",
    "video",
    "other",
)

# Chart sectors start at 12 o'clock.
CHART_START_ANGLE = -90.0
FULL_CIRCLE_DEGREES = 360.0
LARGE_ARC_THRESHOLD_DEGREES = 180.0

RING_GAP_DEGREES = 8.0
MIN_LABEL_ANGLE_DEGREES = 12.0

DEFAULT_UPCOMING_DAYS = 7
WEEKLY_INTERVAL_DAYS = 7

DEFAULT_BUDGET_THRESHOLDS = (75, 90, 100)
BUDGET_WARNING_RATIO = Decimal("0.8")


__all__ = [
    "REPORTING_PERIODS",
    "SUPPORTED_BILLING_CYCLES",
    "MONTHS_PER_PERIOD",
    "DEFAULT_BILLING_CYCLE",
    "DEFAULT_CATEGORY",
    "SUBSCRIPTION_CATEGORIES",
    "CHART_START_ANGLE",
    "FULL_CIRCLE_DEGREES",
    "LARGE_ARC_THRESHOLD_DEGREES",
    "RING_GAP_DEGREES",
    "MIN_LABEL_ANGLE_DEGREES",
    "DEFAULT_UPCOMING_DAYS",
    "WEEKLY_INTERVAL_DAYS",
    "DEFAULT_BUDGET_THRESHOLDS",
    "BUDGET_WARNING_RATIO",
]

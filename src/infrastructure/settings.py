"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from typing import Optional

from src.domain.constants import DEFAULT_UPCOMING_DAYS
from src.domain.models.subscriptions import ReportingPeriod
from src.domain.services.periods import parse_period
from src.infrastructure.logging.logger import get_app_logger


class InvalidSettingError(ValueError):
    """Raised when an environment value cannot be parsed."""


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the subscription dashboard.

    Attributes:
        reporting_period: Default period used by charts and reports.
        monthly_budget: Optional monthly budget for spend tracking.
        upcoming_days: Look-ahead window for upcoming renewals.
        currency: Currency code used for display.
    """

    reporting_period: ReportingPeriod = "monthly"
    monthly_budget: Optional[Decimal] = None
    upcoming_days: int = DEFAULT_UPCOMING_DAYS
    currency: str = "USD"

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.

        Raises:
            UnsupportedPeriodError: If ``REPORTING_PERIOD`` is unknown.
            InvalidSettingError: If a numeric value cannot be parsed.
        """
        period = parse_period(os.getenv("REPORTING_PERIOD", "monthly"))
        budget = cls._parse_budget(os.getenv("MONTHLY_BUDGET"))
        upcoming_days = cls._parse_days(os.getenv("UPCOMING_DAYS"))
        currency = os.getenv("CURRENCY", "USD").strip().upper() or "USD"
        return cls(
            reporting_period=period,
            monthly_budget=budget,
            upcoming_days=upcoming_days,
            currency=currency,
        )

    @staticmethod
    def _parse_budget(raw_value: str | None) -> Decimal | None:
        """Parse the monthly budget.

        Args:
            raw_value: Raw ``MONTHLY_BUDGET`` value.

        Returns:
            Decimal | None: Budget, or None when unset.
        """
        if raw_value is None or not raw_value.strip():
            return None
        try:
            budget = Decimal(raw_value.strip())
        except InvalidOperation as exc:
            raise InvalidSettingError(
                f"MONTHLY_BUDGET must be a number, got {raw_value!r}"
            ) from exc
        if budget <= 0:
            get_app_logger().warning(
                f"MONTHLY_BUDGET is not positive ({budget}); "
                "budget tracking is disabled"
            )
            return None
        return budget

    @staticmethod
    def _parse_days(raw_value: str | None) -> int:
        if raw_value is None or not raw_value.strip():
            return DEFAULT_UPCOMING_DAYS
        try:
            days = int(raw_value.strip())
        except ValueError as exc:
            raise InvalidSettingError(
                f"UPCOMING_DAYS must be an integer, got {raw_value!r}"
            ) from exc
        if days < 0:
            raise InvalidSettingError(
                f"UPCOMING_DAYS must not be negative, got {days}"
            )
        return days


__all__ = ["DashboardSettings", "InvalidSettingError"]

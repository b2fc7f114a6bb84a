"""Domain errors."""

from src.domain.constants import REPORTING_PERIODS


class UnsupportedPeriodError(ValueError):
    """Raised when a reporting period string cannot be validated."""

    def __init__(self, period) -> None:
        self.period = period
        supported = ", ".join(REPORTING_PERIODS)
        super().__init__(
            f"Unsupported reporting period: {period!r} "
            f"(expected one of {supported})"
        )


__all__ = ["UnsupportedPeriodError"]

"""Domain normalization helpers for raw subscription fields."""

from src.domain.constants import DEFAULT_BILLING_CYCLE, DEFAULT_CATEGORY


def normalize_billing_cycle(billing_cycle: str | None) -> str:
    """Normalize billing cycle values.

    Args:
        billing_cycle: Raw billing cycle from a repository or form.

    Returns:
        str: Lower-cased cycle, ``monthly`` when missing.
    """
    if not billing_cycle:
        return DEFAULT_BILLING_CYCLE
    cleaned = billing_cycle.strip().lower()
    return cleaned or DEFAULT_BILLING_CYCLE


def normalize_category(category: str | None) -> str:
    """Normalize category values.

    Args:
        category: Raw category label.

    Returns:
        str: Lower-cased category, ``other`` when missing.
    """
    if not category:
        return DEFAULT_CATEGORY
    cleaned = category.strip().lower()
    return cleaned or DEFAULT_CATEGORY


def normalize_period(period: str | None) -> str | None:
    """Normalize reporting period values.

    Args:
        period: Raw period from settings, CLI flags or UI state.

    Returns:
        str | None: Lower-cased period, or None when empty.
    """
    if not period:
        return None
    cleaned = period.strip().lower()
    return cleaned or None


__all__ = ["normalize_billing_cycle", "normalize_category", "normalize_period"]

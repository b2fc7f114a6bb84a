"""Helpers for Decimal normalization of subscription amounts."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so ``9.99`` stays ``Decimal("9.99")``.

    Args:
        value: Raw amount from SQL rows, settings or callers.

    Returns:
        Decimal: Normalized numeric value (zero for ``None``).
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    """Round an amount to cents for display."""
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "round_money", "CENT"]

"""Tests for raw field normalization and validation warnings."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.services.normalization import (
    normalize_billing_cycle,
    normalize_category,
    normalize_period,
)
from src.domain.services.validation import (
    validate_amount_sign,
    validate_billing_cycle,
    validate_category,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, "monthly"),
        ("", "monthly"),
        ("  ", "monthly"),
        (" YEARLY", "yearly"),
    ],
)
def test_normalize_billing_cycle(raw, expected):
    assert normalize_billing_cycle(raw) == expected


def test_normalize_category_defaults_to_other():
    assert normalize_category(None) == "other"
    assert normalize_category(" Gaming ") == "gaming"


def test_normalize_period_returns_none_for_blank():
    assert normalize_period("   ") is None
    assert normalize_period("Quarterly") == "quarterly"


def test_validators_only_log_suspicious_values():
    logger = MagicMock()

    validate_amount_sign("1", Decimal("5"), logger)
    validate_billing_cycle("1", "yearly", logger)
    validate_category("1", "music", logger)
    logger.warning.assert_not_called()
    logger.info.assert_not_called()

    validate_amount_sign("2", Decimal("-1"), logger)
    validate_billing_cycle("2", "weekly", logger)
    validate_category("2", "pets", logger)
    assert logger.warning.call_count == 2
    assert "pets" in logger.info.call_args.args[0]

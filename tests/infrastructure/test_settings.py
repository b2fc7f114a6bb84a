"""Tests for infrastructure settings."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import UnsupportedPeriodError
from src.infrastructure import settings as settings_module
from src.infrastructure.settings import DashboardSettings, InvalidSettingError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "REPORTING_PERIOD",
        "MONTHLY_BUDGET",
        "UPCOMING_DAYS",
        "CURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults():
    settings = DashboardSettings.from_env()

    assert settings == DashboardSettings()
    assert settings.reporting_period == "monthly"
    assert settings.monthly_budget is None
    assert settings.upcoming_days == 7


def test_from_env_reads_values(monkeypatch):
    monkeypatch.setenv("REPORTING_PERIOD", "Yearly")
    monkeypatch.setenv("MONTHLY_BUDGET", "150.50")
    monkeypatch.setenv("UPCOMING_DAYS", "14")
    monkeypatch.setenv("CURRENCY", "eur")

    settings = DashboardSettings.from_env()

    assert settings.reporting_period == "yearly"
    assert settings.monthly_budget == Decimal("150.50")
    assert settings.upcoming_days == 14
    assert settings.currency == "EUR"


def test_from_env_rejects_unknown_period(monkeypatch):
    monkeypatch.setenv("REPORTING_PERIOD", "weekly")

    with pytest.raises(UnsupportedPeriodError):
        DashboardSettings.from_env()


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("MONTHLY_BUDGET", "a lot"),
        ("UPCOMING_DAYS", "soon"),
        ("UPCOMING_DAYS", "-1"),
    ],
)
def test_from_env_rejects_malformed_numbers(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(InvalidSettingError):
        DashboardSettings.from_env()


def test_non_positive_budget_disables_tracking(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    monkeypatch.setenv("MONTHLY_BUDGET", "0")

    settings = DashboardSettings.from_env()

    assert settings.monthly_budget is None
    fake_logger.warning.assert_called_once()

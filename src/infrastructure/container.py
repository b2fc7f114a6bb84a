"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.subscriptions_repository import (
    SubscriptionsRepositoryPort,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.subscriptions_repository import (
    SqlAlchemySubscriptionsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_subscriptions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SubscriptionsRepositoryPort:
    """Return the subscriptions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySubscriptionsRepository(
        resolved_db,
        logger=get_app_logger(),
    )


def build_settings() -> DashboardSettings:
    """Return dashboard settings read from the environment."""
    return DashboardSettings.from_env()


__all__ = [
    "build_database_adapter",
    "build_subscriptions_repository",
    "build_settings",
]

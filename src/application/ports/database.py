"""Database ports for the subscription dashboard.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the subscriptions database engine.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_subscriptions_engine(self) -> Engine:
        """Get the engine for the subscriptions database.

        Returns:
            Engine: SQLAlchemy engine connected to the subscriptions store.
        """


__all__ = ["DatabaseEnginePort"]

"""Engine access for the subscriptions store.

The dashboard and the CLIs read subscriptions through one pooled engine.
Its URL comes from ``SUBSCRIPTIONS_DB_URL``, either exported in the shell
or declared in a ``.env`` file at the project root.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` before the lookup.

    Args:
        name: Variable holding the setting, e.g. ``SUBSCRIPTIONS_DB_URL``.

    Returns:
        str: Non-empty value of the variable.

    Raises:
        RuntimeError: If the variable is unset or blank, naming it so the
            user knows what to add to ``.env``.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Open a pooled engine on the subscriptions store.

    The dashboard reruns its queries on every interaction, so up to ten
    connections are kept and each one is pinged before reuse.

    Args:
        db_url: SQLAlchemy URL, e.g. ``sqlite:///subscriptions.db``.

    Returns:
        Engine: Engine ready for ``text()`` queries.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_subscriptions_engine: Optional[Engine] = None


def get_subscriptions_engine() -> Engine:
    """Return the process-wide engine, creating it on first use.

    Returns:
        Engine: Shared engine built from ``SUBSCRIPTIONS_DB_URL``.
    """
    global _subscriptions_engine
    if _subscriptions_engine is None:
        db_url = _get_env_var("SUBSCRIPTIONS_DB_URL")
        _subscriptions_engine = _create_engine(db_url)
    return _subscriptions_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Hands the shared subscriptions engine to the repository."""

    def get_subscriptions_engine(self) -> Engine:
        """Return the shared engine from ``get_subscriptions_engine``."""
        return get_subscriptions_engine()


__all__ = [
    "get_subscriptions_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]

"""Application ports package."""

from .database import DatabaseEnginePort
from .subscriptions_repository import SubscriptionsRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "SubscriptionsRepositoryPort",
]

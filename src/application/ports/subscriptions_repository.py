"""Port for reading tracked subscriptions."""

from typing import Protocol

from src.domain.models.subscriptions import Subscription


class SubscriptionsRepositoryPort(Protocol):
    """Port exposing read access to the user's subscriptions."""

    def fetch_subscriptions(
        self,
        active_only: bool = False,
    ) -> list[Subscription]:
        """Return subscriptions, optionally only the active ones."""


__all__ = ["SubscriptionsRepositoryPort"]

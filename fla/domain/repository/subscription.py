"""Subscription repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from fla.domain.model.subscription import Subscription
from fla.domain.value import Email, SubscriptionId


class SubscriptionRepository(ABC):
    """Repository interface for newsletter subscriptions."""

    @abstractmethod
    async def save(self, subscription: Subscription) -> Subscription:
        pass

    @abstractmethod
    async def find_by_id(
        self, subscription_id: SubscriptionId
    ) -> Optional[Subscription]:
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[Subscription]:
        """Find a subscription by email address, ignoring case."""
        pass

    @abstractmethod
    async def find_active(self) -> list[Subscription]:
        """Find subscriptions that can currently receive emails."""
        pass

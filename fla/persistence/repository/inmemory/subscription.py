"""In-memory implementation of Subscription repository."""

from typing import Optional

from fla.domain.model.subscription import Subscription
from fla.domain.repository.subscription import SubscriptionRepository
from fla.domain.value import Email, SubscriptionId


class InMemorySubscriptionRepository(SubscriptionRepository):
    """In-memory implementation of SubscriptionRepository."""

    def __init__(self) -> None:
        self._subscriptions: dict[SubscriptionId, Subscription] = {}

    async def save(self, subscription: Subscription) -> Subscription:
        self._subscriptions[subscription.id] = subscription
        return subscription

    async def find_by_id(
        self, subscription_id: SubscriptionId
    ) -> Optional[Subscription]:
        return self._subscriptions.get(subscription_id)

    async def find_by_email(self, email: Email) -> Optional[Subscription]:
        wanted = email.root.lower()
        for subscription in self._subscriptions.values():
            if subscription.email.root.lower() == wanted:
                return subscription
        return None

    async def find_active(self) -> list[Subscription]:
        return [s for s in self._subscriptions.values() if s.can_receive_emails]

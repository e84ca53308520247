"""Newsletter subscription service."""

import logfire

from fla.domain.clock import Clock
from fla.domain.error import ConflictError
from fla.domain.model.subscription import SUBSCRIPTION_EMAIL_EXISTS, Subscription
from fla.domain.repository.subscription import SubscriptionRepository
from fla.domain.value import Email, FirstName, SubscriptionId

from .base import Service


class SubscriptionService(Service):
    """Domain service for newsletter subscriptions."""

    def __init__(
        self, subscription_repository: SubscriptionRepository, clock: Clock
    ) -> None:
        self.subscription_repository = subscription_repository
        self.clock = clock

    async def subscribe(
        self, email: Email | str, first_name: FirstName | str = ""
    ) -> Subscription:
        """Subscribe an email address.

        A previously unsubscribed address is reactivated instead of
        duplicated.

        Raises:
            DomainError: If the email or name is invalid
            ConflictError: If the address is already subscribed
            ValidationError: If the address bounced or complained
        """
        op = "SubscriptionService.subscribe"
        with logfire.span("subscription_service.subscribe"):
            subscription = Subscription.create(
                id=SubscriptionId.generate(),
                first_name=first_name,
                email=email,
                clock=self.clock,
            )

            existing = await self.subscription_repository.find_by_email(
                subscription.email
            )
            if existing is not None:
                if existing.is_subscribed:
                    raise ConflictError(SUBSCRIPTION_EMAIL_EXISTS, operation=op)
                subscription = existing.resubscribe()
                logfire.info("Subscription reactivated", subscription_id=str(existing.id))

            saved = await self.subscription_repository.save(subscription)
            logfire.info("Subscribed", subscription_id=str(saved.id))
            return saved

    async def unsubscribe(self, email: Email | str) -> Subscription:
        """Unsubscribe an email address.

        Raises:
            NotFoundError: If the address has no subscription
            ConflictError: If the subscription is not active
        """
        with logfire.span("subscription_service.unsubscribe"):
            if not isinstance(email, Email):
                email = Email(email)
            existing = self.require(
                await self.subscription_repository.find_by_email(email),
                "Subscription",
                email,
                operation="SubscriptionService.unsubscribe",
            )

            saved = await self.subscription_repository.save(existing.unsubscribe())
            logfire.info("Unsubscribed", subscription_id=str(saved.id))
            return saved

"""Newsletter subscription entity."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from fla.domain.clock import Clock
from fla.domain.error import ConflictError, DomainError, ValidationError
from fla.domain.model.common import DomainModel
from fla.domain.value import Email, FirstName, SubscriptionId, SubscriptionStatus

SUBSCRIPTION_EMAIL_EXISTS = "Email is already subscribed."
SUBSCRIPTION_ALREADY_ACTIVE = "Subscription is already active."
SUBSCRIPTION_NOT_ACTIVE = "Subscription is not active."
SUBSCRIPTION_NOT_RESUBSCRIBABLE = (
    "Cannot resubscribe: subscription was not voluntarily unsubscribed."
)


class Subscription(DomainModel):
    """Newsletter subscription.

    Bounced and complained subscriptions are terminal: only a voluntary
    unsubscription can be reverted.
    """

    id: SubscriptionId
    first_name: FirstName
    email: Email
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE
    subscribed_at: datetime
    unsubscribed_at: Optional[datetime] = None
    updated_at: datetime

    # No default; storage adapters pass it to restore()
    clock: Clock = Field(exclude=True, repr=False)

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: object) -> SubscriptionStatus:
        return SubscriptionStatus.parse(v)  # type: ignore[arg-type]

    @classmethod
    def create(
        cls,
        *,
        id: SubscriptionId,
        first_name: FirstName | str,
        email: Email | str,
        clock: Clock,
    ) -> "Subscription":
        now = clock.now()
        try:
            return cls(
                id=id,
                first_name=first_name,
                email=email,
                subscribed_at=now,
                updated_at=now,
                clock=clock,
            )
        except DomainError as err:
            raise DomainError(operation="Subscription.create") from err

    @classmethod
    def restore(cls, data: dict[str, Any], clock: Clock) -> "Subscription":
        """Rebuild a stored subscription with the given time source."""
        return cls.model_validate({**data, "clock": clock})

    def unsubscribe(self) -> "Subscription":
        """Raises ConflictError unless the subscription is active."""
        if self.status is not SubscriptionStatus.ACTIVE:
            raise ConflictError(
                SUBSCRIPTION_NOT_ACTIVE, operation="Subscription.unsubscribe"
            )
        now = self.clock.now()
        return self.model_copy(
            update={
                "status": SubscriptionStatus.UNSUBSCRIBED,
                "unsubscribed_at": now,
                "updated_at": now,
            }
        )

    def resubscribe(self) -> "Subscription":
        op = "Subscription.resubscribe"
        if self.status is SubscriptionStatus.ACTIVE:
            raise ConflictError(SUBSCRIPTION_ALREADY_ACTIVE, operation=op)
        if self.status is not SubscriptionStatus.UNSUBSCRIBED:
            raise ValidationError(SUBSCRIPTION_NOT_RESUBSCRIBABLE, operation=op)
        return self.model_copy(
            update={
                "status": SubscriptionStatus.ACTIVE,
                "unsubscribed_at": None,
                "updated_at": self.clock.now(),
            }
        )

    def mark_as_bounced(self) -> "Subscription":
        return self.model_copy(
            update={"status": SubscriptionStatus.BOUNCED, "updated_at": self.clock.now()}
        )

    def mark_as_complained(self) -> "Subscription":
        return self.model_copy(
            update={
                "status": SubscriptionStatus.COMPLAINED,
                "updated_at": self.clock.now(),
            }
        )

    @property
    def is_subscribed(self) -> bool:
        return self.status is SubscriptionStatus.ACTIVE

    @property
    def can_receive_emails(self) -> bool:
        return self.is_subscribed

    @property
    def display_name(self) -> str:
        """First name if given, otherwise the email address."""
        return self.first_name.root or self.email.root

    def __str__(self) -> str:
        return (
            f"Subscription(id={self.id.root!r}, name={self.first_name.root!r}, "
            f"email={self.email.root!r}, status={self.status.value!r}, "
            f"subscribed_at={self.subscribed_at.isoformat()})"
        )

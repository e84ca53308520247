"""Unit tests for the Subscription entity."""

from datetime import timedelta

import pytest
from pydantic import ValidationError as PydanticValidationError

from fla.domain.error import ConflictError, DomainError, ValidationError, error_message
from fla.domain.model import Subscription
from fla.domain.value import SubscriptionId, SubscriptionStatus


@pytest.fixture
def subscription(clock):
    return Subscription.create(
        id=SubscriptionId("s1"),
        first_name="Amélie",
        email="amelie@example.com",
        clock=clock,
    )


class TestCreate:
    """Tests for Subscription.create."""

    def test_new_subscription_is_active(self, subscription, now):
        assert subscription.status is SubscriptionStatus.ACTIVE
        assert subscription.is_subscribed
        assert subscription.can_receive_emails
        assert subscription.subscribed_at == now
        assert subscription.unsubscribed_at is None

    def test_invalid_email(self, clock):
        with pytest.raises(DomainError) as exc_info:
            Subscription.create(
                id=SubscriptionId("s1"), first_name="", email="nope", clock=clock
            )

        assert error_message(exc_info.value) == "Invalid email format."

    def test_display_name(self, subscription, clock):
        anonymous = Subscription.create(
            id=SubscriptionId("s2"), first_name="", email="anon@example.com", clock=clock
        )

        assert subscription.display_name == "Amélie"
        assert anonymous.display_name == "anon@example.com"


class TestLifecycle:
    """Tests for unsubscribe, resubscribe and delivery failures."""

    def test_unsubscribe(self, subscription, clock, now):
        clock.advance(timedelta(days=3))

        unsubscribed = subscription.unsubscribe()

        assert unsubscribed.status is SubscriptionStatus.UNSUBSCRIBED
        assert unsubscribed.unsubscribed_at == now + timedelta(days=3)
        assert not unsubscribed.is_subscribed
        assert subscription.is_subscribed

    def test_unsubscribe_twice_conflicts(self, subscription):
        with pytest.raises(ConflictError) as exc_info:
            subscription.unsubscribe().unsubscribe()

        assert exc_info.value.message == "Subscription is not active."

    def test_resubscribe(self, subscription):
        resubscribed = subscription.unsubscribe().resubscribe()

        assert resubscribed.is_subscribed
        assert resubscribed.unsubscribed_at is None

    def test_resubscribe_active_conflicts(self, subscription):
        with pytest.raises(ConflictError) as exc_info:
            subscription.resubscribe()

        assert exc_info.value.message == "Subscription is already active."

    @pytest.mark.parametrize("method", ["mark_as_bounced", "mark_as_complained"])
    def test_delivery_failures_are_terminal(self, subscription, method):
        failed = getattr(subscription, method)()

        assert not failed.can_receive_emails
        with pytest.raises(ValidationError):
            failed.resubscribe()
        with pytest.raises(ConflictError):
            failed.unsubscribe()

    def test_mark_as_bounced_sets_status(self, subscription):
        assert subscription.mark_as_bounced().status is SubscriptionStatus.BOUNCED
        assert subscription.mark_as_complained().status is SubscriptionStatus.COMPLAINED


class TestRestore:
    """Tests for rebuilding stored subscriptions."""

    def test_restore_with_clock(self, subscription, clock, now):
        clock.advance(timedelta(hours=1))
        restored = Subscription.restore(subscription.model_dump(), clock)

        assert restored == subscription
        assert restored.unsubscribe().unsubscribed_at == now + timedelta(hours=1)

    def test_missing_clock_is_rejected(self, subscription):
        with pytest.raises(PydanticValidationError):
            Subscription.model_validate(subscription.model_dump())

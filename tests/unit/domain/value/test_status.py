"""Unit tests for the post status transition table."""

import itertools

import pytest

from fla.domain.error import ValidationError
from fla.domain.value import PostStatus

ALLOWED = {
    (PostStatus.DRAFT, PostStatus.PUBLISHED),
    (PostStatus.DRAFT, PostStatus.SCHEDULED),
    (PostStatus.PUBLISHED, PostStatus.DRAFT),
    (PostStatus.PUBLISHED, PostStatus.ARCHIVED),
    (PostStatus.SCHEDULED, PostStatus.DRAFT),
    (PostStatus.SCHEDULED, PostStatus.PUBLISHED),
    (PostStatus.ARCHIVED, PostStatus.PUBLISHED),
}


class TestCanTransitionTo:
    """Tests for PostStatus.can_transition_to."""

    @pytest.mark.parametrize(
        "source, target", list(itertools.product(PostStatus, PostStatus))
    )
    def test_table_is_total(self, source, target):
        """Every pair is allowed exactly when listed, or when it is a self-transition."""
        expected = source is target or (source, target) in ALLOWED

        assert source.can_transition_to(target) is expected

    @pytest.mark.parametrize(
        "source, target",
        [
            (PostStatus.ARCHIVED, PostStatus.DRAFT),
            (PostStatus.ARCHIVED, PostStatus.SCHEDULED),
            (PostStatus.DRAFT, PostStatus.ARCHIVED),
            (PostStatus.PUBLISHED, PostStatus.SCHEDULED),
        ],
    )
    def test_rejected_transitions(self, source, target):
        assert not source.can_transition_to(target)

    def test_accepts_raw_values(self):
        assert PostStatus.DRAFT.can_transition_to("published")

    def test_unknown_target_is_rejected_before_table(self):
        """Unknown statuses never pass, not even through the self-transition branch."""
        with pytest.raises(ValidationError) as exc_info:
            PostStatus.DRAFT.can_transition_to("deleted")

        assert exc_info.value.message == "Invalid status."


class TestParse:
    """Tests for PostStatus.parse."""

    def test_parse_known_value(self):
        assert PostStatus.parse("scheduled") is PostStatus.SCHEDULED

    @pytest.mark.parametrize("value", ["", "Draft", "pending"])
    def test_parse_unknown_value(self, value):
        with pytest.raises(ValidationError):
            PostStatus.parse(value)

    def test_allowed_transitions(self):
        assert PostStatus.ARCHIVED.allowed_transitions == frozenset(
            {PostStatus.PUBLISHED}
        )

"""Unit tests for the Tag entity."""

import pytest

from fla.domain.error import DomainError, error_message
from fla.domain.model import Tag
from fla.domain.value import TagId, UserId


def test_create_tag(clock, now):
    tag = Tag.create(id=TagId("t1"), name="  grammaire ", created_by=UserId("u1"), clock=clock)

    assert tag.name.root == "grammaire"
    assert tag.created_at == now
    assert str(tag) == "grammaire"


def test_blank_tag_name_is_invalid(clock):
    with pytest.raises(DomainError) as exc_info:
        Tag.create(id=TagId("t1"), name=" ", created_by=UserId("u1"), clock=clock)

    assert exc_info.value.operation == "Tag.create"
    assert error_message(exc_info.value) == "Missing tag name."

"""Test configuration and fixtures."""

from datetime import datetime

import pytest

from fla.domain.clock import Clock, FixedClock
from fla.domain.model import Category, Post, User
from fla.domain.value import CategoryId, PostId, Role, UserId
from tests.di import TEST_NOW

# Long enough for PostContent (over 300 characters)
SAMPLE_CONTENT = (
    "Apprendre le français demande de la pratique régulière et de la patience. "
    * 5
    + "Bonne lecture à tous les étudiants !"
)


def make_user(
    *roles: Role,
    user_id: str = "user-1",
    username: str | None = None,
    clock: Clock | None = None,
) -> User:
    """Helper to build a user with the given roles (author by default)."""
    return User.create(
        id=UserId(user_id),
        username=username or user_id,
        email=f"{user_id}@example.com",
        roles=roles or (Role.AUTHOR,),
        clock=clock or FixedClock(TEST_NOW),
    )


def make_category(
    name: str = "A1",
    category_id: str | None = None,
    parent_id: CategoryId | None = None,
    clock: Clock | None = None,
) -> Category:
    """Helper to build a category; the ID defaults to its slug."""
    category = Category.create(
        id=CategoryId(category_id or "cat-" + name.lower().replace(" ", "-")),
        name=name,
        parent_id=parent_id,
        created_by=UserId("admin-1"),
        clock=clock or FixedClock(TEST_NOW),
    )
    return category


def make_post(
    owner: UserId | None = None,
    title: str = "Les verbes du premier groupe",
    content: str = SAMPLE_CONTENT,
    post_id: str = "post-1",
    category: Category | None = None,
    clock: Clock | None = None,
    **kwargs,
) -> Post:
    """Helper to build a draft post."""
    return Post.create(
        id=PostId(post_id),
        owner=owner or UserId("author-1"),
        title=title,
        content=content,
        category=category or make_category(),
        clock=clock or FixedClock(TEST_NOW),
        **kwargs,
    )


@pytest.fixture
def now() -> datetime:
    return TEST_NOW


@pytest.fixture
def clock() -> FixedClock:
    """Fresh fixed clock per test."""
    return FixedClock(TEST_NOW)

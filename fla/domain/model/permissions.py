"""Permission capabilities consumed by the post workflow.

The workflow never looks users up. Anything exposing ``has_role``,
``has_any_role`` and ``get_id`` can authorize a transition: the concrete
User entity, a service account, or a test double.
"""

from typing import Protocol

from fla.domain.value import PostStatus, Role, UserId

# Roles allowed to approve, publish, schedule and archive content
EDITORIAL_ROLES: tuple[Role, ...] = (Role.ADMIN, Role.EDITOR)


class PermissionChecker(Protocol):
    """Minimal capability set of an authorizer."""

    def has_role(self, role: Role) -> bool: ...

    def has_any_role(self, *roles: Role) -> bool: ...

    def get_id(self) -> UserId: ...


class OwnedContent(Protocol):
    """Content whose permissions depend on its owner and status."""

    @property
    def owner(self) -> UserId: ...

    @property
    def status(self) -> PostStatus: ...


class PostPermissionChecker(PermissionChecker, Protocol):
    """Authorizer that can also decide on editing rights."""

    def can_edit_post(self, post: OwnedContent) -> bool: ...

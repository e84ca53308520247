"""User aggregate root.

Users carry one or more roles. Besides identity and profile data, the
entity implements the permission capabilities the post workflow consumes.
"""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from fla.domain.clock import Clock
from fla.domain.error import DomainError, ValidationError
from fla.domain.model.common import DomainModel
from fla.domain.model.permissions import EDITORIAL_ROLES, OwnedContent
from fla.domain.value import (
    Description,
    Email,
    FirstName,
    LastName,
    PostStatus,
    Role,
    UserId,
    Username,
)

USER_ROLE_MISSING = "Missing roles. One role should be set."


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    email: Email
    roles: tuple[Role, ...]
    first_name: Optional[FirstName] = None
    last_name: Optional[LastName] = None
    bio: Optional[Description] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("roles", mode="before")
    @classmethod
    def validate_roles(cls, v: object) -> tuple[Role, ...]:
        """Require at least one known role."""
        if isinstance(v, (str, Role)):
            v = (v,)
        roles = tuple(Role.parse(role) for role in v)  # type: ignore[union-attr]
        if not roles:
            raise ValidationError(USER_ROLE_MISSING, operation="User.validate_roles")
        return roles

    @classmethod
    def create(
        cls,
        *,
        id: UserId,
        username: Username | str,
        email: Email | str,
        roles: list[Role] | tuple[Role, ...],
        clock: Clock,
        first_name: FirstName | str | None = None,
        last_name: LastName | str | None = None,
        bio: Description | str | None = None,
    ) -> "User":
        """Create a validated user account.

        Raises:
            DomainError: If identity, profile or roles are invalid
        """
        now = clock.now()
        try:
            return cls(
                id=id,
                username=username,
                email=email,
                roles=roles,
                first_name=first_name,
                last_name=last_name,
                bio=bio,
                created_at=now,
                updated_at=now,
            )
        except DomainError as err:
            raise DomainError(operation="User.create") from err

    def has_role(self, role: Role) -> bool:
        return role in self.roles

    def has_any_role(self, *roles: Role) -> bool:
        return any(self.has_role(role) for role in roles)

    def get_id(self) -> UserId:
        return self.id

    @property
    def display_name(self) -> str:
        """First name, falling back to the username."""
        if self.first_name is not None and self.first_name.root:
            return self.first_name.root
        return self.username.root

    @property
    def full_name(self) -> str:
        parts = [
            name.root
            for name in (self.first_name, self.last_name)
            if name is not None and name.root
        ]
        return " ".join(parts)

    # Content permissions

    def can_create_post(self) -> bool:
        return self.has_any_role(Role.ADMIN, Role.EDITOR, Role.AUTHOR)

    def can_view_post(self, post: OwnedContent) -> bool:
        """Published content is public; anything else needs ownership or an editorial role."""
        if post.status is PostStatus.PUBLISHED:
            return True
        return post.owner == self.id or self.has_any_role(*EDITORIAL_ROLES)

    def can_edit_post(self, post: OwnedContent) -> bool:
        if self.has_any_role(*EDITORIAL_ROLES):
            return True
        return post.owner == self.id and self.has_role(Role.AUTHOR)

    def can_delete_post(self, post: OwnedContent) -> bool:
        """Admins delete anything; owners only their drafts."""
        if self.has_role(Role.ADMIN):
            return True
        return post.owner == self.id and post.status is PostStatus.DRAFT

    def can_publish_post(self, post: OwnedContent) -> bool:
        if self.has_any_role(*EDITORIAL_ROLES):
            return True
        return post.owner == self.id and self.has_role(Role.AUTHOR)

    def can_schedule_post(self, post: OwnedContent) -> bool:
        return self.can_publish_post(post)

    def can_archive_post(self, post: OwnedContent) -> bool:
        return self.has_any_role(*EDITORIAL_ROLES)

    def can_change_post_status(
        self, post: OwnedContent, new_status: PostStatus | str
    ) -> bool:
        try:
            new_status = PostStatus.parse(new_status)
        except ValidationError:
            return False
        if new_status is PostStatus.DRAFT:
            return self.can_edit_post(post)
        if new_status is PostStatus.PUBLISHED:
            return self.can_publish_post(post)
        if new_status is PostStatus.SCHEDULED:
            return self.can_schedule_post(post)
        return self.can_archive_post(post)

    def can_add_tag_to_post(self, post: OwnedContent) -> bool:
        return self.can_edit_post(post)

    def can_change_post_category(self, post: OwnedContent) -> bool:
        return self.can_edit_post(post)

    def can_manage_categories(self) -> bool:
        return self.has_any_role(*EDITORIAL_ROLES)

    def can_manage_tags(self) -> bool:
        return self.has_any_role(*EDITORIAL_ROLES)

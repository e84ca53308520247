"""Post publication status and its transition table."""

from enum import Enum

from fla.domain.error import ValidationError

STATUS_INVALID = "Invalid status."


class PostStatus(str, Enum):
    """Publication state of a post in the editorial workflow."""

    DRAFT = "draft"  # Work in progress, not visible to the public
    PUBLISHED = "published"  # Live content
    ARCHIVED = "archived"  # Removed from active circulation
    SCHEDULED = "scheduled"  # Queued for future publication

    @classmethod
    def parse(cls, value: "str | PostStatus") -> "PostStatus":
        """Convert a raw value to a PostStatus.

        Raises:
            ValidationError: If the value is not a known status
        """
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(STATUS_INVALID, operation="PostStatus.parse") from None

    @property
    def allowed_transitions(self) -> frozenset["PostStatus"]:
        """Statuses reachable from this one in a single step."""
        return _ALLOWED_TRANSITIONS[self]

    def can_transition_to(self, target: "str | PostStatus") -> bool:
        """Check the transition table.

        Staying in the same status is always allowed. Unknown target values
        are rejected before the table is consulted.

        Raises:
            ValidationError: If ``target`` is not a known status
        """
        target = PostStatus.parse(target)
        if target is self:
            return True
        return target in _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS: dict[PostStatus, frozenset[PostStatus]] = {
    PostStatus.DRAFT: frozenset({PostStatus.PUBLISHED, PostStatus.SCHEDULED}),
    PostStatus.PUBLISHED: frozenset({PostStatus.DRAFT, PostStatus.ARCHIVED}),
    PostStatus.SCHEDULED: frozenset({PostStatus.DRAFT, PostStatus.PUBLISHED}),
    PostStatus.ARCHIVED: frozenset({PostStatus.PUBLISHED}),
}

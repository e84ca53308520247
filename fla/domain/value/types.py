"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules: text is trimmed, then checked, and any
failure raises a coded ValidationError.
"""

import re
from enum import Enum

from pydantic import field_validator

from fla.domain.error import DomainError, ValidationError
from fla.domain.value.common import RootValueObject
from fla.domain.value.limits import (
    MAX_CATEGORY_NAME_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_FIRST_NAME_LENGTH,
    MAX_LAST_NAME_LENGTH,
    MAX_POST_CONTENT_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_TAG_NAME_LENGTH,
    MAX_TITLE_LENGTH,
    MAX_USERNAME_LENGTH,
    MIN_CATEGORY_NAME_LENGTH,
    MIN_POST_CONTENT_LENGTH,
    MIN_TAG_NAME_LENGTH,
    MIN_TITLE_LENGTH,
    MIN_USERNAME_LENGTH,
)
from fla.domain.value.slug import SLUG_FORMAT_RE, SLUG_INVALID_CHARS, generate_slug
from fla.domain.value.validators import (
    validate_length,
    validate_max_length,
    validate_min_length,
    validate_presence,
)

EMAIL_INVALID_FORMAT = "Invalid email format."
USERNAME_INVALID_CHARS = (
    "Username can only contain letters, numbers, underscores, and hyphens."
)
ROLE_INVALID = "Invalid role."
SCHEMA_TYPE_INVALID = "Invalid schema type."
SUBSCRIPTION_STATUS_INVALID = "Invalid subscription status."

_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+"
    r"[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?$"
)
_USERNAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


class Slug(RootValueObject[str]):
    """URL-safe slug for posts and categories.

    Lowercase alphanumeric words joined by single hyphens, at most
    ``MAX_SLUG_LENGTH`` characters.
    Examples: 'a1', 'comprehension-ecrite', 'cafe-culture'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug presence, length and format."""
        operation = "Slug.validate"
        validate_presence("slug", v, operation)
        validate_max_length("slug", v, MAX_SLUG_LENGTH, operation)
        if not SLUG_FORMAT_RE.match(v):
            raise ValidationError(SLUG_INVALID_CHARS, operation=operation)
        return v

    @classmethod
    def from_text(cls, text: str) -> "Slug":
        """Derive a slug from display text.

        Raises:
            DomainError: If no valid slug can be generated from ``text``
        """
        try:
            return cls(generate_slug(text))
        except DomainError as err:
            raise DomainError(operation="Slug.from_text") from err


class Title(RootValueObject[str]):
    """Content headline, 10-100 characters."""

    @field_validator("root")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        validate_presence("title", v, "Title.validate")
        validate_length(
            "title", v, MIN_TITLE_LENGTH, MAX_TITLE_LENGTH, "Title.validate"
        )
        return v


class Description(RootValueObject[str]):
    """Optional explanatory text, at most 300 characters."""

    @field_validator("root")
    @classmethod
    def validate_description(cls, v: str) -> str:
        v = v.strip()
        validate_length(
            "description", v, 0, MAX_DESCRIPTION_LENGTH, "Description.validate"
        )
        return v


class PostContent(RootValueObject[str]):
    """Main body of a post (markdown), 300-10000 characters.

    Long enough to carry real learning material, short enough to stay
    digestible in one sitting.
    """

    @field_validator("root")
    @classmethod
    def validate_content(cls, v: str) -> str:
        operation = "PostContent.validate"
        v = v.strip()
        validate_presence("post content", v, operation)
        validate_min_length("post content", v, MIN_POST_CONTENT_LENGTH, operation)
        validate_max_length("post content", v, MAX_POST_CONTENT_LENGTH, operation)
        return v


class CategoryName(RootValueObject[str]):
    """User-facing category title, 1-100 characters."""

    @field_validator("root")
    @classmethod
    def validate_category_name(cls, v: str) -> str:
        v = v.strip()
        validate_presence("category name", v, "CategoryName.validate")
        validate_length(
            "category name",
            v,
            MIN_CATEGORY_NAME_LENGTH,
            MAX_CATEGORY_NAME_LENGTH,
            "CategoryName.validate",
        )
        return v


class TagName(RootValueObject[str]):
    """Tag label, 1-50 characters."""

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        v = v.strip()
        validate_presence("tag name", v, "TagName.validate")
        validate_length(
            "tag name", v, MIN_TAG_NAME_LENGTH, MAX_TAG_NAME_LENGTH, "TagName.validate"
        )
        return v


class Email(RootValueObject[str]):
    """Deliverable email address."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        validate_presence("email", v, "Email.validate")
        if not _EMAIL_RE.match(v):
            raise ValidationError(EMAIL_INVALID_FORMAT, operation="Email.validate")
        return v


class FirstName(RootValueObject[str]):
    @field_validator("root")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        v = v.strip()
        validate_length("first name", v, 0, MAX_FIRST_NAME_LENGTH, "FirstName.validate")
        return v


class LastName(RootValueObject[str]):
    @field_validator("root")
    @classmethod
    def validate_last_name(cls, v: str) -> str:
        v = v.strip()
        validate_length("last name", v, 0, MAX_LAST_NAME_LENGTH, "LastName.validate")
        return v


class Username(RootValueObject[str]):
    """Public handle: 3-30 ASCII letters, digits, underscores or hyphens."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        operation = "Username.validate"
        v = v.strip()
        validate_presence("username", v, operation)
        validate_length(
            "username", v, MIN_USERNAME_LENGTH, MAX_USERNAME_LENGTH, operation
        )
        if not _USERNAME_RE.match(v):
            raise ValidationError(USERNAME_INVALID_CHARS, operation=operation)
        return v


class Role(str, Enum):
    """Permission level of a user."""

    ADMIN = "admin"  # Full system access and user management
    EDITOR = "editor"  # Content management and publication control
    AUTHOR = "author"  # Content creation and own post management
    SUBSCRIBER = "subscriber"  # Content consumption
    VISITOR = "visitor"  # Anonymous read-only access
    MACHINE = "machine"  # Automated integrations

    @classmethod
    def parse(cls, value: "str | Role") -> "Role":
        """Convert a raw value to a Role.

        Raises:
            ValidationError: If the value is not a known role
        """
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(ROLE_INVALID, operation="Role.parse") from None


class SchemaType(str, Enum):
    """Schema.org markup type for structured data."""

    ARTICLE = "Article"
    BLOG_POSTING = "BlogPosting"
    EDUCATIONAL_CONTENT = "EducationalContent"
    LEARNING_RESOURCE = "LearningResource"
    HOW_TO = "HowTo"

    @classmethod
    def default(cls) -> "SchemaType":
        return cls.EDUCATIONAL_CONTENT

    @classmethod
    def parse(cls, value: "str | SchemaType") -> "SchemaType":
        """Convert a raw value to a SchemaType.

        Raises:
            ValidationError: If the value is not a known schema type
        """
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                SCHEMA_TYPE_INVALID, operation="SchemaType.parse"
            ) from None

    @property
    def is_educational(self) -> bool:
        return self in (SchemaType.EDUCATIONAL_CONTENT, SchemaType.LEARNING_RESOURCE)


class SubscriptionStatus(str, Enum):
    """Lifecycle state of a newsletter subscription."""

    ACTIVE = "active"
    UNSUBSCRIBED = "unsubscribed"
    BOUNCED = "bounced"  # Email bounced
    COMPLAINED = "complained"  # Spam complaint

    @classmethod
    def parse(cls, value: "str | SubscriptionStatus") -> "SubscriptionStatus":
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                SUBSCRIPTION_STATUS_INVALID, operation="SubscriptionStatus.parse"
            ) from None

"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from inkwell.domain.value.common import RootValueObject


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    ADMIN = "admin"


class ComicStatus(str, Enum):
    """Publication status of a comic."""

    ONGOING = "Ongoing"
    COMPLETED = "Completed"
    HIATUS = "Hiatus"
    DROPPED = "Dropped"
    COMING_SOON = "Coming Soon"


class BookmarkStatus(str, Enum):
    """Reading list a bookmarked comic is filed under."""

    READING = "Reading"
    PLAN_TO_READ = "Plan to Read"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"
    DROPPED = "Dropped"


class Email(RootValueObject[str]):
    """Normalized (lowercased, trimmed) email address."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email shape and normalize case."""
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug for comics, chapters and genres.

    Must be lowercase, alphanumeric with hyphens, 1-200 characters.
    Examples: 'solo-leveling', 'chapter-12', 'slice-of-life'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 200:
            raise ValueError("Slug must be 1-200 characters")
        return v

    @classmethod
    def from_text(cls, text: str, fallback: str = "untitled") -> "Slug":
        """Derive a slug from free text such as a title."""
        slug_str = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")[:200]
        return cls(slug_str.strip("-") or fallback)

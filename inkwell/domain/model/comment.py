"""Comment entities.

Comments are threaded discussions attached to a chapter. Threading is stored
as a plain parent reference; the tree is rebuilt in memory when a chapter's
discussion is read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import ChapterId, CommentId, UserId

COMMENT_MAX_LENGTH = 2000
UNKNOWN_AUTHOR_NAME = "Unknown User"


def trim_comment_content(value: object) -> object:
    """Trim comment text before length limits are checked.

    Raises:
        ValueError: If nothing but whitespace is left
    """
    if not isinstance(value, str):
        return value
    value = value.strip()
    if not value:
        raise ValueError("Comment cannot be whitespace only")
    return value


class Comment(DomainModel):
    """Comment entity as stored.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - deleted_at: Soft-delete marker; a deleted comment keeps anchoring its replies
    """

    id: CommentId
    chapter_id: ChapterId
    author_id: UserId
    content: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v: object) -> object:
        return trim_comment_content(v)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class CommentRecord(DomainModel):
    """Flat comment row as fetched for one chapter's discussion.

    Author fields are denormalized at fetch time. When the author no longer
    exists the name falls back to ``UNKNOWN_AUTHOR_NAME`` and the avatar is None.
    """

    id: CommentId
    chapter_id: ChapterId
    author_id: UserId
    author_display_name: str = UNKNOWN_AUTHOR_NAME
    author_avatar_url: Optional[str] = None
    content: str
    parent_id: Optional[CommentId] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import (
    AuthorId,
    ChapterId,
    ComicId,
    CommentId,
    GenreId,
    RatingId,
    ReadingProgressId,
    UserId,
)
from inkwell.domain.value.types import (
    BookmarkStatus,
    ComicStatus,
    Email,
    Slug,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "AuthorId",
    "GenreId",
    "ComicId",
    "ChapterId",
    "CommentId",
    "RatingId",
    "ReadingProgressId",
    # Types
    "BookmarkStatus",
    "ComicStatus",
    "Email",
    "Slug",
    "UserRole",
]

"""PostgreSQL repository implementations."""

from inkwell.persistence.repository.author import PostgresAuthorRepository
from inkwell.persistence.repository.bookmark import PostgresBookmarkRepository
from inkwell.persistence.repository.chapter import PostgresChapterRepository
from inkwell.persistence.repository.comic import PostgresComicRepository
from inkwell.persistence.repository.comment import PostgresCommentRepository
from inkwell.persistence.repository.genre import PostgresGenreRepository
from inkwell.persistence.repository.rating import PostgresRatingRepository
from inkwell.persistence.repository.reading_progress import (
    PostgresReadingProgressRepository,
)
from inkwell.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresAuthorRepository",
    "PostgresBookmarkRepository",
    "PostgresChapterRepository",
    "PostgresComicRepository",
    "PostgresCommentRepository",
    "PostgresGenreRepository",
    "PostgresRatingRepository",
    "PostgresReadingProgressRepository",
    "PostgresUserRepository",
]

"""Repository interfaces for the Inkwell domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from inkwell.domain.repository.author import AuthorRepository
from inkwell.domain.repository.bookmark import BookmarkRepository
from inkwell.domain.repository.chapter import ChapterRepository
from inkwell.domain.repository.comic import ComicRepository, ComicSortOrder
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.repository.genre import GenreRepository
from inkwell.domain.repository.rating import RatingRepository
from inkwell.domain.repository.reading_progress import ReadingProgressRepository
from inkwell.domain.repository.user import UserRepository

__all__ = [
    "AuthorRepository",
    "BookmarkRepository",
    "ChapterRepository",
    "ComicRepository",
    "ComicSortOrder",
    "CommentRepository",
    "GenreRepository",
    "RatingRepository",
    "ReadingProgressRepository",
    "UserRepository",
]

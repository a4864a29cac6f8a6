"""In-memory repository implementations for testing."""

from .author import InMemoryAuthorRepository
from .bookmark import InMemoryBookmarkRepository
from .chapter import InMemoryChapterRepository
from .comic import InMemoryComicRepository
from .comment import InMemoryCommentRepository
from .genre import InMemoryGenreRepository
from .rating import InMemoryRatingRepository
from .reading_progress import InMemoryReadingProgressRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAuthorRepository",
    "InMemoryBookmarkRepository",
    "InMemoryChapterRepository",
    "InMemoryComicRepository",
    "InMemoryCommentRepository",
    "InMemoryGenreRepository",
    "InMemoryRatingRepository",
    "InMemoryReadingProgressRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]

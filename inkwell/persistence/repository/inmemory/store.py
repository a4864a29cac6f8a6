"""Shared state for the in-memory repositories.

Repositories that read across tables (comment records join users, deleting
a comic removes its chapters) need to see each other's rows, so they all
hold a reference to one store.
"""

from dataclasses import dataclass, field

from inkwell.domain.model import (
    Author,
    Bookmark,
    Chapter,
    Comic,
    Comment,
    Genre,
    Rating,
    ReadingProgress,
    User,
)
from inkwell.domain.value import (
    AuthorId,
    ChapterId,
    ComicId,
    CommentId,
    GenreId,
    UserId,
)


@dataclass
class InMemoryStore:
    """Rows of every table, keyed like their primary keys."""

    users: dict[UserId, User] = field(default_factory=dict)
    authors: dict[AuthorId, Author] = field(default_factory=dict)
    genres: dict[GenreId, Genre] = field(default_factory=dict)
    comics: dict[ComicId, Comic] = field(default_factory=dict)
    chapters: dict[ChapterId, Chapter] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    bookmarks: dict[tuple[UserId, ComicId], Bookmark] = field(default_factory=dict)
    ratings: dict[tuple[UserId, ComicId], Rating] = field(default_factory=dict)
    progress: dict[tuple[UserId, ComicId], ReadingProgress] = field(
        default_factory=dict
    )

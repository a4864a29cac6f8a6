"""Strongly typed identifiers for Inkwell domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
AuthorId = NewType("AuthorId", UUID)
GenreId = NewType("GenreId", UUID)
ComicId = NewType("ComicId", UUID)
ChapterId = NewType("ChapterId", UUID)
CommentId = NewType("CommentId", UUID)
RatingId = NewType("RatingId", UUID)
ReadingProgressId = NewType("ReadingProgressId", UUID)

"""Domain model entities for Inkwell."""

from inkwell.domain.model.author import Author
from inkwell.domain.model.bookmark import Bookmark
from inkwell.domain.model.chapter import Chapter
from inkwell.domain.model.comic import Comic
from inkwell.domain.model.comment import Comment, CommentRecord
from inkwell.domain.model.genre import Genre
from inkwell.domain.model.rating import Rating, RatingStats
from inkwell.domain.model.reading_progress import ReadingProgress
from inkwell.domain.model.user import User

__all__ = [
    "Author",
    "Bookmark",
    "Chapter",
    "Comic",
    "Comment",
    "CommentRecord",
    "Genre",
    "Rating",
    "RatingStats",
    "ReadingProgress",
    "User",
]

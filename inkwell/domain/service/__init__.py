"""Domain services."""

from .auth_service import AuthService
from .author_service import AuthorService
from .base import Service
from .bookmark_service import BookmarkService
from .chapter_service import ChapterService
from .comic_service import ComicService
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_tree, flatten_comment_tree
from .genre_service import GenreService
from .jwt_service import JWTService
from .rating_service import RatingService
from .reading_progress_service import ReadingProgressService
from .user_service import UserService

__all__ = [
    "AuthService",
    "AuthorService",
    "BookmarkService",
    "ChapterService",
    "ComicService",
    "CommentNode",
    "CommentService",
    "GenreService",
    "JWTService",
    "RatingService",
    "ReadingProgressService",
    "Service",
    "UserService",
    "build_comment_tree",
    "flatten_comment_tree",
]

"""Bookmark use cases."""

from .add_bookmark import AddBookmarkRequest, AddBookmarkUseCase, BookmarkResponse
from .get_bookmark_status import (
    GetBookmarkStatusRequest,
    GetBookmarkStatusResponse,
    GetBookmarkStatusUseCase,
)
from .list_bookmarks import (
    BookmarkItem,
    ListBookmarksRequest,
    ListBookmarksResponse,
    ListBookmarksUseCase,
)
from .remove_bookmark import RemoveBookmarkRequest, RemoveBookmarkUseCase
from .update_bookmark import UpdateBookmarkRequest, UpdateBookmarkUseCase

__all__ = [
    "AddBookmarkRequest",
    "AddBookmarkUseCase",
    "BookmarkItem",
    "BookmarkResponse",
    "GetBookmarkStatusRequest",
    "GetBookmarkStatusResponse",
    "GetBookmarkStatusUseCase",
    "ListBookmarksRequest",
    "ListBookmarksResponse",
    "ListBookmarksUseCase",
    "RemoveBookmarkRequest",
    "RemoveBookmarkUseCase",
    "UpdateBookmarkRequest",
    "UpdateBookmarkUseCase",
]

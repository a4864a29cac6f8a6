"""Bookmark repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.model.bookmark import Bookmark
from inkwell.domain.value import ComicId, UserId


class BookmarkRepository(ABC):
    """Repository for Bookmark entity, keyed by (user_id, comic_id)."""

    @abstractmethod
    async def find(self, user_id: UserId, comic_id: ComicId) -> Optional[Bookmark]:
        """Find a user's bookmark of a comic."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Bookmark]:
        """List a user's bookmarks, most recently created first."""
        pass

    @abstractmethod
    async def save(self, bookmark: Bookmark) -> Bookmark:
        """Create a bookmark.

        Raises:
            IntegrityError: If the user already bookmarked the comic
        """
        pass

    @abstractmethod
    async def update(self, bookmark: Bookmark) -> Optional[Bookmark]:
        """Overwrite status, notes and last read chapter of a bookmark.

        Returns:
            The updated bookmark, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, comic_id: ComicId) -> bool:
        """Delete a bookmark.

        Returns:
            True if a bookmark was deleted, False if none existed
        """
        pass

"""Comic repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from inkwell.domain.model.comic import Comic
from inkwell.domain.value import ComicId, ComicStatus, GenreId, Slug


class ComicSortOrder(str, Enum):
    """Sort order for comic listings."""

    LATEST = "latest"  # Sort by updated_at DESC
    POPULAR = "popular"  # Sort by views DESC
    RATING = "rating"  # Sort by average rating DESC
    TITLE = "title"  # Sort by title ASC


class ComicRepository(ABC):
    """Repository for Comic aggregate.

    Defines the contract for comic persistence operations, including the
    comic's genre links.
    """

    @abstractmethod
    async def find_by_id(self, comic_id: ComicId) -> Optional[Comic]:
        """Find a comic by ID."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Comic]:
        """Find a comic by slug."""
        pass

    @abstractmethod
    async def find_by_ids(self, comic_ids: Sequence[ComicId]) -> List[Comic]:
        """Find comics by IDs. Unknown IDs are skipped; order is unspecified."""
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        genre_id: Optional[GenreId] = None,
        status: Optional[ComicStatus] = None,
        sort: ComicSortOrder = ComicSortOrder.LATEST,
        limit: int = 12,
        offset: int = 0,
    ) -> List[Comic]:
        """Find comics with filtering and pagination.

        Args:
            search: Case-insensitive substring of the title
            genre_id: Only comics linked to this genre
            status: Only comics with this publication status
            sort: Sort order
            limit: Maximum number of comics to return
            offset: Number of comics to skip

        Returns:
            List of comics matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        search: Optional[str] = None,
        genre_id: Optional[GenreId] = None,
        status: Optional[ComicStatus] = None,
    ) -> int:
        """Count comics matching the same filters as find_all."""
        pass

    @abstractmethod
    async def save(self, comic: Comic) -> Comic:
        """Save a comic (create or update) together with its genre links.

        Raises:
            IntegrityError: If the title or slug is already taken
        """
        pass

    @abstractmethod
    async def delete(self, comic_id: ComicId) -> bool:
        """Delete a comic. Chapters, comments, bookmarks, ratings and
        progress of the comic are removed with it.

        Returns:
            True if a comic was deleted, False if none matched
        """
        pass

    @abstractmethod
    async def increment_views(self, comic_id: ComicId) -> None:
        """Atomically increment the view counter."""
        pass

    @abstractmethod
    async def update_rating(self, comic_id: ComicId, rating: float) -> None:
        """Store the denormalized average rating."""
        pass

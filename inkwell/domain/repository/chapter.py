"""Chapter repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.model.chapter import Chapter
from inkwell.domain.value import ChapterId, ComicId


class ChapterRepository(ABC):
    """Repository for Chapter entity."""

    @abstractmethod
    async def find_by_id(self, chapter_id: ChapterId) -> Optional[Chapter]:
        """Find a chapter by ID."""
        pass

    @abstractmethod
    async def find_by_comic_and_number(
        self, comic_id: ComicId, chapter_number: int
    ) -> Optional[Chapter]:
        """Find a chapter by its number within a comic.

        Args:
            comic_id: The comic ID
            chapter_number: Chapter number within the comic

        Returns:
            The chapter if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_comic(self, comic_id: ComicId) -> List[Chapter]:
        """List all chapters of a comic ordered by chapter number ascending."""
        pass

    @abstractmethod
    async def save(self, chapter: Chapter) -> Chapter:
        """Save a chapter (create or update).

        Raises:
            IntegrityError: If the comic already has a chapter with this number
        """
        pass

    @abstractmethod
    async def delete(self, chapter_id: ChapterId) -> bool:
        """Delete a chapter and its comments.

        Returns:
            True if a chapter was deleted, False if none matched
        """
        pass

    @abstractmethod
    async def increment_views(self, chapter_id: ChapterId) -> None:
        """Atomically increment the view counter."""
        pass

"""Reading progress repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.model.reading_progress import ReadingProgress
from inkwell.domain.value import ComicId, UserId


class ReadingProgressRepository(ABC):
    """Repository for ReadingProgress entity, one row per (user_id, comic_id)."""

    @abstractmethod
    async def find(
        self, user_id: UserId, comic_id: ComicId
    ) -> Optional[ReadingProgress]:
        """Find a user's progress in a comic."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[ReadingProgress]:
        """List a user's progress rows, most recently read first."""
        pass

    @abstractmethod
    async def upsert(self, progress: ReadingProgress) -> ReadingProgress:
        """Insert progress or overwrite the existing row in one statement.

        On conflict the original id and created_at are kept. An existing
        completed_at is preserved when the new progress has none.

        Args:
            progress: The progress to store

        Returns:
            The stored progress row

        Raises:
            IntegrityError: If the user, comic or chapter doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, comic_id: ComicId) -> bool:
        """Delete a user's progress in a comic.

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

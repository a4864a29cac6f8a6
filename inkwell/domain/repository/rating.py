"""Rating repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from inkwell.domain.model.rating import Rating, RatingStats
from inkwell.domain.value import ComicId, UserId


class RatingRepository(ABC):
    """Repository for Rating entity."""

    @abstractmethod
    async def find_by_user_and_comic(
        self, user_id: UserId, comic_id: ComicId
    ) -> Optional[Rating]:
        """Find a user's rating of a comic."""
        pass

    @abstractmethod
    async def upsert(self, rating: Rating) -> Rating:
        """Insert a rating or overwrite the user's existing one.

        Conflicts on (user_id, comic_id) keep the original id and created_at.

        Args:
            rating: The rating to store

        Returns:
            The stored rating

        Raises:
            IntegrityError: If the user or comic doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, comic_id: ComicId) -> bool:
        """Delete a user's rating of a comic.

        Returns:
            True if a rating was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def get_stats(self, comic_id: ComicId) -> RatingStats:
        """Average (one decimal) and count of a comic's ratings."""
        pass

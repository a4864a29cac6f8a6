"""In-memory rating repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.rating import Rating, RatingStats
from inkwell.domain.repository.rating import RatingRepository
from inkwell.domain.value import ComicId, UserId

from .store import InMemoryStore


class InMemoryRatingRepository(RatingRepository):
    """In-memory implementation of RatingRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_user_and_comic(
        self, user_id: UserId, comic_id: ComicId
    ) -> Optional[Rating]:
        """Find a user's rating of a comic."""
        return self._store.ratings.get((user_id, comic_id))

    async def upsert(self, rating: Rating) -> Rating:
        """Insert or overwrite a rating, keeping id and created_at.

        Raises:
            IntegrityError: If the comic doesn't exist
        """
        if rating.comic_id not in self._store.comics:
            raise IntegrityError("Unknown comic", None, Exception())

        key = (rating.user_id, rating.comic_id)
        existing = self._store.ratings.get(key)
        if existing:
            rating = rating.model_copy(
                update={"id": existing.id, "created_at": existing.created_at}
            )
        self._store.ratings[key] = rating
        return rating

    async def delete(self, user_id: UserId, comic_id: ComicId) -> bool:
        """Delete a user's rating of a comic."""
        return self._store.ratings.pop((user_id, comic_id), None) is not None

    async def get_stats(self, comic_id: ComicId) -> RatingStats:
        """Average (one decimal) and count of a comic's ratings."""
        stars = [r.rating for r in self._store.ratings.values() if r.comic_id == comic_id]
        if not stars:
            return RatingStats()
        return RatingStats(
            average_rating=round(sum(stars) / len(stars), 1),
            total_ratings=len(stars),
        )

"""Rating domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import Rating, RatingStats
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import RatingRepository
from inkwell.domain.value import ComicId, RatingId, UserId

from .base import Service
from .comic_service import ComicService


class RatingService(Service):
    """Domain service for rating operations.

    Every change to a comic's ratings refreshes the comic's denormalized
    average.
    """

    def __init__(
        self, rating_repository: RatingRepository, comic_service: ComicService
    ) -> None:
        """Initialize rating service.

        Args:
            rating_repository: Rating repository
            comic_service: Comic domain service
        """
        self.rating_repository = rating_repository
        self.comic_service = comic_service

    async def rate_comic(
        self,
        user_id: UserId,
        comic_id: ComicId,
        rating: int,
        review: str | None = None,
    ) -> Rating:
        """Rate a comic, replacing the user's previous rating.

        Args:
            user_id: User ID
            comic_id: Comic ID
            rating: Stars, 1-5
            review: Optional review text

        Returns:
            Stored rating

        Raises:
            NotFoundError: If the comic doesn't exist
            ValueError: If the rating could not be stored
        """
        with logfire.span(
            "rating_service.rate_comic",
            user_id=str(user_id),
            comic_id=str(comic_id),
            rating=rating,
        ):
            comic = await self.comic_service.get_by_id(comic_id)
            if comic is None:
                raise NotFoundError("Comic", str(comic_id))

            now = utcnow()
            entity = Rating(
                id=RatingId(uuid4()),
                user_id=user_id,
                comic_id=comic_id,
                rating=rating,
                review=review,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.rating_repository.upsert(entity)
            except IntegrityError as e:
                logfire.error(
                    "Rating upsert failed",
                    user_id=str(user_id),
                    comic_id=str(comic_id),
                    error=str(e),
                )
                raise ValueError("Failed to save rating")

            await self._refresh_comic_rating(comic_id)
            logfire.info(
                "Comic rated", user_id=str(user_id), comic_id=str(comic_id), rating=rating
            )
            return saved

    async def get_user_rating(
        self, user_id: UserId, comic_id: ComicId
    ) -> Rating | None:
        """Get a user's rating of a comic, None if unrated."""
        with logfire.span(
            "rating_service.get_user_rating",
            user_id=str(user_id),
            comic_id=str(comic_id),
        ):
            return await self.rating_repository.find_by_user_and_comic(
                user_id, comic_id
            )

    async def get_rating_stats(self, comic_id: ComicId) -> RatingStats:
        """Average rating and number of ratings of a comic."""
        with logfire.span("rating_service.get_rating_stats", comic_id=str(comic_id)):
            return await self.rating_repository.get_stats(comic_id)

    async def delete_rating(self, user_id: UserId, comic_id: ComicId) -> bool:
        """Delete a user's rating of a comic.

        Returns:
            True if a rating was deleted, False if none existed
        """
        with logfire.span(
            "rating_service.delete_rating",
            user_id=str(user_id),
            comic_id=str(comic_id),
        ):
            deleted = await self.rating_repository.delete(user_id, comic_id)
            if deleted:
                await self._refresh_comic_rating(comic_id)
                logfire.info(
                    "Rating deleted", user_id=str(user_id), comic_id=str(comic_id)
                )
            else:
                logfire.info(
                    "No rating to delete", user_id=str(user_id), comic_id=str(comic_id)
                )
            return deleted

    async def _refresh_comic_rating(self, comic_id: ComicId) -> None:
        stats = await self.rating_repository.get_stats(comic_id)
        await self.comic_service.update_rating(comic_id, stats.average_rating)

"""Get rating use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotFoundError
from inkwell.domain.service import ComicService, RatingService
from inkwell.domain.value import ComicId, UserId


class GetRatingRequest(BaseModel):
    """Get rating request."""

    comic_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetRatingResponse(BaseModel):
    """Aggregate rating of a comic, plus the user's own rating."""

    comic_id: str
    average_rating: float
    total_ratings: int
    user_rating: int | None
    user_review: str | None


class GetRatingUseCase:
    """Use case for reading a comic's rating summary."""

    def __init__(
        self, rating_service: RatingService, comic_service: ComicService
    ) -> None:
        self.rating_service = rating_service
        self.comic_service = comic_service

    async def execute(self, request: GetRatingRequest) -> GetRatingResponse:
        """Execute get rating flow.

        Raises:
            NotFoundError: If the comic doesn't exist
        """
        comic_id = ComicId(UUID(request.comic_id))
        if await self.comic_service.get_by_id(comic_id) is None:
            raise NotFoundError("Comic", request.comic_id)

        stats = await self.rating_service.get_rating_stats(comic_id)

        own = None
        if request.user_id:
            own = await self.rating_service.get_user_rating(
                UserId(UUID(request.user_id)), comic_id
            )

        return GetRatingResponse(
            comic_id=request.comic_id,
            average_rating=stats.average_rating,
            total_ratings=stats.total_ratings,
            user_rating=own.rating if own else None,
            user_review=own.review if own else None,
        )

"""Rate comic use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.domain.service import RatingService
from inkwell.domain.value import ComicId, UserId


class RateComicRequest(BaseModel):
    """Rate comic request."""

    user_id: str
    comic_id: str
    rating: int = Field(ge=1, le=5)
    review: str | None = Field(default=None, max_length=1000)


class RateComicResponse(BaseModel):
    """The user's rating plus the comic's updated aggregate."""

    comic_id: str
    rating: int
    review: str | None
    average_rating: float
    total_ratings: int
    updated_at: datetime


class RateComicUseCase:
    """Use case for rating a comic; rating again replaces the old rating."""

    def __init__(self, rating_service: RatingService) -> None:
        self.rating_service = rating_service

    async def execute(self, request: RateComicRequest) -> RateComicResponse:
        """Execute rate comic flow.

        Raises:
            NotFoundError: If the comic doesn't exist
        """
        comic_id = ComicId(UUID(request.comic_id))
        rating = await self.rating_service.rate_comic(
            user_id=UserId(UUID(request.user_id)),
            comic_id=comic_id,
            rating=request.rating,
            review=request.review,
        )
        stats = await self.rating_service.get_rating_stats(comic_id)

        return RateComicResponse(
            comic_id=request.comic_id,
            rating=rating.rating,
            review=rating.review,
            average_rating=stats.average_rating,
            total_ratings=stats.total_ratings,
            updated_at=rating.updated_at,
        )

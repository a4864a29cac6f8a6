"""Delete rating use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotFoundError
from inkwell.domain.service import RatingService
from inkwell.domain.value import ComicId, UserId


class DeleteRatingRequest(BaseModel):
    """Delete rating request."""

    user_id: str
    comic_id: str


class DeleteRatingUseCase:
    """Use case for withdrawing a rating."""

    def __init__(self, rating_service: RatingService) -> None:
        self.rating_service = rating_service

    async def execute(self, request: DeleteRatingRequest) -> None:
        """Execute delete rating flow.

        Raises:
            NotFoundError: If the user hasn't rated the comic
        """
        deleted = await self.rating_service.delete_rating(
            UserId(UUID(request.user_id)), ComicId(UUID(request.comic_id))
        )
        if not deleted:
            raise NotFoundError("Rating", request.comic_id)

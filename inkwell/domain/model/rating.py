"""Rating entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import ComicId, RatingId, UserId


class Rating(DomainModel):
    """A user's 1-5 star rating of a comic, unique per (user_id, comic_id)."""

    id: RatingId
    user_id: UserId
    comic_id: ComicId
    rating: int = Field(ge=1, le=5)
    review: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class RatingStats(DomainModel):
    """Aggregate rating of a comic."""

    average_rating: float = 0.0
    total_ratings: int = 0

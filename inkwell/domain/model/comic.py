"""Comic entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import AuthorId, ComicId, ComicStatus, GenreId, Slug


class Comic(DomainModel):
    """A comic series.

    ``rating`` is the denormalized average of all user ratings, refreshed by
    the rating service whenever a rating changes.
    """

    id: ComicId
    title: str = Field(min_length=1, max_length=300)
    slug: Slug
    description: str = ""
    cover_image: str = ""
    status: ComicStatus = ComicStatus.ONGOING
    publication_date: Optional[datetime] = None
    rating: float = Field(default=0.0, ge=0, le=5)
    views: int = Field(default=0, ge=0)
    author_id: Optional[AuthorId] = None
    genre_ids: list[GenreId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

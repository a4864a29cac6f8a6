"""Chapter entity."""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import ChapterId, ComicId, Slug


class Chapter(DomainModel):
    """A chapter of a comic.

    ``chapter_number`` is unique within a comic. ``image_urls`` holds the
    pages in reading order. A chapter is also the discussion context that
    comments attach to.
    """

    id: ChapterId
    comic_id: ComicId
    chapter_number: int = Field(ge=0)
    title: str = Field(min_length=1, max_length=300)
    slug: Slug
    release_date: datetime = Field(default_factory=utcnow)
    image_urls: list[str] = Field(default_factory=list)
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

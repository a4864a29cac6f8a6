"""Genre entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import GenreId, Slug


class Genre(DomainModel):
    """Genre used to classify comics (many-to-many)."""

    id: GenreId
    name: str = Field(min_length=1, max_length=100)
    slug: Slug
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)

"""Author entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import AuthorId


class Author(DomainModel):
    """Creator credited on a comic."""

    id: AuthorId
    name: str = Field(min_length=1, max_length=200)
    bio: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)

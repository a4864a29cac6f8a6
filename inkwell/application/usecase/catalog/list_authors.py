"""List authors use case."""

import logfire
from pydantic import BaseModel

from inkwell.domain.model import Author
from inkwell.domain.service import AuthorService


class AuthorItem(BaseModel):
    """Author item in response."""

    author_id: str
    name: str
    bio: str | None
    image: str | None

    @classmethod
    def from_author(cls, author: Author) -> "AuthorItem":
        return cls(
            author_id=str(author.id),
            name=author.name,
            bio=author.bio,
            image=author.image,
        )


class ListAuthorsResponse(BaseModel):
    """List authors response."""

    authors: list[AuthorItem]


class ListAuthorsUseCase:
    """Use case for listing all authors."""

    def __init__(self, author_service: AuthorService) -> None:
        self.author_service = author_service

    async def execute(self) -> ListAuthorsResponse:
        with logfire.span("list_authors.execute"):
            authors = await self.author_service.list_authors()
            return ListAuthorsResponse(
                authors=[AuthorItem.from_author(author) for author in authors]
            )

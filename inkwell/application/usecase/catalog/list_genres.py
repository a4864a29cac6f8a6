"""List genres use case."""

import logfire
from pydantic import BaseModel

from inkwell.domain.model import Genre
from inkwell.domain.service import GenreService


class GenreItem(BaseModel):
    """Genre item in response."""

    genre_id: str
    name: str
    slug: str
    description: str | None

    @classmethod
    def from_genre(cls, genre: Genre) -> "GenreItem":
        return cls(
            genre_id=str(genre.id),
            name=genre.name,
            slug=genre.slug.root,
            description=genre.description,
        )


class ListGenresResponse(BaseModel):
    """List genres response."""

    genres: list[GenreItem]


class ListGenresUseCase:
    """Use case for listing all genres."""

    def __init__(self, genre_service: GenreService) -> None:
        """Initialize list genres use case.

        Args:
            genre_service: Genre domain service
        """
        self.genre_service = genre_service

    async def execute(self) -> ListGenresResponse:
        """Execute list genres flow.

        Returns:
            All genres ordered by name
        """
        with logfire.span("list_genres.execute"):
            genres = await self.genre_service.list_genres()
            return ListGenresResponse(
                genres=[GenreItem.from_genre(genre) for genre in genres]
            )

"""Genre domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import AlreadyExistsError, NotFoundError
from inkwell.domain.model import Genre
from inkwell.domain.repository import GenreRepository
from inkwell.domain.value import GenreId, Slug

from .base import Service


class GenreService(Service):
    """Domain service for genre operations."""

    def __init__(self, genre_repository: GenreRepository) -> None:
        """Initialize genre service.

        Args:
            genre_repository: Genre repository
        """
        self.genre_repository = genre_repository

    async def list_genres(self) -> list[Genre]:
        """Get all genres ordered by name."""
        with logfire.span("genre_service.list_genres"):
            genres = await self.genre_repository.find_all()
            logfire.info("Genres retrieved", count=len(genres))
            return genres

    async def get_by_slug(self, slug: Slug) -> Genre | None:
        """Get a genre by slug.

        Args:
            slug: Genre slug

        Returns:
            Genre if found, None otherwise
        """
        with logfire.span("genre_service.get_by_slug", slug=slug.root):
            genre = await self.genre_repository.find_by_slug(slug)
            if not genre:
                logfire.warn("Genre not found", slug=slug.root)
            return genre

    async def get_by_ids(self, genre_ids: list[GenreId]) -> list[Genre]:
        if not genre_ids:
            return []
        return await self.genre_repository.find_by_ids(genre_ids)

    async def validate_genres_exist(self, genre_ids: list[GenreId]) -> list[Genre]:
        """Validate that all requested genres exist.

        Args:
            genre_ids: Genre IDs to validate

        Returns:
            List of found genres

        Raises:
            ValueError: If any genre is not found
        """
        with logfire.span("genre_service.validate_genres_exist", count=len(genre_ids)):
            genres = await self.get_by_ids(genre_ids)
            missing = {str(g) for g in genre_ids} - {str(g.id) for g in genres}
            if missing:
                raise ValueError(f"Genres not found: {', '.join(sorted(missing))}")
            return genres

    async def create_genre(
        self, name: str, slug: Slug | None = None, description: str | None = None
    ) -> Genre:
        """Create a genre. The slug is derived from the name when not given.

        Raises:
            AlreadyExistsError: If the name or slug is taken
        """
        with logfire.span("genre_service.create_genre", name=name):
            genre = Genre(
                id=GenreId(uuid4()),
                name=name,
                slug=slug or Slug.from_text(name, fallback="genre"),
                description=description,
            )
            try:
                saved = await self.genre_repository.save(genre)
            except IntegrityError:
                logfire.warn("Duplicate genre", name=name, slug=genre.slug.root)
                raise AlreadyExistsError("Genre", genre.slug.root)
            logfire.info("Genre created", genre_id=str(saved.id), slug=saved.slug.root)
            return saved

    async def update_genre(
        self,
        genre_id: GenreId,
        name: str | None = None,
        slug: Slug | None = None,
        description: str | None = None,
    ) -> Genre:
        """Update a genre. Fields left as None are unchanged.

        Raises:
            NotFoundError: If genre not found
            AlreadyExistsError: If the new name or slug is taken
        """
        with logfire.span("genre_service.update_genre", genre_id=str(genre_id)):
            genre = await self.genre_repository.find_by_id(genre_id)
            if not genre:
                raise NotFoundError("Genre", str(genre_id))

            updates: dict = {}
            if name is not None:
                updates["name"] = name
            if slug is not None:
                updates["slug"] = slug
            if description is not None:
                updates["description"] = description
            updated = genre.model_copy(update=updates)

            try:
                saved = await self.genre_repository.save(updated)
            except IntegrityError:
                logfire.warn("Duplicate genre on update", genre_id=str(genre_id))
                raise AlreadyExistsError("Genre", updated.slug.root)
            logfire.info("Genre updated", genre_id=str(genre_id))
            return saved

    async def delete_genre(self, genre_id: GenreId) -> None:
        """Delete a genre and unlink it from comics.

        Raises:
            NotFoundError: If genre not found
        """
        with logfire.span("genre_service.delete_genre", genre_id=str(genre_id)):
            deleted = await self.genre_repository.delete(genre_id)
            if not deleted:
                raise NotFoundError("Genre", str(genre_id))
            logfire.info("Genre deleted", genre_id=str(genre_id))

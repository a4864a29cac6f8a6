"""Author domain service."""

from uuid import uuid4

import logfire

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import Author
from inkwell.domain.repository import AuthorRepository
from inkwell.domain.value import AuthorId

from .base import Service


class AuthorService(Service):
    """Domain service for author operations."""

    def __init__(self, author_repository: AuthorRepository) -> None:
        self.author_repository = author_repository

    async def get_by_id(self, author_id: AuthorId) -> Author | None:
        """Get an author by ID.

        Args:
            author_id: Author ID

        Returns:
            Author if found, None otherwise
        """
        with logfire.span("author_service.get_by_id", author_id=str(author_id)):
            author = await self.author_repository.find_by_id(author_id)
            if not author:
                logfire.warn("Author not found", author_id=str(author_id))
            return author

    async def list_authors(self) -> list[Author]:
        with logfire.span("author_service.list_authors"):
            authors = await self.author_repository.find_all()
            logfire.info("Authors retrieved", count=len(authors))
            return authors

    async def create_author(
        self, name: str, bio: str | None = None, image: str | None = None
    ) -> Author:
        """Create an author.

        Args:
            name: Author name
            bio: Optional biography
            image: Optional portrait URL

        Returns:
            Created author
        """
        with logfire.span("author_service.create_author", name=name):
            author = Author(id=AuthorId(uuid4()), name=name, bio=bio, image=image)
            saved = await self.author_repository.save(author)
            logfire.info("Author created", author_id=str(saved.id))
            return saved

    async def update_author(
        self,
        author_id: AuthorId,
        name: str | None = None,
        bio: str | None = None,
        image: str | None = None,
    ) -> Author:
        """Update an author. Fields left as None are unchanged.

        Raises:
            NotFoundError: If author not found
        """
        with logfire.span("author_service.update_author", author_id=str(author_id)):
            author = await self.author_repository.find_by_id(author_id)
            if not author:
                raise NotFoundError("Author", str(author_id))

            updates = {
                key: value
                for key, value in (("name", name), ("bio", bio), ("image", image))
                if value is not None
            }
            updated = Author.model_validate({**author.model_dump(), **updates})
            saved = await self.author_repository.save(updated)
            logfire.info("Author updated", author_id=str(author_id))
            return saved

    async def delete_author(self, author_id: AuthorId) -> None:
        """Delete an author.

        Raises:
            NotFoundError: If author not found
        """
        with logfire.span("author_service.delete_author", author_id=str(author_id)):
            deleted = await self.author_repository.delete(author_id)
            if not deleted:
                logfire.warn("Author to delete not found", author_id=str(author_id))
                raise NotFoundError("Author", str(author_id))
            logfire.info("Author deleted", author_id=str(author_id))

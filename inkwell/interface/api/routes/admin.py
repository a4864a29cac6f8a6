"""Admin (back-office) catalog routes.

Every route requires a signed-in user whose stored role is admin.
"""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.admin import (
    AdminChapterResponse,
    AdminComicResponse,
    CreateAuthorRequest,
    CreateAuthorUseCase,
    CreateChapterRequest,
    CreateChapterUseCase,
    CreateComicRequest,
    CreateComicUseCase,
    CreateGenreRequest,
    CreateGenreUseCase,
    DeleteAuthorRequest,
    DeleteAuthorUseCase,
    DeleteChapterRequest,
    DeleteChapterUseCase,
    DeleteComicRequest,
    DeleteComicUseCase,
    DeleteGenreRequest,
    DeleteGenreUseCase,
    UpdateAuthorRequest,
    UpdateAuthorUseCase,
    UpdateComicRequest,
    UpdateComicUseCase,
    UpdateGenreRequest,
    UpdateGenreUseCase,
)
from inkwell.application.usecase.catalog import AuthorItem, GenreItem
from inkwell.domain.service import JWTService
from inkwell.domain.value import ComicStatus
from inkwell.interface.api.auth import require_user_id
from inkwell.interface.error import to_http_exception

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class ComicAPIRequest(BaseModel):
    """API request for creating a comic."""

    title: str = Field(min_length=1, max_length=300)
    slug: str | None = None
    description: str = ""
    cover_image: str = ""
    status: ComicStatus = ComicStatus.ONGOING
    publication_date: datetime | None = None
    author_id: str | None = None
    genre_ids: list[str] = Field(default_factory=list)


class ComicPatchAPIRequest(BaseModel):
    """API request for editing a comic. Omitted fields are unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    slug: str | None = None
    description: str | None = None
    cover_image: str | None = None
    status: ComicStatus | None = None
    publication_date: datetime | None = None
    author_id: str | None = None
    genre_ids: list[str] | None = None


class ChapterAPIRequest(BaseModel):
    """API request for publishing a chapter."""

    chapter_number: int = Field(ge=0)
    title: str = Field(min_length=1, max_length=300)
    slug: str | None = None
    release_date: datetime | None = None
    image_urls: list[str] = Field(default_factory=list)


class AuthorAPIRequest(BaseModel):
    """API request for creating or editing an author."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    bio: str | None = None
    image: str | None = None


class GenreAPIRequest(BaseModel):
    """API request for creating or editing a genre."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    slug: str | None = None
    description: str | None = None


# Comics


@router.post(
    "/comics",
    response_model=AdminComicResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comic(
    request: ComicAPIRequest,
    create_comic_use_case: FromDishka[CreateComicUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AdminComicResponse:
    """Add a comic to the catalog.

    Raises:
        HTTPException: 403 for non-admins, 404 for an unknown author,
            400 for an unknown genre, 409 if the title or slug is taken
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await create_comic_use_case.execute(
            CreateComicRequest(user_id=user_id, **request.model_dump())
        )
    except Exception as e:
        raise to_http_exception(e, "create comic")


@router.patch("/comics/{comic_id}", response_model=AdminComicResponse)
async def update_comic(
    comic_id: str,
    request: ComicPatchAPIRequest,
    update_comic_use_case: FromDishka[UpdateComicUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AdminComicResponse:
    """Edit a comic. Sending null for author_id or publication_date clears it."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await update_comic_use_case.execute(
            UpdateComicRequest(
                user_id=user_id,
                comic_id=comic_id,
                **request.model_dump(exclude_unset=True),
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update comic")


@router.delete("/comics/{comic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comic(
    comic_id: str,
    delete_comic_use_case: FromDishka[DeleteComicUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a comic with its chapters, comments and reader data."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        await delete_comic_use_case.execute(
            DeleteComicRequest(user_id=user_id, comic_id=comic_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete comic")


# Chapters


@router.post(
    "/comics/{comic_id}/chapters",
    response_model=AdminChapterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_chapter(
    comic_id: str,
    request: ChapterAPIRequest,
    create_chapter_use_case: FromDishka[CreateChapterUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AdminChapterResponse:
    """Publish a chapter. Chapter numbers are unique within a comic (409)."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await create_chapter_use_case.execute(
            CreateChapterRequest(
                user_id=user_id, comic_id=comic_id, **request.model_dump()
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create chapter")


@router.delete("/chapters/{chapter_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chapter(
    chapter_id: str,
    delete_chapter_use_case: FromDishka[DeleteChapterUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        await delete_chapter_use_case.execute(
            DeleteChapterRequest(user_id=user_id, chapter_id=chapter_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete chapter")


# Authors


@router.post(
    "/authors", response_model=AuthorItem, status_code=status.HTTP_201_CREATED
)
async def create_author(
    request: AuthorAPIRequest,
    create_author_use_case: FromDishka[CreateAuthorUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AuthorItem:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await create_author_use_case.execute(
            CreateAuthorRequest(
                user_id=user_id,
                name=request.name,
                bio=request.bio,
                image=request.image,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create author")


@router.patch("/authors/{author_id}", response_model=AuthorItem)
async def update_author(
    author_id: str,
    request: AuthorAPIRequest,
    update_author_use_case: FromDishka[UpdateAuthorUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AuthorItem:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await update_author_use_case.execute(
            UpdateAuthorRequest(
                user_id=user_id,
                author_id=author_id,
                name=request.name,
                bio=request.bio,
                image=request.image,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update author")


@router.delete("/authors/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    author_id: str,
    delete_author_use_case: FromDishka[DeleteAuthorUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete an author. Their comics stay, uncredited."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        await delete_author_use_case.execute(
            DeleteAuthorRequest(user_id=user_id, author_id=author_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete author")


# Genres


@router.post("/genres", response_model=GenreItem, status_code=status.HTTP_201_CREATED)
async def create_genre(
    request: GenreAPIRequest,
    create_genre_use_case: FromDishka[CreateGenreUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GenreItem:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await create_genre_use_case.execute(
            CreateGenreRequest(
                user_id=user_id,
                name=request.name,
                slug=request.slug,
                description=request.description,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create genre")


@router.patch("/genres/{genre_id}", response_model=GenreItem)
async def update_genre(
    genre_id: str,
    request: GenreAPIRequest,
    update_genre_use_case: FromDishka[UpdateGenreUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GenreItem:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await update_genre_use_case.execute(
            UpdateGenreRequest(
                user_id=user_id,
                genre_id=genre_id,
                name=request.name,
                slug=request.slug,
                description=request.description,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update genre")


@router.delete("/genres/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_genre(
    genre_id: str,
    delete_genre_use_case: FromDishka[DeleteGenreUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a genre. Comics keep their other genres."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        await delete_genre_use_case.execute(
            DeleteGenreRequest(user_id=user_id, genre_id=genre_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete genre")

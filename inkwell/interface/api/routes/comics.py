"""Comic browsing and reading routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from inkwell.application.usecase.comic import (
    GetComicRequest,
    GetComicResponse,
    GetComicUseCase,
    ListComicsRequest,
    ListComicsResponse,
    ListComicsUseCase,
    ReadChapterRequest,
    ReadChapterResponse,
    ReadChapterUseCase,
)
from inkwell.config import Settings
from inkwell.domain.repository import ComicSortOrder
from inkwell.domain.service import JWTService
from inkwell.domain.value import ComicStatus
from inkwell.interface.error import InvalidQueryError, to_http_exception

router = APIRouter(prefix="/comics", tags=["comics"], route_class=DishkaRoute)


@router.get("", response_model=ListComicsResponse)
async def list_comics(
    list_comics_use_case: FromDishka[ListComicsUseCase],
    settings: FromDishka[Settings],
    search: str | None = Query(default=None, max_length=200),
    genre: str | None = None,
    comic_status: ComicStatus | None = Query(default=None, alias="status"),
    sort: ComicSortOrder = ComicSortOrder.LATEST,
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> ListComicsResponse:
    """Browse the catalog.

    Args:
        search: Case-insensitive title substring
        genre: Genre slug
        comic_status: Publication status
        sort: latest, popular, rating or title
        limit: Page size (defaults to the configured page size)
        offset: Number of comics to skip

    Example:
        GET /comics?genre=action&sort=popular&limit=12&offset=24
    """
    try:
        page_size = limit if limit is not None else settings.catalog.default_page_size
        if page_size > settings.catalog.max_page_size:
            raise InvalidQueryError(
                f"limit must be at most {settings.catalog.max_page_size}"
            )

        return await list_comics_use_case.execute(
            ListComicsRequest(
                search=search,
                genre=genre,
                status=comic_status,
                sort=sort,
                limit=page_size,
                offset=offset,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list comics")


@router.get("/{slug}", response_model=GetComicResponse)
async def get_comic(
    slug: str,
    get_comic_use_case: FromDishka[GetComicUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetComicResponse:
    """Comic detail page. Includes the user's own rating when signed in."""
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_comic_use_case.execute(
            GetComicRequest(slug=slug, user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "get comic")


@router.get("/{slug}/chapters/{chapter_number}", response_model=ReadChapterResponse)
async def read_chapter(
    slug: str,
    chapter_number: int,
    read_chapter_use_case: FromDishka[ReadChapterUseCase],
) -> ReadChapterResponse:
    """Open a chapter in the reader: pages plus previous/next navigation."""
    try:
        return await read_chapter_use_case.execute(
            ReadChapterRequest(comic_slug=slug, chapter_number=chapter_number)
        )
    except Exception as e:
        raise to_http_exception(e, "read chapter")

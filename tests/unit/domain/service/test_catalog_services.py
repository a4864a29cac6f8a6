"""Tests for comic, chapter and genre services."""

from uuid import uuid4

import pytest

from inkwell.domain.error import AlreadyExistsError, NotFoundError
from inkwell.domain.repository.comic import ComicSortOrder
from inkwell.domain.service import (
    ChapterService,
    ComicService,
    CommentService,
    GenreService,
    RatingService,
)
from inkwell.domain.value import ComicId, ComicStatus, GenreId, Slug
from tests.factories import make_chapter, make_comic, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestComicService:
    """Tests for ComicService."""

    @pytest.mark.asyncio
    async def test_slug_derived_from_title(self, unit_env):
        comic = await make_comic(unit_env, "The Last Lighthouse!")

        assert comic.slug == Slug("the-last-lighthouse")

    @pytest.mark.asyncio
    async def test_duplicate_title_rejected(self, unit_env):
        await make_comic(unit_env, "Night Shift")

        with pytest.raises(AlreadyExistsError):
            await make_comic(unit_env, "Night Shift")

    @pytest.mark.asyncio
    async def test_list_filters_and_counts(self, unit_env):
        # Arrange
        service = await unit_env.get(ComicService)
        genres = await unit_env.get(GenreService)
        horror = await genres.create_genre("Horror")
        await service.create_comic("Night Shift", genre_ids=[horror.id])
        await service.create_comic("Night Owls", status=ComicStatus.COMPLETED)
        await service.create_comic("Day Off")

        # Act
        by_title, title_total = await service.list_comics(search="night")
        by_genre, genre_total = await service.list_comics(genre_id=horror.id)
        by_status, _ = await service.list_comics(status=ComicStatus.COMPLETED)

        # Assert
        assert title_total == 2
        assert {c.title for c in by_title} == {"Night Shift", "Night Owls"}
        assert genre_total == 1 and by_genre[0].title == "Night Shift"
        assert [c.title for c in by_status] == ["Night Owls"]

    @pytest.mark.asyncio
    async def test_list_paginates_and_sorts_by_title(self, unit_env):
        service = await unit_env.get(ComicService)
        for title in ["Charlie", "Alpha", "Bravo"]:
            await service.create_comic(title)

        page, total = await service.list_comics(
            sort=ComicSortOrder.TITLE, limit=2, offset=1
        )

        assert total == 3
        assert [c.title for c in page] == ["Bravo", "Charlie"]

    @pytest.mark.asyncio
    async def test_list_by_rating(self, unit_env):
        user = await make_user(unit_env)
        low = await make_comic(unit_env, "Low")
        high = await make_comic(unit_env, "High")
        ratings = await unit_env.get(RatingService)
        await ratings.rate_comic(user.id, low.id, 2)
        await ratings.rate_comic(user.id, high.id, 5)
        service = await unit_env.get(ComicService)

        page, _ = await service.list_comics(sort=ComicSortOrder.RATING)

        assert [c.id for c in page] == [high.id, low.id]

    @pytest.mark.asyncio
    async def test_update_comic_fields(self, unit_env):
        comic = await make_comic(unit_env)
        service = await unit_env.get(ComicService)

        updated = await service.update_comic(
            comic.id, status=ComicStatus.HIATUS, description="On break"
        )

        assert updated.status == ComicStatus.HIATUS
        assert updated.description == "On break"
        assert updated.title == comic.title

    @pytest.mark.asyncio
    async def test_update_missing_comic_raises_not_found(self, unit_env):
        service = await unit_env.get(ComicService)

        with pytest.raises(NotFoundError):
            await service.update_comic(ComicId(uuid4()), description="x")

    @pytest.mark.asyncio
    async def test_delete_comic_removes_chapters_and_comments(self, unit_env):
        # Arrange
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        chapter = await make_chapter(unit_env, comic)
        comments = await unit_env.get(CommentService)
        await comments.create_comment(chapter.id, user.id, "Bye")
        service = await unit_env.get(ComicService)
        chapters = await unit_env.get(ChapterService)

        # Act
        await service.delete_comic(comic.id)

        # Assert
        assert await service.get_by_id(comic.id) is None
        assert await chapters.get_by_id(chapter.id) is None
        assert await comments.get_comment_records(chapter.id) == []
        with pytest.raises(NotFoundError):
            await service.delete_comic(comic.id)

    @pytest.mark.asyncio
    async def test_increment_views(self, unit_env):
        comic = await make_comic(unit_env)
        service = await unit_env.get(ComicService)

        await service.increment_views(comic.id)
        await service.increment_views(comic.id)

        assert (await service.get_by_id(comic.id)).views == 2


class TestChapterService:
    """Tests for ChapterService."""

    @pytest.mark.asyncio
    async def test_duplicate_number_rejected(self, unit_env):
        comic = await make_comic(unit_env)
        await make_chapter(unit_env, comic, 1)

        with pytest.raises(AlreadyExistsError):
            await make_chapter(unit_env, comic, 1)

    @pytest.mark.asyncio
    async def test_neighbours_skip_gaps(self, unit_env):
        comic = await make_comic(unit_env)
        for number in (1, 2, 5):
            await make_chapter(unit_env, comic, number)
        service = await unit_env.get(ChapterService)

        first = await service.get_by_number(comic.id, 1)
        middle = await service.get_by_number(comic.id, 2)
        last = await service.get_by_number(comic.id, 5)

        assert await service.get_neighbours(first) == (None, 2)
        assert await service.get_neighbours(middle) == (1, 5)
        assert await service.get_neighbours(last) == (2, None)

    @pytest.mark.asyncio
    async def test_list_chapters_ordered_by_number(self, unit_env):
        comic = await make_comic(unit_env)
        for number in (3, 1, 2):
            await make_chapter(unit_env, comic, number)
        service = await unit_env.get(ChapterService)

        chapters = await service.list_chapters(comic.id)

        assert [c.chapter_number for c in chapters] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_missing_number_returns_none(self, unit_env):
        comic = await make_comic(unit_env)
        service = await unit_env.get(ChapterService)

        assert await service.get_by_number(comic.id, 42) is None


class TestGenreService:
    """Tests for GenreService."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_slug(self, unit_env):
        service = await unit_env.get(GenreService)

        genre = await service.create_genre("Slice of Life")

        assert genre.slug == Slug("slice-of-life")
        assert await service.get_by_slug(Slug("slice-of-life")) == genre

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, unit_env):
        service = await unit_env.get(GenreService)
        await service.create_genre("Horror")

        with pytest.raises(AlreadyExistsError):
            await service.create_genre("Horror")

    @pytest.mark.asyncio
    async def test_validate_genres_exist(self, unit_env):
        service = await unit_env.get(GenreService)
        horror = await service.create_genre("Horror")
        missing = GenreId(uuid4())

        assert await service.validate_genres_exist([horror.id]) == [horror]
        with pytest.raises(ValueError, match=str(missing)):
            await service.validate_genres_exist([horror.id, missing])

"""Tests for BookmarkService."""

from uuid import uuid4

import pytest

from inkwell.domain.error import AlreadyExistsError, NotFoundError
from inkwell.domain.service import BookmarkService
from inkwell.domain.value import BookmarkStatus, ComicId
from tests.factories import make_chapter, make_comic, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestBookmarkService:
    """Tests for the user's reading lists."""

    @pytest.mark.asyncio
    async def test_add_and_list(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        service = await unit_env.get(BookmarkService)

        bookmark = await service.add_bookmark(
            user.id, comic.id, BookmarkStatus.PLAN_TO_READ, notes="Friend's pick"
        )

        assert bookmark.status == BookmarkStatus.PLAN_TO_READ
        assert [b.comic_id for b in await service.list_bookmarks(user.id)] == [comic.id]

    @pytest.mark.asyncio
    async def test_duplicate_bookmark_rejected(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        service = await unit_env.get(BookmarkService)
        await service.add_bookmark(user.id, comic.id)

        with pytest.raises(AlreadyExistsError):
            await service.add_bookmark(user.id, comic.id)

    @pytest.mark.asyncio
    async def test_bookmark_unknown_comic_raises_not_found(self, unit_env):
        user = await make_user(unit_env)
        service = await unit_env.get(BookmarkService)

        with pytest.raises(NotFoundError):
            await service.add_bookmark(user.id, ComicId(uuid4()))

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        chapter = await make_chapter(unit_env, comic)
        service = await unit_env.get(BookmarkService)
        await service.add_bookmark(user.id, comic.id, notes="Keep")

        updated = await service.update_bookmark(
            user.id,
            comic.id,
            status=BookmarkStatus.COMPLETED,
            last_read_chapter_id=chapter.id,
        )

        assert updated.status == BookmarkStatus.COMPLETED
        assert updated.notes == "Keep"
        assert updated.last_read_chapter_id == chapter.id

    @pytest.mark.asyncio
    async def test_update_missing_bookmark_raises_not_found(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        service = await unit_env.get(BookmarkService)

        with pytest.raises(NotFoundError):
            await service.update_bookmark(user.id, comic.id, status=BookmarkStatus.DROPPED)

    @pytest.mark.asyncio
    async def test_remove_bookmark(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        service = await unit_env.get(BookmarkService)
        await service.add_bookmark(user.id, comic.id)

        await service.remove_bookmark(user.id, comic.id)

        assert await service.get_bookmark(user.id, comic.id) is None
        with pytest.raises(NotFoundError):
            await service.remove_bookmark(user.id, comic.id)

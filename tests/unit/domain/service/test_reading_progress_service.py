"""Tests for ReadingProgressService."""

import pytest

from inkwell.domain.service import ReadingProgressService
from tests.factories import make_chapter, make_comic, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReadingProgressService:
    """Tests for saving and reading progress."""

    @pytest.mark.asyncio
    async def test_save_then_overwrite(self, unit_env):
        # Arrange
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        first = await make_chapter(unit_env, comic, 1)
        second = await make_chapter(unit_env, comic, 2)
        service = await unit_env.get(ReadingProgressService)

        # Act
        saved = await service.save_progress(user.id, comic.id, first.id, page_number=3)
        moved = await service.save_progress(
            user.id, comic.id, second.id, progress_percent=40
        )

        # Assert
        assert moved.id == saved.id
        assert moved.chapter_id == second.id
        assert moved.completed_at is None
        assert len(await service.list_progress(user.id)) == 1

    @pytest.mark.asyncio
    async def test_completion_is_kept_when_rereading(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        chapter = await make_chapter(unit_env, comic)
        service = await unit_env.get(ReadingProgressService)

        done = await service.save_progress(
            user.id, comic.id, chapter.id, progress_percent=100
        )
        reread = await service.save_progress(
            user.id, comic.id, chapter.id, progress_percent=10
        )

        assert done.completed_at is not None
        assert reread.completed_at == done.completed_at
        assert reread.progress_percent == 10

    @pytest.mark.asyncio
    async def test_chapter_from_another_comic_rejected(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env, "Night Shift")
        other = await make_comic(unit_env, "Day Off")
        chapter = await make_chapter(unit_env, other)
        service = await unit_env.get(ReadingProgressService)

        with pytest.raises(ValueError, match="does not belong"):
            await service.save_progress(user.id, comic.id, chapter.id)

    @pytest.mark.asyncio
    async def test_delete_progress(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        chapter = await make_chapter(unit_env, comic)
        service = await unit_env.get(ReadingProgressService)
        await service.save_progress(user.id, comic.id, chapter.id)

        assert await service.delete_progress(user.id, comic.id) is True
        assert await service.get_progress(user.id, comic.id) is None
        assert await service.delete_progress(user.id, comic.id) is False

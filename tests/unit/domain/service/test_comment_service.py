"""Tests for CommentService."""

from uuid import uuid4

import pytest

from inkwell.domain.error import NotFoundError
from inkwell.domain.model.comment import UNKNOWN_AUTHOR_NAME
from inkwell.domain.service import CommentService
from inkwell.domain.value import ChapterId, CommentId, UserId
from tests.factories import make_chapter, make_comic, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for creating comments and replies."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        # Arrange
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)

        # Act
        comment = await service.create_comment(
            chapter_id=chapter.id, author_id=user.id, content="  Great panel work  "
        )

        # Assert
        assert comment.content == "Great panel work"
        assert comment.parent_id is None
        assert comment.chapter_id == chapter.id
        assert not comment.is_deleted

    @pytest.mark.asyncio
    async def test_unknown_chapter_raises_not_found(self, unit_env):
        user = await make_user(unit_env)
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.create_comment(
                chapter_id=ChapterId(uuid4()), author_id=user.id, content="Hello"
            )

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_rejected(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)

        with pytest.raises(ValueError, match="Parent comment not found"):
            await service.create_comment(
                chapter_id=chapter.id,
                author_id=user.id,
                content="Reply",
                parent_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_reply_across_chapters_rejected(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        first = await make_chapter(unit_env, comic, 1)
        second = await make_chapter(unit_env, comic, 2)
        service = await unit_env.get(CommentService)
        parent = await service.create_comment(first.id, user.id, "On chapter one")

        with pytest.raises(ValueError, match="does not belong"):
            await service.create_comment(second.id, user.id, "Reply", parent.id)

    @pytest.mark.asyncio
    async def test_reply_to_deleted_comment_rejected(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)
        parent = await service.create_comment(chapter.id, user.id, "Soon gone")
        await service.soft_delete(parent.id)

        with pytest.raises(ValueError, match="deleted"):
            await service.create_comment(chapter.id, user.id, "Reply", parent.id)

    @pytest.mark.asyncio
    async def test_whitespace_only_content_rejected(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)

        with pytest.raises(ValueError):
            await service.create_comment(chapter.id, user.id, "   ")


class TestCommentThread:
    """Tests for reading a chapter's discussion."""

    @pytest.mark.asyncio
    async def test_thread_nests_replies(self, unit_env):
        # Arrange
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)
        root = await service.create_comment(chapter.id, user.id, "Root")
        reply = await service.create_comment(chapter.id, user.id, "Reply", root.id)
        nested = await service.create_comment(chapter.id, user.id, "Nested", reply.id)
        other = await service.create_comment(chapter.id, user.id, "Another root")

        # Act
        roots = await service.get_comment_thread(chapter.id)

        # Assert
        assert [node.id for node in roots] == [root.id, other.id]
        assert [node.id for node in roots[0].children] == [reply.id]
        assert [node.id for node in roots[0].children[0].children] == [nested.id]
        assert roots[0].author_display_name == "Reader"

    @pytest.mark.asyncio
    async def test_deleted_comment_stays_in_thread(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)
        root = await service.create_comment(chapter.id, user.id, "Root")
        reply = await service.create_comment(chapter.id, user.id, "Reply", root.id)
        await service.soft_delete(root.id)

        roots = await service.get_comment_thread(chapter.id)

        assert [node.id for node in roots] == [root.id]
        assert roots[0].is_deleted
        assert [node.id for node in roots[0].children] == [reply.id]
        assert await service.count_comments(chapter.id) == 1

    @pytest.mark.asyncio
    async def test_missing_author_falls_back_to_unknown(self, unit_env):
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)
        await service.create_comment(chapter.id, UserId(uuid4()), "Ghost")

        records = await service.get_comment_records(chapter.id)

        assert records[0].author_display_name == UNKNOWN_AUTHOR_NAME
        assert records[0].author_avatar_url is None

    @pytest.mark.asyncio
    async def test_empty_chapter_has_no_thread(self, unit_env):
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)

        assert await service.get_comment_thread(chapter.id) == []


class TestCommentChanges:
    """Tests for editing and soft-deleting comments."""

    @pytest.mark.asyncio
    async def test_update_content(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)
        comment = await service.create_comment(chapter.id, user.id, "Frist")

        updated = await service.update_content(comment.id, "First")

        assert updated is not None
        assert updated.content == "First"
        assert updated.updated_at >= comment.updated_at

    @pytest.mark.asyncio
    async def test_update_deleted_comment_returns_none(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)
        comment = await service.create_comment(chapter.id, user.id, "Text")
        await service.soft_delete(comment.id)

        assert await service.update_content(comment.id, "Edited") is None

    @pytest.mark.asyncio
    async def test_soft_delete_twice_returns_none(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        service = await unit_env.get(CommentService)
        comment = await service.create_comment(chapter.id, user.id, "Text")

        first = await service.soft_delete(comment.id)
        second = await service.soft_delete(comment.id)

        assert first is not None and first.is_deleted
        assert second is None
        stored = await service.get_comment_by_id(comment.id)
        assert stored is not None and stored.is_deleted

"""Tests for the comment use cases."""

from uuid import uuid4

import pytest

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from inkwell.config import Settings
from inkwell.domain.error import (
    ContentDeletedException,
    NotAuthorizedError,
    NotFoundError,
)
from inkwell.domain.model.comment import COMMENT_MAX_LENGTH
from inkwell.domain.value import UserRole
from tests.factories import make_chapter, make_comic, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _comment(container, chapter, user, content, parent_id=None):
    use_case = await container.get(CreateCommentUseCase)
    return await use_case.execute(
        CreateCommentRequest(
            chapter_id=str(chapter.id),
            author_id=str(user.id),
            content=content,
            parent_id=parent_id,
        )
    )


class TestGetComments:
    """Tests for presenting a chapter's discussion."""

    @pytest.mark.asyncio
    async def test_thread_with_counts(self, unit_env):
        # Arrange
        user = await make_user(unit_env, name="Mika")
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        root = await _comment(unit_env, chapter, user, "Root")
        await _comment(unit_env, chapter, user, "Reply", root.comment_id)
        await _comment(unit_env, chapter, user, "Second root")
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await use_case.execute(GetCommentsRequest(chapter_id=str(chapter.id)))

        # Assert
        assert response.total == 3
        assert [item.content for item in response.roots] == ["Root", "Second root"]
        assert [item.content for item in response.roots[0].replies] == ["Reply"]
        assert response.roots[0].author_display_name == "Mika"
        assert response.roots[0].replies[0].parent_id == root.comment_id

    @pytest.mark.asyncio
    async def test_deleted_comment_is_masked_but_keeps_replies(self, unit_env):
        # Arrange
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        root = await _comment(unit_env, chapter, user, "Spoilers here")
        await _comment(unit_env, chapter, user, "Reply", root.comment_id)
        delete = await unit_env.get(DeleteCommentUseCase)
        await delete.execute(
            DeleteCommentRequest(comment_id=root.comment_id, user_id=str(user.id))
        )
        use_case = await unit_env.get(GetCommentsUseCase)
        settings = await unit_env.get(Settings)

        # Act
        response = await use_case.execute(GetCommentsRequest(chapter_id=str(chapter.id)))

        # Assert
        masked = response.roots[0]
        assert masked.is_deleted
        assert masked.content == settings.comments.deleted_placeholder
        assert masked.author_id is None
        assert masked.author_display_name is None
        assert [item.content for item in masked.replies] == ["Reply"]
        assert response.total == 2

    @pytest.mark.asyncio
    async def test_unknown_chapter_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(chapter_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_replies_past_max_depth_listed_at_deepest_level(self, unit_env):
        # Arrange
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        max_depth = (await unit_env.get(Settings)).comments.max_depth
        ids = []
        parent_id = None
        for level in range(max_depth + 5):
            created = await _comment(
                unit_env, chapter, user, f"Level {level + 1}", parent_id
            )
            ids.append(created.comment_id)
            parent_id = created.comment_id
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await use_case.execute(GetCommentsRequest(chapter_id=str(chapter.id)))

        # Assert
        assert response.total == max_depth + 5
        level_items = response.roots
        for _ in range(max_depth - 1):
            assert len(level_items) == 1
            level_items = level_items[0].replies
        assert [item.comment_id for item in level_items] == ids[max_depth - 1 :]
        assert all(item.replies == [] for item in level_items)
        assert [item.parent_id for item in level_items[1:]] == ids[max_depth - 1 : -1]

    @pytest.mark.asyncio
    async def test_lifted_replies_keep_thread_order(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        max_depth = (await unit_env.get(Settings)).comments.max_depth
        parent_id = None
        for level in range(max_depth):
            created = await _comment(unit_env, chapter, user, f"L{level}", parent_id)
            parent_id = created.comment_id
        first = await _comment(unit_env, chapter, user, "First", parent_id)
        second = await _comment(unit_env, chapter, user, "Second", parent_id)
        await _comment(unit_env, chapter, user, "Under first", first.comment_id)
        await _comment(unit_env, chapter, user, "Under second", second.comment_id)
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(chapter_id=str(chapter.id)))

        level_items = response.roots
        for _ in range(max_depth - 1):
            level_items = level_items[0].replies
        assert [item.content for item in level_items] == [
            f"L{max_depth - 1}",
            "First",
            "Under first",
            "Second",
            "Under second",
        ]


class TestCreateComment:
    """Tests for posting comments."""

    @pytest.mark.asyncio
    async def test_length_limit_applies_after_trimming(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))

        created = await _comment(
            unit_env, chapter, user, "  " + "x" * COMMENT_MAX_LENGTH + "\n"
        )

        assert created.content == "x" * COMMENT_MAX_LENGTH
        with pytest.raises(ValueError):
            await _comment(unit_env, chapter, user, "x" * (COMMENT_MAX_LENGTH + 1))


class TestUpdateComment:
    """Tests for editing comments."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        created = await _comment(unit_env, chapter, user, "Typo")
        use_case = await unit_env.get(UpdateCommentUseCase)

        response = await use_case.execute(
            UpdateCommentRequest(
                comment_id=created.comment_id, user_id=str(user.id), content=" Fixed "
            )
        )

        assert response.content == "Fixed"
        assert response.comment_id == created.comment_id

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        author = await make_user(unit_env, email="author@example.com")
        other = await make_user(unit_env, email="other@example.com")
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        created = await _comment(unit_env, chapter, author, "Mine")
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=created.comment_id, user_id=str(other.id), content="Yours"
                )
            )

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_edited(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        created = await _comment(unit_env, chapter, user, "Gone")
        delete = await unit_env.get(DeleteCommentUseCase)
        await delete.execute(
            DeleteCommentRequest(comment_id=created.comment_id, user_id=str(user.id))
        )
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(ContentDeletedException):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=created.comment_id, user_id=str(user.id), content="Back"
                )
            )

    @pytest.mark.asyncio
    async def test_whitespace_only_edit_rejected(self, unit_env):
        user = await make_user(unit_env)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        created = await _comment(unit_env, chapter, user, "Text")
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=created.comment_id, user_id=str(user.id), content="   "
                )
            )


class TestDeleteComment:
    """Tests for soft-deleting comments."""

    @pytest.mark.asyncio
    async def test_admin_can_delete_any_comment(self, unit_env):
        author = await make_user(unit_env, email="author@example.com")
        admin = await make_user(unit_env, email="admin@example.com", role=UserRole.ADMIN)
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        created = await _comment(unit_env, chapter, author, "Rude")
        use_case = await unit_env.get(DeleteCommentUseCase)

        await use_case.execute(
            DeleteCommentRequest(comment_id=created.comment_id, user_id=str(admin.id))
        )

        with pytest.raises(ContentDeletedException):
            await use_case.execute(
                DeleteCommentRequest(comment_id=created.comment_id, user_id=str(admin.id))
            )

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        author = await make_user(unit_env, email="author@example.com")
        other = await make_user(unit_env, email="other@example.com")
        chapter = await make_chapter(unit_env, await make_comic(unit_env))
        created = await _comment(unit_env, chapter, author, "Mine")
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=created.comment_id, user_id=str(other.id))
            )

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        user = await make_user(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(uuid4()), user_id=str(user.id))
            )

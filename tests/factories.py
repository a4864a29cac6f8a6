"""Helpers that put rows in place for tests."""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from dishka import AsyncContainer
from fastapi.testclient import TestClient

from inkwell.domain.model import Chapter, Comic, User
from inkwell.domain.model.comment import CommentRecord
from inkwell.domain.repository import UserRepository
from inkwell.domain.service import AuthService, ChapterService, ComicService
from inkwell.domain.value import (
    ChapterId,
    CommentId,
    Email,
    UserId,
    UserRole,
)

DEFAULT_PASSWORD = "correct-horse-battery"

_BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


async def make_user(
    container: AsyncContainer,
    email: str = "reader@example.com",
    name: str | None = "Reader",
    role: UserRole = UserRole.USER,
    password: str = DEFAULT_PASSWORD,
) -> User:
    auth_service = await container.get(AuthService)
    return await auth_service.register(Email(email), password, name=name, role=role)


async def make_comic(container: AsyncContainer, title: str = "Night Shift") -> Comic:
    comic_service = await container.get(ComicService)
    return await comic_service.create_comic(title=title, description=f"About {title}")


async def make_chapter(
    container: AsyncContainer, comic: Comic, chapter_number: int = 1
) -> Chapter:
    chapter_service = await container.get(ChapterService)
    return await chapter_service.create_chapter(
        comic_id=comic.id,
        chapter_number=chapter_number,
        title=f"Chapter {chapter_number}",
        image_urls=[f"https://cdn.example.com/{comic.slug.root}/{chapter_number}/1.jpg"],
    )


def make_record(
    parent: CommentRecord | CommentId | None = None,
    minute: int = 0,
    chapter_id: ChapterId | None = None,
    deleted: bool = False,
    content: str | None = None,
    comment_id: CommentId | None = None,
) -> CommentRecord:
    """Build a flat comment record without touching any repository."""
    if isinstance(parent, CommentRecord):
        parent = parent.id
    created_at = _BASE_TIME + timedelta(minutes=minute)
    record_id = comment_id or CommentId(uuid4())
    return CommentRecord(
        id=record_id,
        chapter_id=chapter_id or ChapterId(uuid4()),
        author_id=UserId(uuid4()),
        author_display_name="Reader",
        content=content or f"comment {record_id}",
        parent_id=parent,
        created_at=created_at,
        updated_at=created_at,
        deleted_at=created_at + timedelta(minutes=1) if deleted else None,
    )


def sign_up(client: TestClient, email: str, name: str | None = None) -> dict:
    """Create an account over the API; the client keeps its auth cookie."""
    response = client.post(
        "/auth/signup",
        json={"email": email, "password": DEFAULT_PASSWORD, "name": name},
    )
    assert response.status_code == 201, response.text
    return response.json()


def promote_to_admin(container: AsyncContainer, user_id: str) -> None:
    """Give an existing account the admin role, outside any request."""

    async def _promote() -> None:
        async with container() as request_container:
            users = await request_container.get(UserRepository)
            user = await users.find_by_id(UserId(UUID(user_id)))
            await users.save(user.model_copy(update={"role": UserRole.ADMIN}))

    asyncio.run(_promote())

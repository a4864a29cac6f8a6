"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional, Sequence
from uuid import UUID

from inkwell.domain.model import (
    Author,
    Bookmark,
    Chapter,
    Comic,
    Comment,
    CommentRecord,
    Genre,
    Rating,
    ReadingProgress,
    User,
)
from inkwell.domain.model.comment import UNKNOWN_AUTHOR_NAME
from inkwell.domain.value import (
    AuthorId,
    BookmarkStatus,
    ChapterId,
    ComicId,
    ComicStatus,
    CommentId,
    Email,
    GenreId,
    RatingId,
    ReadingProgressId,
    Slug,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        name=row.get("name"),
        image=row.get("image"),
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_author(row: Dict[str, Any]) -> Author:
    """Convert database row to Author domain model."""
    return Author(
        id=AuthorId(_uuid(row["id"])),
        name=row["name"],
        bio=row.get("bio"),
        image=row.get("image"),
        created_at=row["created_at"],
    )


def author_to_dict(author: Author) -> Dict[str, Any]:
    return author.model_dump()


def row_to_genre(row: Dict[str, Any]) -> Genre:
    """Convert database row to Genre domain model."""
    return Genre(
        id=GenreId(_uuid(row["id"])),
        name=row["name"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        created_at=row["created_at"],
    )


def genre_to_dict(genre: Genre) -> Dict[str, Any]:
    return genre.model_dump()


def row_to_comic(row: Dict[str, Any], genre_ids: Sequence[UUID] = ()) -> Comic:
    """Convert database row to Comic domain model.

    Args:
        row: Database row as dict
        genre_ids: IDs of the comic's genres (from the junction table)

    Returns:
        Comic domain model
    """
    author_id = _optional_uuid(row.get("author_id"))
    return Comic(
        id=ComicId(_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        description=row.get("description") or "",
        cover_image=row.get("cover_image") or "",
        status=ComicStatus(row["status"]),
        publication_date=row.get("publication_date"),
        rating=row.get("rating") or 0.0,
        views=row.get("views", 0),
        author_id=AuthorId(author_id) if author_id else None,
        genre_ids=[GenreId(_uuid(g)) for g in genre_ids],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comic_to_dict(comic: Comic) -> Dict[str, Any]:
    """Convert Comic domain model to database dict.

    Genre links live in the junction table and are excluded.
    """
    data = comic.model_dump(exclude={"genre_ids"})
    data["status"] = comic.status.value
    return data


def row_to_chapter(row: Dict[str, Any]) -> Chapter:
    """Convert database row to Chapter domain model."""
    return Chapter(
        id=ChapterId(_uuid(row["id"])),
        comic_id=ComicId(_uuid(row["comic_id"])),
        chapter_number=row["chapter_number"],
        title=row["title"],
        slug=Slug(row["slug"]),
        release_date=row["release_date"],
        image_urls=list(row.get("image_urls") or []),
        views=row.get("views", 0),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def chapter_to_dict(chapter: Chapter) -> Dict[str, Any]:
    return chapter.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _optional_uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        chapter_id=ChapterId(_uuid(row["chapter_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_comment_record(row: Dict[str, Any]) -> CommentRecord:
    """Convert a comment row joined with its author to a flat CommentRecord.

    The author columns are NULL when the author row no longer exists; the
    display name then falls back to "Unknown User".

    Args:
        row: Database row as dict, with ``author_name``, ``author_email`` and
            ``author_image`` columns from the users join

    Returns:
        CommentRecord domain model
    """
    parent_id = _optional_uuid(row.get("parent_id"))

    display_name = row.get("author_name")
    if not display_name and row.get("author_email"):
        display_name = row["author_email"].split("@")[0]

    return CommentRecord(
        id=CommentId(_uuid(row["id"])),
        chapter_id=ChapterId(_uuid(row["chapter_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_display_name=display_name or UNKNOWN_AUTHOR_NAME,
        author_avatar_url=row.get("author_image"),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def row_to_bookmark(row: Dict[str, Any]) -> Bookmark:
    """Convert database row to Bookmark domain model."""
    last_read = _optional_uuid(row.get("last_read_chapter_id"))
    return Bookmark(
        user_id=UserId(_uuid(row["user_id"])),
        comic_id=ComicId(_uuid(row["comic_id"])),
        status=BookmarkStatus(row["status"]),
        notes=row.get("notes"),
        last_read_chapter_id=ChapterId(last_read) if last_read else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def bookmark_to_dict(bookmark: Bookmark) -> Dict[str, Any]:
    data = bookmark.model_dump()
    data["status"] = bookmark.status.value
    return data


def row_to_rating(row: Dict[str, Any]) -> Rating:
    """Convert database row to Rating domain model."""
    return Rating(
        id=RatingId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        comic_id=ComicId(_uuid(row["comic_id"])),
        rating=row["rating"],
        review=row.get("review"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def rating_to_dict(rating: Rating) -> Dict[str, Any]:
    return rating.model_dump()


def row_to_reading_progress(row: Dict[str, Any]) -> ReadingProgress:
    """Convert database row to ReadingProgress domain model."""
    return ReadingProgress(
        id=ReadingProgressId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        comic_id=ComicId(_uuid(row["comic_id"])),
        chapter_id=ChapterId(_uuid(row["chapter_id"])),
        page_number=row["page_number"],
        scroll_position=row["scroll_position"],
        progress_percent=row["progress_percent"],
        completed_at=row.get("completed_at"),
        last_read_at=row["last_read_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reading_progress_to_dict(progress: ReadingProgress) -> Dict[str, Any]:
    return progress.model_dump()

"""initial_schema

Create the schema for Inkwell:
- Users (email/password accounts with a user/admin role)
- Authors, Genres, Comics (many-to-many with genres), Chapters
- Comments (threaded through a plain parent reference, soft-deletable)
- Bookmarks, Ratings, Reading progress (one row per user and comic)

Revision ID: 3c1f9a2d7b40
Revises:
Create Date: 2026-10-17 09:12:44.512309

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(255), nullable=False),  # Lowercased
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint("role IN ('user', 'admin')", name="valid_role"),
    )

    # ========================================================================
    # AUTHORS and GENRES tables
    # ========================================================================
    op.create_table(
        "authors",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_authors_name", "authors", ["name"])

    op.create_table(
        "genres",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_genres_name"),
        sa.UniqueConstraint("slug", name="uq_genres_slug"),
    )

    # ========================================================================
    # COMICS table
    # ========================================================================
    op.create_table(
        "comics",
        _id(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("cover_image", sa.Text(), nullable=False, server_default=""),
        sa.Column("status", sa.String(20), nullable=False, server_default="Ongoing"),
        sa.Column("publication_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("author_id", sa.UUID(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["authors.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("title", name="uq_comics_title"),
        sa.UniqueConstraint("slug", name="uq_comics_slug"),
        sa.CheckConstraint(
            "status IN ('Ongoing', 'Completed', 'Hiatus', 'Dropped', 'Coming Soon')",
            name="valid_comic_status",
        ),
        sa.CheckConstraint("rating >= 0 AND rating <= 5", name="rating_range"),
    )
    op.create_index("idx_comics_author_id", "comics", ["author_id"])
    op.create_index("idx_comics_updated_at", "comics", [sa.text("updated_at DESC")])
    op.create_index("idx_comics_views", "comics", [sa.text("views DESC")])

    op.create_table(
        "comic_genres",
        sa.Column("comic_id", sa.UUID(), nullable=False),
        sa.Column("genre_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["comic_id"], ["comics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["genre_id"], ["genres.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("comic_id", "genre_id"),
    )
    op.create_index("idx_comic_genres_genre_id", "comic_genres", ["genre_id"])

    # ========================================================================
    # CHAPTERS table
    # ========================================================================
    op.create_table(
        "chapters",
        _id(),
        sa.Column("comic_id", sa.UUID(), nullable=False),
        sa.Column("chapter_number", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column(
            "release_date",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "image_urls",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["comic_id"], ["comics.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "comic_id", "chapter_number", name="uq_comic_chapter_number"
        ),
        sa.CheckConstraint("chapter_number >= 0", name="chapter_number_non_negative"),
    )
    op.create_index("idx_chapters_comic_id", "chapters", ["comic_id"])

    # ========================================================================
    # COMMENTS table
    # parent_id and author_id carry no foreign key: replies outlive a removed
    # parent row and comments outlive their author.
    # ========================================================================
    op.create_table(
        "comments",
        _id(),
        sa.Column("chapter_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["chapter_id"], ["chapters.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(content) > 0", name="content_not_empty"),
    )
    op.create_index(
        "idx_comments_chapter_created", "comments", ["chapter_id", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    # ========================================================================
    # BOOKMARKS table
    # ========================================================================
    op.create_table(
        "bookmarks",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("comic_id", sa.UUID(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Reading"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("last_read_chapter_id", sa.UUID(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comic_id"], ["comics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["last_read_chapter_id"], ["chapters.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("user_id", "comic_id"),
        sa.CheckConstraint(
            "status IN ('Reading', 'Plan to Read', 'Completed', 'On Hold', 'Dropped')",
            name="valid_bookmark_status",
        ),
    )
    op.create_index(
        "idx_bookmarks_user_created", "bookmarks", ["user_id", "created_at"]
    )

    # ========================================================================
    # RATINGS table
    # ========================================================================
    op.create_table(
        "ratings",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("comic_id", sa.UUID(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("review", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comic_id"], ["comics.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "comic_id", name="uq_user_comic_rating"),
        sa.CheckConstraint("rating >= 1 AND rating <= 5", name="rating_stars_range"),
    )
    op.create_index("idx_ratings_comic_id", "ratings", ["comic_id"])

    # ========================================================================
    # READING_PROGRESS table
    # ========================================================================
    op.create_table(
        "reading_progress",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("comic_id", sa.UUID(), nullable=False),
        sa.Column("chapter_id", sa.UUID(), nullable=False),
        sa.Column("page_number", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("scroll_position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "progress_percent", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column("completed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "last_read_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comic_id"], ["comics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["chapter_id"], ["chapters.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "comic_id", name="uq_user_comic_progress"),
        sa.CheckConstraint(
            "progress_percent >= 0 AND progress_percent <= 100", name="progress_range"
        ),
        sa.CheckConstraint(
            "scroll_position >= 0 AND scroll_position <= 100", name="scroll_range"
        ),
    )
    op.create_index(
        "idx_reading_progress_user_last_read",
        "reading_progress",
        ["user_id", sa.text("last_read_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("reading_progress")
    op.drop_table("ratings")
    op.drop_table("bookmarks")
    op.drop_table("comments")
    op.drop_table("chapters")
    op.drop_table("comic_genres")
    op.drop_table("comics")
    op.drop_table("genres")
    op.drop_table("authors")
    op.drop_table("users")

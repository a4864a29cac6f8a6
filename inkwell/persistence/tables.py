"""SQLAlchemy table definitions for Inkwell.

These tables are used with SQLAlchemy Core; rows are mapped to the immutable
domain models in ``inkwell.persistence.mappers``. They match the schema
defined in the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),  # Lowercased
    Column("name", String(100), nullable=True),
    Column("image", Text, nullable=True),
    Column("password_hash", Text, nullable=False),
    Column("role", String(20), nullable=False, server_default="user"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("role IN ('user', 'admin')", name="valid_role"),
)

# ============================================================================
# AUTHORS TABLE
# ============================================================================
authors_table = Table(
    "authors",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("bio", Text, nullable=True),
    Column("image", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_authors_name", authors_table.c.name)

# ============================================================================
# GENRES TABLE
# ============================================================================
genres_table = Table(
    "genres",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False, unique=True),
    Column("slug", String(200), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMICS TABLE
# ============================================================================
comics_table = Table(
    "comics",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False, unique=True),
    Column("slug", String(200), nullable=False, unique=True),
    Column("description", Text, nullable=False, server_default=""),
    Column("cover_image", Text, nullable=False, server_default=""),
    Column("status", String(20), nullable=False, server_default="Ongoing"),
    Column("publication_date", TIMESTAMP(timezone=True), nullable=True),
    Column("rating", Float, nullable=False, server_default="0"),  # Denormalized
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "author_id", UUID, ForeignKey("authors.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('Ongoing', 'Completed', 'Hiatus', 'Dropped', 'Coming Soon')",
        name="valid_comic_status",
    ),
    CheckConstraint("rating >= 0 AND rating <= 5", name="rating_range"),
)

Index("idx_comics_author_id", comics_table.c.author_id)
Index("idx_comics_updated_at", comics_table.c.updated_at.desc())
Index("idx_comics_views", comics_table.c.views.desc())

# ============================================================================
# COMIC_GENRES TABLE (junction table for many-to-many relationship)
# ============================================================================
comic_genres_table = Table(
    "comic_genres",
    metadata,
    Column(
        "comic_id", UUID, ForeignKey("comics.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "genre_id", UUID, ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True
    ),
)

Index("idx_comic_genres_genre_id", comic_genres_table.c.genre_id)

# ============================================================================
# CHAPTERS TABLE
# ============================================================================
chapters_table = Table(
    "chapters",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comic_id", UUID, ForeignKey("comics.id", ondelete="CASCADE"), nullable=False
    ),
    Column("chapter_number", Integer, nullable=False),
    Column("title", String(300), nullable=False),
    Column("slug", String(200), nullable=False),
    Column(
        "release_date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("image_urls", ARRAY(Text), nullable=False, server_default="{}"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comic_id", "chapter_number", name="uq_comic_chapter_number"),
    CheckConstraint("chapter_number >= 0", name="chapter_number_non_negative"),
)

Index("idx_chapters_comic_id", chapters_table.c.comic_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "chapter_id",
        UUID,
        ForeignKey("chapters.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # No foreign key: replies outlive their parent's row (orphans render as roots)
    Column("parent_id", UUID, nullable=True),
    # No foreign key: comments of deleted users stay, shown as "Unknown User"
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("length(content) > 0", name="content_not_empty"),
)

Index(
    "idx_comments_chapter_created",
    comments_table.c.chapter_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# BOOKMARKS TABLE
# ============================================================================
bookmarks_table = Table(
    "bookmarks",
    metadata,
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "comic_id", UUID, ForeignKey("comics.id", ondelete="CASCADE"), primary_key=True
    ),
    Column("status", String(20), nullable=False, server_default="Reading"),
    Column("notes", Text, nullable=True),
    Column(
        "last_read_chapter_id",
        UUID,
        ForeignKey("chapters.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('Reading', 'Plan to Read', 'Completed', 'On Hold', 'Dropped')",
        name="valid_bookmark_status",
    ),
)

Index("idx_bookmarks_user_created", bookmarks_table.c.user_id, bookmarks_table.c.created_at)

# ============================================================================
# RATINGS TABLE
# ============================================================================
ratings_table = Table(
    "ratings",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "comic_id", UUID, ForeignKey("comics.id", ondelete="CASCADE"), nullable=False
    ),
    Column("rating", Integer, nullable=False),
    Column("review", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comic_id", name="uq_user_comic_rating"),
    CheckConstraint("rating >= 1 AND rating <= 5", name="rating_stars_range"),
)

Index("idx_ratings_comic_id", ratings_table.c.comic_id)

# ============================================================================
# READING_PROGRESS TABLE
# ============================================================================
reading_progress_table = Table(
    "reading_progress",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "comic_id", UUID, ForeignKey("comics.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "chapter_id",
        UUID,
        ForeignKey("chapters.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("page_number", Integer, nullable=False, server_default="0"),
    Column("scroll_position", Integer, nullable=False, server_default="0"),
    Column("progress_percent", Integer, nullable=False, server_default="0"),
    Column("completed_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "last_read_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comic_id", name="uq_user_comic_progress"),
    CheckConstraint(
        "progress_percent >= 0 AND progress_percent <= 100", name="progress_range"
    ),
    CheckConstraint(
        "scroll_position >= 0 AND scroll_position <= 100", name="scroll_range"
    ),
)

Index(
    "idx_reading_progress_user_last_read",
    reading_progress_table.c.user_id,
    reading_progress_table.c.last_read_at.desc(),
)

"""SQLAlchemy table definitions for the blog.

Used with SQLAlchemy Core; domain models are mapped by hand in
``mappers.py``. Must match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the authentication service, read here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("status", String(20), nullable=False, server_default="published"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("comment_count >= 0", name="check_post_comment_count"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_comment_count", posts_table.c.comment_count.desc())

# ============================================================================
# COMMENTS TABLE (flat, parent_id points at the replied-to comment)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    # No FK: replies outlive a deleted parent and drop out of thread listings
    Column("parent_id", UUID, nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edit_history", JSONB, nullable=False, server_default="[]"),
    Column("spam_score", Integer, nullable=False, server_default="0"),
    Column("flags", JSONB, nullable=False, server_default="[]"),
    Column("likes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("dislikes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(content) >= 1 AND char_length(content) <= 1000",
        name="check_comment_content_length",
    ),
    CheckConstraint(
        "spam_score >= 0 AND spam_score <= 100", name="check_comment_spam_score"
    ),
    CheckConstraint(
        "status IN ('pending', 'approved', 'rejected', 'spam')",
        name="check_comment_status",
    ),
)

Index(
    "idx_comments_post_created",
    comments_table.c.post_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_status", comments_table.c.status)

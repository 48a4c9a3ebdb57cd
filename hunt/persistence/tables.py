"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("email", String(255), nullable=False),  # Stored lowercased
    Column("location", String(200), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("profile_picture", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
# One row per post document. Comments and votes are embedded as JSONB so a
# vote and its effect on vote_count land in a single-row write. author_id has
# no foreign key: a post keeps its author name snapshot.
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("author_id", UUID, nullable=False),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("title", String(300), nullable=False),
    Column("caption", String(1000), nullable=False),
    Column("image_url", Text, nullable=False),
    Column("body", Text, nullable=False),
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column("votes", JSONB, nullable=False, server_default="[]"),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("version >= 0", name="ck_posts_version_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

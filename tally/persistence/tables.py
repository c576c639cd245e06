"""SQLAlchemy table definitions for comment votes.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS_VOTES TABLE
# ============================================================================
comments_votes_table = Table(
    "comments_votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("comment_id", Integer, nullable=False),
    # Exactly one of user_id (account voter) or session_id (anonymous voter)
    Column("user_id", Integer, nullable=True),
    Column("session_id", String(255), nullable=True),
    Column("upvote", Boolean, nullable=False, server_default="false"),
    Column("downvote", Boolean, nullable=False, server_default="false"),
    Column("last_ip", String(45), nullable=True),  # Fits IPv6
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One vote per voter per comment
    UniqueConstraint("comment_id", "user_id", name="uq_comments_votes_comment_user"),
    UniqueConstraint(
        "comment_id", "session_id", name="uq_comments_votes_comment_session"
    ),
    CheckConstraint("upvote <> downvote", name="ck_comments_votes_one_direction"),
    CheckConstraint(
        "(user_id IS NULL) <> (session_id IS NULL)",
        name="ck_comments_votes_one_voter",
    ),
)

Index("idx_comments_votes_comment_id", comments_votes_table.c.comment_id)

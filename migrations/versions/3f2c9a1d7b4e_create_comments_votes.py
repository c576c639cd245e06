"""create comments_votes

Create the comment vote table:
- One row per voter per comment (account or anonymous session)
- Up/down direction stored as a pair of flags, exactly one set
- Optional last known requester address

Revision ID: 3f2c9a1d7b4e
Revises:
Create Date: 2026-10-19 10:12:44.318201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a1d7b4e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments_votes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("comment_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("session_id", sa.String(255), nullable=True),
        sa.Column("upvote", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("downvote", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("last_ip", sa.String(45), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        # The unique constraints are what actually guarantee one vote per voter
        sa.UniqueConstraint(
            "comment_id", "user_id", name="uq_comments_votes_comment_user"
        ),
        sa.UniqueConstraint(
            "comment_id", "session_id", name="uq_comments_votes_comment_session"
        ),
        sa.CheckConstraint("upvote <> downvote", name="ck_comments_votes_one_direction"),
        sa.CheckConstraint(
            "(user_id IS NULL) <> (session_id IS NULL)",
            name="ck_comments_votes_one_voter",
        ),
    )

    op.create_index(
        "idx_comments_votes_comment_id", "comments_votes", ["comment_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_votes_comment_id", table_name="comments_votes")
    op.drop_table("comments_votes")

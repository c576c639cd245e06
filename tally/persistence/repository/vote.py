"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import ColumnElement, and_, delete, exists, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.error import NotFoundError
from tally.domain.model import Vote
from tally.domain.repository import VoteRepository
from tally.domain.value import (
    AccountVoter,
    CommentId,
    VoteDirection,
    VoteId,
    VoterIdentity,
)
from tally.persistence.mappers import row_to_vote, vote_to_dict
from tally.persistence.tables import comments_votes_table


def _voter_clause(voter: VoterIdentity) -> ColumnElement[bool]:
    if isinstance(voter, AccountVoter):
        return comments_votes_table.c.user_id == voter.account_id
    # Extract the primitive before comparing against the column
    return comments_votes_table.c.session_id == voter.session_token.root


def _direction_clause(direction: VoteDirection) -> ColumnElement[bool]:
    if direction is VoteDirection.UP:
        return comments_votes_table.c.upvote.is_(True)
    return comments_votes_table.c.downvote.is_(True)


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession, store_user_ips: bool = False) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            store_user_ips: Whether to persist the requester address
        """
        self.session = session
        self.store_user_ips = store_user_ips

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(comments_votes_table).where(comments_votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_comment_id(self, comment_id: CommentId) -> Optional[Vote]:
        """Find any one vote cast on a comment."""
        stmt = (
            select(comments_votes_table)
            .where(comments_votes_table.c.comment_id == comment_id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter(
        self, comment_id: CommentId, voter: VoterIdentity
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific comment."""
        stmt = select(comments_votes_table).where(
            and_(
                comments_votes_table.c.comment_id == comment_id,
                _voter_clause(voter),
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def count_by_comment_id(self, comment_id: CommentId) -> int:
        """Count all votes on a comment."""
        stmt = (
            select(func.count())
            .select_from(comments_votes_table)
            .where(comments_votes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_comment_id_and_direction(
        self, comment_id: CommentId, direction: VoteDirection
    ) -> int:
        """Count votes in one direction on a comment."""
        stmt = (
            select(func.count())
            .select_from(comments_votes_table)
            .where(
                and_(
                    comments_votes_table.c.comment_id == comment_id,
                    _direction_clause(direction),
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def exists_by_voter_and_direction(
        self,
        comment_id: CommentId,
        voter: VoterIdentity,
        direction: VoteDirection,
    ) -> bool:
        """Check whether a voter cast a vote in the given direction."""
        stmt = select(
            exists().where(
                and_(
                    comments_votes_table.c.comment_id == comment_id,
                    _voter_clause(voter),
                    _direction_clause(direction),
                )
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a new vote or update an existing one by ID."""
        values = vote_to_dict(vote, include_address=self.store_user_ips)

        if vote.id is None:
            stmt = (
                insert(comments_votes_table)
                .values(**values)
                .returning(comments_votes_table)
            )
        else:
            stmt = (
                update(comments_votes_table)
                .where(comments_votes_table.c.id == vote.id)
                .values(**values, updated_at=func.now())
                .returning(comments_votes_table)
            )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("Vote", str(vote.id))

        await self.session.flush()
        return row_to_vote(row._asdict())

    async def delete_by_id(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(comments_votes_table).where(comments_votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

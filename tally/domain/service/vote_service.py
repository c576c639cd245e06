"""Vote domain service."""

import secrets
from abc import ABC, abstractmethod
from typing import Optional

import logfire
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from tally.domain.error import VoterIdentityError
from tally.domain.event import VoteEvent, VoteEventKind, VoteEventPublisher
from tally.domain.model import SaveVoteResult, ValidationFailure, Vote
from tally.domain.repository import VoteRepository
from tally.domain.value import (
    AccountId,
    AccountVoter,
    CommentId,
    SessionToken,
    SessionVoter,
    VoteDirection,
    VoteId,
    VoterIdentity,
)
from tally.domain.value.common import ValueObject

from .base import Service

DEFAULT_SESSION_KEY = "comments_vote"


class SessionStore(ABC):
    """Session-scoped key/value storage for an anonymous voter."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Read a value from the session.

        Args:
            key: Session key

        Returns:
            The stored value, None if unset
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value in the session.

        Args:
            key: Session key
            value: Value to store
        """
        pass


class VoterContext(ValueObject):
    """Who is making the current request.

    Passed explicitly into every identity-resolving call instead of the
    service reaching for ambient request state.
    """

    account_id: AccountId | None = None
    session: SessionStore | None = None
    address: str | None = None


class VoteService(Service):
    """Domain service for comment votes.

    Resolves voter identity, keeps one vote per voter per comment, and
    announces saves and deletes to the injected event publisher.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        session_key: str = DEFAULT_SESSION_KEY,
        event_publisher: VoteEventPublisher | None = None,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            session_key: Session key holding the anonymous voter token
            event_publisher: Receives vote lifecycle events, if any
        """
        self.vote_repository = vote_repository
        self.session_key = session_key
        self.event_publisher = event_publisher

    def resolve_voter_identity(self, context: VoterContext) -> VoterIdentity:
        """Work out who is voting.

        An authenticated account always wins. Anonymous voters are
        identified by a session token, generated and stored in their
        session the first time it is needed.

        Args:
            context: The requesting voter

        Returns:
            Account or session identity

        Raises:
            VoterIdentityError: If the context has neither account nor session
        """
        if context.account_id is not None:
            return AccountVoter(account_id=context.account_id)
        return SessionVoter(session_token=self._get_session_token(context))

    def generate_session_token(self) -> SessionToken:
        """Generate a fresh anonymous voter token."""
        return SessionToken(secrets.token_urlsafe(32))

    async def get_vote(
        self, comment_id: CommentId, context: VoterContext
    ) -> Optional[Vote]:
        """Get the requesting voter's vote on a comment.

        Args:
            comment_id: Comment ID
            context: The requesting voter

        Returns:
            The vote if the voter has voted, None otherwise
        """
        voter = self.resolve_voter_identity(context)
        return await self.vote_repository.find_by_voter(comment_id, voter)

    async def get_vote_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Get a vote by ID."""
        return await self.vote_repository.find_by_id(vote_id)

    async def get_vote_by_comment_id(self, comment_id: CommentId) -> Optional[Vote]:
        """Get any one vote cast on a comment."""
        return await self.vote_repository.find_by_comment_id(comment_id)

    async def count_votes(self, comment_id: CommentId) -> int:
        return await self.vote_repository.count_by_comment_id(comment_id)

    async def count_upvotes(self, comment_id: CommentId) -> int:
        return await self.vote_repository.count_by_comment_id_and_direction(
            comment_id, VoteDirection.UP
        )

    async def count_downvotes(self, comment_id: CommentId) -> int:
        return await self.vote_repository.count_by_comment_id_and_direction(
            comment_id, VoteDirection.DOWN
        )

    async def has_voted(
        self,
        comment_id: CommentId,
        context: VoterContext,
        direction: VoteDirection,
    ) -> bool:
        """Check whether the requesting voter voted in a given direction.

        A voter who downvoted has not upvoted, and vice versa.

        Args:
            comment_id: Comment ID
            context: The requesting voter
            direction: Direction to check

        Returns:
            True if the voter's vote has exactly that direction
        """
        voter = self.resolve_voter_identity(context)
        return await self.vote_repository.exists_by_voter_and_direction(
            comment_id, voter, direction
        )

    async def has_upvoted(self, comment_id: CommentId, context: VoterContext) -> bool:
        return await self.has_voted(comment_id, context, VoteDirection.UP)

    async def has_downvoted(
        self, comment_id: CommentId, context: VoterContext
    ) -> bool:
        return await self.has_voted(comment_id, context, VoteDirection.DOWN)

    async def is_over_downvote_threshold(
        self, comment_id: CommentId, threshold: int
    ) -> bool:
        """Check whether a comment has collected enough downvotes to be hidden.

        Args:
            comment_id: Comment ID
            threshold: Downvote limit configured for the comment

        Returns:
            True if the downvote count is at or above the threshold
        """
        downvotes = await self.count_downvotes(comment_id)
        return downvotes >= threshold

    async def save_vote(
        self,
        vote: Vote,
        context: VoterContext,
        run_validation: bool = True,
    ) -> SaveVoteResult:
        """Save a vote for the requesting voter.

        Anonymous votes are always stamped with the current session token,
        even if the caller supplied a stale one. A new vote from a voter who
        already voted on the comment updates their existing vote instead of
        adding a second one.

        On success the vote's ID and timestamps are assigned back onto the
        given vote object.

        Args:
            vote: The vote to save
            context: The requesting voter
            run_validation: Whether to validate before saving

        Returns:
            Result carrying the saved vote or the validation failure

        Raises:
            IntegrityError: If a concurrent save already stored this voter's vote
            NotFoundError: If the vote has an ID that no longer exists
        """
        is_new = vote.id is None

        with logfire.span(
            "vote_service.save_vote",
            comment_id=vote.comment_id,
            vote_id=vote.id,
            is_new=is_new,
        ):
            await self._publish(VoteEventKind.BEFORE_SAVE_VOTE, vote, is_new)

            if run_validation:
                failure = self._validate(vote, context)
                if failure:
                    logfire.info(
                        "Vote not saved due to validation error",
                        errors=failure.errors,
                    )
                    return SaveVoteResult(failure=failure)

            if vote.voter is None:
                vote.voter = self.resolve_voter_identity(context)
            elif isinstance(vote.voter, SessionVoter):
                vote.voter = SessionVoter(
                    session_token=self._get_session_token(context)
                )

            if context.address is not None:
                vote.last_known_address = context.address

            if is_new:
                # Resubmission from the same voter updates their vote in place
                existing = await self.vote_repository.find_by_voter(
                    vote.comment_id, vote.voter
                )
                if existing:
                    logfire.debug(
                        "Voter already voted, updating existing vote",
                        vote_id=existing.id,
                        comment_id=vote.comment_id,
                    )
                    vote.id = existing.id

            try:
                saved = await self.vote_repository.upsert(vote)
            except IntegrityError:
                logfire.warn(
                    "Duplicate vote attempt",
                    comment_id=vote.comment_id,
                    voter_kind=vote.voter.kind,
                )
                raise

            vote.id = saved.id
            vote.last_known_address = saved.last_known_address
            vote.created_at = saved.created_at
            vote.updated_at = saved.updated_at

            await self._publish(VoteEventKind.AFTER_SAVE_VOTE, vote, is_new)

            logfire.info(
                "Vote saved",
                vote_id=vote.id,
                comment_id=vote.comment_id,
                direction=vote.direction,
                voter_kind=vote.voter.kind,
            )
            return SaveVoteResult(vote=vote)

    async def delete_vote_by_id(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID.

        Args:
            vote_id: Vote ID

        Returns:
            True if the vote was deleted, False if it did not exist
        """
        vote = await self.vote_repository.find_by_id(vote_id)
        if not vote:
            logfire.info("No vote to delete", vote_id=vote_id)
            return False

        return await self.delete_vote(vote)

    async def delete_vote(self, vote: Vote) -> bool:
        """Delete a vote, announcing it before and after.

        Args:
            vote: The vote to delete

        Returns:
            Always True
        """
        with logfire.span("vote_service.delete_vote", vote_id=vote.id):
            await self._publish(VoteEventKind.BEFORE_DELETE_VOTE, vote)

            if vote.id is not None:
                await self.vote_repository.delete_by_id(vote.id)

            await self._publish(VoteEventKind.AFTER_DELETE_VOTE, vote)

            logfire.info(
                "Vote deleted", vote_id=vote.id, comment_id=vote.comment_id
            )
            return True

    def _get_session_token(self, context: VoterContext) -> SessionToken:
        if context.session is None:
            raise VoterIdentityError()

        token = context.session.get(self.session_key)
        if token:
            try:
                return SessionToken(token)
            except ValidationError:
                # The cookie is client-controlled, replace rather than fail
                logfire.warn(
                    "Unusable session token replaced", token_length=len(token)
                )

        new_token = self.generate_session_token()
        context.session.set(self.session_key, new_token.root)
        logfire.debug("Anonymous voter session token generated")
        return new_token

    def _validate(
        self, vote: Vote, context: VoterContext
    ) -> ValidationFailure | None:
        errors: dict[str, list[str]] = {}

        if vote.comment_id is None:
            errors.setdefault("comment_id", []).append("Comment ID cannot be blank.")
        elif vote.comment_id <= 0:
            errors.setdefault("comment_id", []).append(
                "Comment ID must be a positive integer."
            )

        if vote.direction is None:
            errors.setdefault("direction", []).append(
                "Vote must be either an upvote or a downvote."
            )

        # An account voter carries its own identity, anything else needs
        # the context to resolve one
        if not isinstance(vote.voter, AccountVoter):
            has_session = context.session is not None
            if isinstance(vote.voter, SessionVoter) and not has_session:
                errors.setdefault("voter", []).append(
                    "Anonymous vote requires a session."
                )
            elif vote.voter is None and context.account_id is None and not has_session:
                errors.setdefault("voter", []).append("Voter cannot be resolved.")

        return ValidationFailure(errors=errors) if errors else None

    async def _publish(
        self, kind: VoteEventKind, vote: Vote, is_new: bool | None = None
    ) -> None:
        if self.event_publisher is None:
            return
        await self.event_publisher.publish(
            VoteEvent(kind=kind, vote=vote, is_new=is_new)
        )

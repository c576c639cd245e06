"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Request, Response, status
from pydantic import BaseModel

from tally.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteSummaryRequest,
    GetVoteSummaryUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
    VoteSummaryResponse,
)
from tally.config import VotingSettings
from tally.domain.service import JWTService, VoterContext
from tally.interface.api.session import CookieSession

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteBody(BaseModel):
    """Vote form body: set exactly one of the flags."""

    upvote: bool = False
    downvote: bool = False


def _voter_context(
    request: Request,
    response: Response,
    jwt_service: JWTService,
    voting_settings: VotingSettings,
    auth_token: str | None,
) -> VoterContext:
    """Build the voter context for a request.

    Signed-in voters are identified by their account, everyone else by the
    anonymous voter cookie, which is issued on first use.
    """
    return VoterContext(
        account_id=jwt_service.get_account_id_from_token(auth_token),
        session=CookieSession(
            request, response, max_age=voting_settings.session_cookie_max_age
        ),
        address=request.client.host if request.client else None,
    )


@router.post("/comments/{comment_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    comment_id: int,
    body: CastVoteBody,
    request: Request,
    response: Response,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    voting_settings: FromDishka[VotingSettings],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Upvote or downvote a comment.

    Voting again changes the existing vote. Anonymous voting is allowed.

    Args:
        comment_id: Comment ID
        body: Upvote/downvote flags
        request: Incoming request (cookies, client address)
        response: Outgoing response (anonymous voter cookie)
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        voting_settings: Voting configuration (injected)
        auth_token: JWT token from cookie

    Returns:
        Vote details and updated tallies, with status 422 if the vote is invalid
    """
    context = _voter_context(
        request, response, jwt_service, voting_settings, auth_token
    )
    result = await cast_vote_use_case.execute(
        CastVoteRequest(
            comment_id=comment_id, upvote=body.upvote, downvote=body.downvote
        ),
        context,
    )
    if not result.success:
        # Keep the response object so a freshly issued voter cookie survives
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    return result


@router.delete("/comments/{comment_id}/vote", response_model=RemoveVoteResponse)
async def remove_vote(
    comment_id: int,
    request: Request,
    response: Response,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    voting_settings: FromDishka[VotingSettings],
    auth_token: str | None = Cookie(default=None),
) -> RemoveVoteResponse:
    """Withdraw the caller's vote on a comment."""
    context = _voter_context(
        request, response, jwt_service, voting_settings, auth_token
    )
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(comment_id=comment_id), context
    )


@router.get("/comments/{comment_id}/votes", response_model=VoteSummaryResponse)
async def get_vote_summary(
    comment_id: int,
    request: Request,
    response: Response,
    get_vote_summary_use_case: FromDishka[GetVoteSummaryUseCase],
    jwt_service: FromDishka[JWTService],
    voting_settings: FromDishka[VotingSettings],
    threshold: int | None = Query(default=None, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> VoteSummaryResponse:
    """Get a comment's vote tallies.

    Args:
        comment_id: Comment ID
        threshold: Downvote limit for the comment, defaults to the configured one

    Returns:
        Counts, the caller's own vote, and whether the comment is over the limit
    """
    context = _voter_context(
        request, response, jwt_service, voting_settings, auth_token
    )
    return await get_vote_summary_use_case.execute(
        GetVoteSummaryRequest(comment_id=comment_id, threshold=threshold), context
    )

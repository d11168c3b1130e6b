# src/flagpost/api/v1/endpoints/votes.py
"""Vote-related endpoints for the flagpost API."""

from fastapi import APIRouter, status

from flagpost.api.v1.dependencies import CurrentUserDep, SessionDep
from flagpost.schemas.vote import MyVoteResponse, VoteCreate, VoteTallyResponse
from flagpost.services.votes import cast_vote, get_my_vote

router = APIRouter(prefix="/votes", tags=["votes"])


@router.post("/", response_model=VoteTallyResponse, status_code=status.HTTP_201_CREATED)
async def cast(
    vote_data: VoteCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> VoteTallyResponse:
    """Cast, change or retract (``none``) the caller's flag on a post."""
    post = cast_vote(db, vote_data.post_id, current_user.id, vote_data.vote)
    return VoteTallyResponse(
        post_id=post.id,
        green_flags=post.green_flags,
        red_flags=post.red_flags,
        my_vote=vote_data.vote,
    )


@router.get("/{post_id}/my-vote", response_model=MyVoteResponse)
async def my_vote(
    post_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MyVoteResponse:
    """Get current user's flag on a specific post."""
    return MyVoteResponse(vote=get_my_vote(db, post_id, current_user.id))

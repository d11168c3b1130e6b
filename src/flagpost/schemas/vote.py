# src/flagpost/schemas/vote.py
"""Vote-related Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class VoteCreate(BaseModel):
    """Schema for casting, changing or retracting a flag."""

    post_id: int
    vote: Literal["green", "red", "none"] = Field(
        ...,
        description="green or red to flag the post, none to retract",
    )


class VoteTallyResponse(BaseModel):
    """Post counters after a vote has been applied."""

    post_id: int
    green_flags: int
    red_flags: int
    my_vote: Literal["green", "red", "none"]


class MyVoteResponse(BaseModel):
    """The caller's current flag on a post."""

    vote: Literal["green", "red", "none"]

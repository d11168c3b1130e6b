"""Green/red flag tally maintenance."""

from __future__ import annotations

import logging
from typing import Literal

from sqlalchemy.orm import Session

from flagpost.core.errors import NotFound
from flagpost.models import Post, PostVote, VoteType

logger = logging.getLogger(__name__)

VoteValue = Literal["green", "red", "none"]

__all__ = ["VoteValue", "cast_vote", "get_my_vote"]


def _adjust(post: Post, vote_type: VoteType, delta: int) -> None:
    if vote_type == VoteType.GREEN:
        post.green_flags += delta
    else:
        post.red_flags += delta


def _get_post_for_update(db: Session, post_id: int) -> Post:
    # Row lock serialises concurrent casts on the same post where the backend supports it.
    post = db.query(Post).filter(Post.id == post_id).with_for_update().first()
    if post is None:
        raise NotFound(f"Post {post_id} not found")
    return post


def cast_vote(db: Session, post_id: int, voter_id: int, value: VoteValue) -> Post:
    """Cast, change or retract ``voter_id``'s flag on a post.

    Any existing entry is removed and its counter decremented, then a new
    entry is appended and counted unless ``value`` is ``"none"``. Rows and
    counters are committed together, so ``green_flags``/``red_flags`` always
    equal the counts of matching ``voters`` entries.

    Raises:
        NotFound: If the post does not exist.
        ValueError: If ``value`` is not green, red or none.
    """
    if value not in ("green", "red", "none"):
        raise ValueError(f"Unknown vote value: {value!r}")

    post = _get_post_for_update(db, post_id)

    existing = db.get(PostVote, (post_id, voter_id))
    if existing is not None:
        _adjust(post, existing.vote_type, -1)
        db.delete(existing)
        # Flush the delete so a same-key insert below does not collide.
        db.flush()

    if value != "none":
        vote_type = VoteType(value)
        db.add(PostVote(post_id=post_id, voter_id=voter_id, vote_type=vote_type))
        _adjust(post, vote_type, 1)

    db.commit()
    db.refresh(post)
    logger.debug(
        "Vote %s by %s on post %s -> green=%d red=%d",
        value, voter_id, post_id, post.green_flags, post.red_flags,
    )
    return post


def get_my_vote(db: Session, post_id: int, voter_id: int) -> VoteValue:
    """Return the voter's current flag on a post, or ``"none"``."""
    vote = db.get(PostVote, (post_id, voter_id))
    if vote is None:
        return "none"
    return vote.vote_type.value  # type: ignore[return-value]

# src/flagpost/models/vote.py
"""Models capturing green/red flag votes on posts."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flagpost.db.session import Base

if TYPE_CHECKING:
    from .post import Post


class VoteType(str, enum.Enum):
    """A voter's endorsement of a post."""

    GREEN = "green"
    RED = "red"


class PostVote(Base):
    """Per-user flag on a post."""

    __tablename__ = "post_votes"
    __table_args__ = (
        Index("ix_post_votes_post_id", "post_id"),
    )

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # Composite primary key prevents duplicate votes from the same user.
    # No foreign key: removing an account must not drop rows behind the counters.
    voter_id: Mapped[int] = mapped_column(Integer, primary_key=True)

    vote_type: Mapped[VoteType] = mapped_column(
        Enum(
            VoteType,
            name="vote_type",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
    )

    post: Mapped[Post] = relationship("Post", back_populates="voters")

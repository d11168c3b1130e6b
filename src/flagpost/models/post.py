# src/flagpost/models/post.py
"""SQLAlchemy models for posts and their flag tallies."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, SmallInteger, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flagpost.db.session import Base
from flagpost.db.time import utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User
    from .vote import PostVote


class Post(Base):
    """A story shared by an approved member.

    ``green_flags`` and ``red_flags`` are denormalised counts of ``voters``
    and must change in the same transaction as the vote rows.
    """

    __tablename__ = "posts"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    age: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    city: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_ref: Mapped[str | None] = mapped_column(Text, nullable=True)

    green_flags: Mapped[int] = mapped_column(default=0, nullable=False)
    red_flags: Mapped[int] = mapped_column(default=0, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        index=True,
        nullable=False,
        default=utcnow,
    )

    author: Mapped[User] = relationship("User", back_populates="posts")
    voters: Mapped[list[PostVote]] = relationship(
        "PostVote",
        back_populates="post",
        cascade="all, delete-orphan",
    )
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
    )

# src/flagpost/models/user.py
"""SQLAlchemy model for verified member accounts."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flagpost.db.session import Base
from flagpost.db.time import utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post


class VerificationStatus(str, enum.Enum):
    """Lifecycle stage of identity-document review."""

    NONE = "none"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class User(Base):
    """Account created from the identity provider's user-created event.

    ``is_approved`` mirrors ``verification_status == approved``; only the
    verification services write either column.
    """

    __tablename__ = "users"
    # Ids are never reused, so vote rows and audit targets cannot attach to a new account.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    external_id: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    pseudonym: Mapped[str] = mapped_column(String(64), nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Opaque storage references, never raw bytes.
    selfie_ref: Mapped[str | None] = mapped_column(Text, nullable=True)
    id_document_ref: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_approved: Mapped[bool] = mapped_column(Boolean, index=True, nullable=False, default=False)
    verification_status: Mapped[VerificationStatus] = mapped_column(
        Enum(
            VerificationStatus,
            name="verification_status",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=VerificationStatus.NONE,
    )
    has_completed_onboarding: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    posts: Mapped[list[Post]] = relationship(
        "Post",
        back_populates="author",
        cascade="all, delete-orphan",
    )
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="author",
        cascade="all, delete-orphan",
    )

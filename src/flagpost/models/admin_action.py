# src/flagpost/models/admin_action.py
"""Append-only audit log of privileged mutations."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from flagpost.db.session import Base
from flagpost.db.time import utcnow


class AdminActionType(str, enum.Enum):
    """Kinds of privileged mutation recorded in the audit log."""

    APPROVE_USER = "approve_user"
    DENY_USER = "deny_user"
    DELETE_POST = "delete_post"


class AdminAction(Base):
    """Audit record showing that an admin changed another entity.

    Targets are plain integers so entries outlive the rows they point at.
    """

    __tablename__ = "admin_actions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    admin_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    action_type: Mapped[str] = mapped_column(String(32), nullable=False)
    target_user_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    target_post_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    target_comment_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

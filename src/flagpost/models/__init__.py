# src/flagpost/models/__init__.py
"""SQLAlchemy models for the flagpost application."""

from .admin_action import AdminAction, AdminActionType
from .comment import Comment
from .post import Post
from .user import User, VerificationStatus
from .vote import PostVote, VoteType

__all__ = [
    "AdminAction", "AdminActionType",
    "Comment",
    "Post",
    "User", "VerificationStatus",
    "PostVote", "VoteType",
]

# src/flagpost/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .admin import (
    AdminActionResponse,
    AdminActionView,
    AdminPostView,
    AdminRequest,
    AdminUserView,
)
from .post import CommentCreate, CommentResponse, FeedItem, PostCreate, PostResponse
from .storage import UploadTargetResponse
from .user import DocumentSubmission, LoginProfile, UserStatusResponse
from .vote import MyVoteResponse, VoteCreate, VoteTallyResponse

__all__ = [
    "AdminActionResponse", "AdminActionView", "AdminPostView", "AdminRequest", "AdminUserView",
    "CommentCreate", "CommentResponse", "FeedItem", "PostCreate", "PostResponse",
    "UploadTargetResponse",
    "DocumentSubmission", "LoginProfile", "UserStatusResponse",
    "MyVoteResponse", "VoteCreate", "VoteTallyResponse",
]

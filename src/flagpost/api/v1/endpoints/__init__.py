# src/flagpost/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .admin import router as admin_router
from .files import router as files_router
from .posts import router as posts_router
from .users import router as users_router
from .votes import router as votes_router
from .webhooks import router as webhooks_router

__all__ = [
    "admin_router",
    "files_router",
    "posts_router",
    "users_router",
    "votes_router",
    "webhooks_router",
]

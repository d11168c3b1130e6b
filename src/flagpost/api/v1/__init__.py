# src/flagpost/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    admin_router,
    files_router,
    posts_router,
    users_router,
    votes_router,
    webhooks_router,
)

__all__ = [
    "admin_router",
    "files_router",
    "posts_router",
    "users_router",
    "votes_router",
    "webhooks_router",
]

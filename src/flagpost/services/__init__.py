# src/flagpost/services/__init__.py
"""Business logic services for the flagpost application."""

from .admin import AdminService
from .authz import AdminPolicy, is_admin
from .storage import StorageClient

__all__ = [
    "AdminPolicy",
    "AdminService",
    "StorageClient",
    "is_admin",
]

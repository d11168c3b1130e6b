"""Admin authorization gate."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from flagpost.core.errors import Unauthorized
from flagpost.core.settings import settings

logger = logging.getLogger(__name__)


def is_admin(identity: str | None, allow_list: Iterable[str]) -> bool:
    """Return True if ``identity`` is a non-empty member of ``allow_list``."""
    return bool(identity) and identity in frozenset(allow_list)


class AdminPolicy:
    """Static set of trusted principals checked before every privileged operation."""

    def __init__(self, admin_ids: Iterable[str]) -> None:
        self.admin_ids = frozenset(admin_ids)

    def is_admin(self, identity: str | None) -> bool:
        return is_admin(identity, self.admin_ids)

    def require_admin(self, identity: str | None) -> str:
        """Return ``identity`` or raise :class:`Unauthorized` before any side effect."""
        if not self.is_admin(identity):
            logger.warning("Rejected privileged call from non-admin identity %r", identity)
            raise Unauthorized("Admin access required")
        return identity  # type: ignore[return-value]


def get_admin_policy() -> AdminPolicy:
    """Build the policy from configuration; overridable as a FastAPI dependency."""
    return AdminPolicy(settings.admin_ids)

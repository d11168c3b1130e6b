"""Privileged review actions for the admin dashboard.

Every public function takes the acting admin's identity explicitly and
passes it through :class:`AdminPolicy` before reading or writing anything.
Each mutation appends one :class:`AdminAction` in the same transaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import desc
from sqlalchemy.orm import Session

from flagpost.core.errors import NotFound
from flagpost.core.settings import DenyPolicy, settings
from flagpost.models import AdminAction, AdminActionType, Post, User
from flagpost.models.user import VerificationStatus
from flagpost.services.authz import AdminPolicy
from flagpost.services.storage import StorageClient
from flagpost.services.verification import set_verification_status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewedUser:
    """A user row with document references resolved to retrieval URLs."""

    user: User
    selfie_url: str | None
    id_document_url: str | None


class AdminService:
    """Service handling verification review and post removal."""

    def __init__(self, policy: AdminPolicy, deny_policy: DenyPolicy | None = None) -> None:
        self.policy = policy
        self.deny_policy: DenyPolicy = deny_policy or settings.deny_policy

    @staticmethod
    def _get_user_or_raise(db: Session, user_id: int) -> User:
        user = db.get(User, user_id)
        if user is None:
            raise NotFound(f"User {user_id} not found")
        return user

    @staticmethod
    def _record(db: Session, admin_id: str, action_type: AdminActionType, **targets: int) -> AdminAction:
        action = AdminAction(admin_id=admin_id, action_type=action_type.value, **targets)
        db.add(action)
        return action

    def approve_user(self, db: Session, admin_id: str, target_user_id: int) -> AdminAction:
        """Approve a user's verification.

        Raises:
            Unauthorized: If ``admin_id`` is not on the allow-list.
            NotFound: If the target user does not exist.
        """
        self.policy.require_admin(admin_id)
        user = self._get_user_or_raise(db, target_user_id)

        set_verification_status(user, VerificationStatus.APPROVED)
        action = self._record(
            db, admin_id, AdminActionType.APPROVE_USER, target_user_id=target_user_id
        )
        db.commit()
        logger.info("Admin %s approved user %s", admin_id, target_user_id)
        return action

    def deny_user(self, db: Session, admin_id: str, target_user_id: int) -> AdminAction:
        """Reject a user's verification according to the configured deny policy.

        ``soft`` keeps the record as ``rejected`` and clears both document
        references; ``delete`` removes the record entirely.

        Raises:
            Unauthorized: If ``admin_id`` is not on the allow-list.
            NotFound: If the target user does not exist (including a second
                deny under the ``delete`` policy).
        """
        self.policy.require_admin(admin_id)
        user = self._get_user_or_raise(db, target_user_id)

        if self.deny_policy == "delete":
            db.delete(user)
        else:
            set_verification_status(user, VerificationStatus.REJECTED)
            user.selfie_ref = None
            user.id_document_ref = None

        action = self._record(
            db, admin_id, AdminActionType.DENY_USER, target_user_id=target_user_id
        )
        db.commit()
        logger.info(
            "Admin %s denied user %s (policy=%s)", admin_id, target_user_id, self.deny_policy
        )
        return action

    def delete_post(self, db: Session, admin_id: str, post_id: int) -> AdminAction:
        """Remove a post with its votes and comments."""
        self.policy.require_admin(admin_id)
        post = db.get(Post, post_id)
        if post is None:
            raise NotFound(f"Post {post_id} not found")

        db.delete(post)
        action = self._record(db, admin_id, AdminActionType.DELETE_POST, target_post_id=post_id)
        db.commit()
        logger.info("Admin %s deleted post %s", admin_id, post_id)
        return action

    async def list_users(
        self,
        db: Session,
        storage: StorageClient,
        admin_id: str,
        *,
        status: VerificationStatus | None = None,
    ) -> list[ReviewedUser]:
        """Return users newest first with document URLs resolved for review."""
        self.policy.require_admin(admin_id)
        query = db.query(User)
        if status is not None:
            query = query.filter(User.verification_status == status)
        users = query.order_by(desc(User.created_at), desc(User.id)).all()

        reviewed: list[ReviewedUser] = []
        for user in users:
            selfie_url = await storage.get_url(user.selfie_ref) if user.selfie_ref else None
            id_url = await storage.get_url(user.id_document_ref) if user.id_document_ref else None
            reviewed.append(ReviewedUser(user=user, selfie_url=selfie_url, id_document_url=id_url))
        return reviewed

    def list_approved_users(self, db: Session, admin_id: str) -> list[User]:
        """Return users whose approval flag is set."""
        self.policy.require_admin(admin_id)
        return db.query(User).filter(User.is_approved.is_(True)).order_by(User.id).all()

    def list_posts(self, db: Session, admin_id: str) -> list[Post]:
        """Return every post, newest first."""
        self.policy.require_admin(admin_id)
        return db.query(Post).order_by(desc(Post.created_at), desc(Post.id)).all()

    def list_actions(self, db: Session, admin_id: str) -> list[AdminAction]:
        """Return the audit log in insertion order."""
        self.policy.require_admin(admin_id)
        return db.query(AdminAction).order_by(AdminAction.id).all()

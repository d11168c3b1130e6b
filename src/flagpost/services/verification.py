"""Member onboarding and identity-verification lifecycle.

States move ``none -> pending -> approved | rejected``. Only the admin
service moves a user out of ``pending``; this module covers sign-in,
document submission and the read side used by waiting screens.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from flagpost.core.errors import PreconditionFailed
from flagpost.models.user import User, VerificationStatus
from flagpost.services.pseudonym import generate_pseudonym
from flagpost.services.storage import StorageClient

logger = logging.getLogger(__name__)

__all__ = [
    "read_status",
    "upsert_on_login",
    "submit_verification_documents",
    "finish_onboarding",
    "delete_user_by_external_id",
]


def read_status(db: Session, external_id: str) -> User | None:
    """Return the record for ``external_id`` or None; never raises for a missing user."""
    return db.query(User).filter(User.external_id == external_id).first()


def _require_user(db: Session, external_id: str) -> User:
    user = read_status(db, external_id)
    if user is None:
        raise PreconditionFailed(
            f"No account record for {external_id}; sign-up has not been processed yet",
        )
    return user


def set_verification_status(user: User, status: VerificationStatus) -> None:
    """Move ``user`` to ``status`` keeping ``is_approved`` in lockstep.

    Performs no authorization. Only :class:`flagpost.services.admin.AdminService`
    passes ``approved`` or ``rejected``, after its allow-list check.
    """
    user.verification_status = status
    user.is_approved = status == VerificationStatus.APPROVED


def _create_user(db: Session, external_id: str, *, name: str = "", email: str = "") -> User:
    """Insert a fresh record in state ``none`` with a deterministic pseudonym."""
    user = User(
        external_id=external_id,
        name=name,
        email=email,
        pseudonym=generate_pseudonym(external_id),
        has_completed_onboarding=False,
    )
    set_verification_status(user, VerificationStatus.NONE)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created user record %s for %s", user.id, external_id)
    return user


def upsert_on_login(
    db: Session,
    external_id: str,
    *,
    name: str | None = None,
    email: str | None = None,
) -> User:
    """Create the record if absent, else refresh whichever of name and email were given.

    ``None`` leaves the stored value alone. Verification fields are never
    touched, so repeated sign-ins cannot regress a user's status.
    """
    user = read_status(db, external_id)
    if user is None:
        return _create_user(db, external_id, name=name or "", email=email or "")

    changed = False
    if name is not None and user.name != name:
        user.name = name
        changed = True
    if email is not None and user.email != email:
        user.email = email
        changed = True
    if changed:
        db.commit()
        db.refresh(user)
    return user


async def submit_verification_documents(
    db: Session,
    storage: StorageClient,
    external_id: str,
    *,
    selfie_ref: str | None = None,
    id_document_ref: str | None = None,
) -> User:
    """Record the provided document references and mark the user ``pending``.

    Either reference may be omitted. Every provided reference is confirmed in
    storage before anything is written.

    Raises:
        ValueError: If neither reference is given.
        PreconditionFailed: If the account record does not exist yet.
        UpstreamIntegrationFailure: If a referenced file is missing in storage.
    """
    if not selfie_ref and not id_document_ref:
        raise ValueError("At least one verification document is required")

    user = _require_user(db, external_id)

    for ref in (selfie_ref, id_document_ref):
        if ref:
            await storage.ensure_exists(ref)

    if selfie_ref:
        user.selfie_ref = selfie_ref
    if id_document_ref:
        user.id_document_ref = id_document_ref
    set_verification_status(user, VerificationStatus.PENDING)
    db.commit()
    db.refresh(user)
    logger.info("User %s submitted verification documents", user.id)
    return user


def finish_onboarding(db: Session, external_id: str) -> User:
    """Mark onboarding complete once both documents are on file."""
    user = _require_user(db, external_id)
    if not (user.selfie_ref and user.id_document_ref):
        raise PreconditionFailed("Both a selfie and an ID document must be uploaded first")

    user.has_completed_onboarding = True
    if user.verification_status != VerificationStatus.APPROVED:
        set_verification_status(user, VerificationStatus.PENDING)
    db.commit()
    db.refresh(user)
    return user


def delete_user_by_external_id(db: Session, external_id: str) -> bool:
    """Remove the record if present; returns False when there was nothing to delete."""
    user = read_status(db, external_id)
    if user is None:
        return False
    db.delete(user)
    db.commit()
    logger.info("Deleted user record for %s", external_id)
    return True

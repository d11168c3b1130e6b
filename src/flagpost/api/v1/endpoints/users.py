"""Onboarding and verification endpoints for the signed-in member."""

from __future__ import annotations

from fastapi import APIRouter

from flagpost.api.v1.dependencies import IdentityDep, SessionDep, StorageDep
from flagpost.models import User
from flagpost.schemas.user import DocumentSubmission, LoginProfile, UserStatusResponse
from flagpost.services import verification

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/login", response_model=UserStatusResponse)
async def login(profile: LoginProfile, identity: IdentityDep, db: SessionDep) -> User:
    """Create or refresh the caller's record without touching verification state."""
    return verification.upsert_on_login(db, identity, name=profile.name, email=profile.email)


@router.get("/me", response_model=UserStatusResponse | None)
async def get_my_status(identity: IdentityDep, db: SessionDep) -> User | None:
    """Return the caller's record, or null if it does not exist (yet or any more)."""
    return verification.read_status(db, identity)


@router.get("/{external_id}/status", response_model=UserStatusResponse | None)
async def get_status(external_id: str, identity: IdentityDep, db: SessionDep) -> User | None:
    """Look up a record by external id; null when absent."""
    return verification.read_status(db, external_id)


@router.post("/me/documents", response_model=UserStatusResponse)
async def submit_documents(
    submission: DocumentSubmission,
    identity: IdentityDep,
    db: SessionDep,
    storage: StorageDep,
) -> User:
    """Attach uploaded selfie and/or ID document and move the caller to pending."""
    return await verification.submit_verification_documents(
        db,
        storage,
        identity,
        selfie_ref=submission.selfie_ref,
        id_document_ref=submission.id_document_ref,
    )


@router.post("/me/onboarding/complete", response_model=UserStatusResponse)
async def complete_onboarding(identity: IdentityDep, db: SessionDep) -> User:
    """Finish onboarding once both documents are on file."""
    return verification.finish_onboarding(db, identity)

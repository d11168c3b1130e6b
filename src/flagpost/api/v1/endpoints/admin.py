"""Admin dashboard endpoints.

The acting admin names itself in every request (``admin_id``); the service
layer checks it against the allow-list, so the check holds even for callers
that bypass the dashboard UI.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from flagpost.api.v1.dependencies import AdminServiceDep, SessionDep, StorageDep
from flagpost.models import AdminAction, Post, User
from flagpost.models.user import VerificationStatus
from flagpost.schemas.admin import (
    AdminActionResponse,
    AdminActionView,
    AdminPostView,
    AdminRequest,
    AdminUserView,
)
from flagpost.schemas.user import UserStatusResponse
from flagpost.services.admin import ReviewedUser

router = APIRouter(prefix="/admin", tags=["admin"])

AdminIdQuery = Query(..., min_length=1, description="Identity of the acting admin")


def _to_view(reviewed: ReviewedUser) -> AdminUserView:
    user = reviewed.user
    return AdminUserView(
        id=user.id,
        name=user.name,
        pseudonym=user.pseudonym,
        email=user.email,
        selfie_url=reviewed.selfie_url,
        id_document_url=reviewed.id_document_url,
        created_at=user.created_at,
        is_approved=user.is_approved,
        verification_status=user.verification_status,
    )


@router.get("/users", response_model=list[AdminUserView])
async def list_users(
    db: SessionDep,
    storage: StorageDep,
    service: AdminServiceDep,
    admin_id: str = AdminIdQuery,
    status_filter: VerificationStatus | None = Query(None, alias="status"),
) -> list[AdminUserView]:
    """List users with verification status, newest first."""
    reviewed = await service.list_users(db, storage, admin_id, status=status_filter)
    return [_to_view(item) for item in reviewed]


@router.get("/users/pending", response_model=list[AdminUserView])
async def list_pending_users(
    db: SessionDep,
    storage: StorageDep,
    service: AdminServiceDep,
    admin_id: str = AdminIdQuery,
) -> list[AdminUserView]:
    """List users awaiting review."""
    reviewed = await service.list_users(
        db, storage, admin_id, status=VerificationStatus.PENDING
    )
    return [_to_view(item) for item in reviewed]


@router.get("/users/approved", response_model=list[UserStatusResponse])
async def list_approved_users(
    db: SessionDep,
    service: AdminServiceDep,
    admin_id: str = AdminIdQuery,
) -> list[User]:
    """List approved users."""
    return service.list_approved_users(db, admin_id)


def _action_response(action: AdminAction, message: str) -> AdminActionResponse:
    return AdminActionResponse(success=True, message=message, action_id=action.id)


@router.post("/users/{user_id}/approve", response_model=AdminActionResponse)
async def approve_user(
    user_id: int,
    request: AdminRequest,
    db: SessionDep,
    service: AdminServiceDep,
) -> AdminActionResponse:
    """Approve a user's verification."""
    action = service.approve_user(db, request.admin_id, user_id)
    return _action_response(action, "User approved successfully.")


@router.post("/users/{user_id}/deny", response_model=AdminActionResponse)
async def deny_user(
    user_id: int,
    request: AdminRequest,
    db: SessionDep,
    service: AdminServiceDep,
) -> AdminActionResponse:
    """Reject a user's verification."""
    action = service.deny_user(db, request.admin_id, user_id)
    return _action_response(action, "User verification rejected.")


@router.get("/posts", response_model=list[AdminPostView])
async def list_posts(
    db: SessionDep,
    service: AdminServiceDep,
    admin_id: str = AdminIdQuery,
) -> list[Post]:
    """List every post, newest first."""
    return service.list_posts(db, admin_id)


@router.delete("/posts/{post_id}", response_model=AdminActionResponse)
async def delete_post(
    post_id: int,
    db: SessionDep,
    service: AdminServiceDep,
    admin_id: str = AdminIdQuery,
) -> AdminActionResponse:
    """Remove a post together with its votes and replies."""
    action = service.delete_post(db, admin_id, post_id)
    return _action_response(action, "Post deleted.")


@router.get("/actions", response_model=list[AdminActionView])
async def list_actions(
    db: SessionDep,
    service: AdminServiceDep,
    admin_id: str = AdminIdQuery,
) -> list[AdminAction]:
    """Return the audit log, oldest entry first."""
    return service.list_actions(db, admin_id)

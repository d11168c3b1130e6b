"""Admin dashboard Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from flagpost.models.user import VerificationStatus


class AdminRequest(BaseModel):
    """Body for privileged mutations; the caller names itself explicitly."""

    admin_id: str = Field(..., min_length=1, description="Identity of the acting admin")


class AdminUserView(BaseModel):
    """A user as listed on the verification dashboard."""

    id: int
    name: str
    pseudonym: str
    email: str
    selfie_url: str | None = None
    id_document_url: str | None = None
    created_at: datetime
    is_approved: bool
    verification_status: VerificationStatus


class AdminActionResponse(BaseModel):
    """Result of an approve, deny or delete action."""

    success: bool
    message: str
    action_id: int


class AdminPostView(BaseModel):
    """Post fields exposed to admins."""

    id: int
    author_id: int
    content: str
    age: int | None
    city: str | None
    media_ref: str | None
    green_flags: int
    red_flags: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AdminActionView(BaseModel):
    """One entry of the append-only audit log."""

    id: int
    admin_id: str
    action_type: str
    target_user_id: int | None
    target_post_id: int | None
    target_comment_id: int | None
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)

"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from flagpost.models.user import VerificationStatus


class LoginProfile(BaseModel):
    """Profile fields refreshed on sign-in; omitted fields keep their stored value."""

    name: str | None = Field(None, max_length=200, description="Real name from the identity provider")
    email: str | None = Field(None, max_length=320, description="Primary email address")


class DocumentSubmission(BaseModel):
    """Storage references for one or both verification documents."""

    selfie_ref: str | None = Field(None, description="Storage id of the uploaded selfie")
    id_document_ref: str | None = Field(None, description="Storage id of the uploaded ID document")

    @model_validator(mode="after")
    def _require_one_document(self) -> "DocumentSubmission":
        if not self.selfie_ref and not self.id_document_ref:
            raise ValueError("At least one of selfie_ref or id_document_ref is required")
        return self


class UserStatusResponse(BaseModel):
    """The caller's own record as seen by onboarding and waiting screens."""

    id: int
    external_id: str
    name: str
    pseudonym: str
    email: str
    selfie_ref: str | None
    id_document_ref: str | None
    is_approved: bool
    verification_status: VerificationStatus
    has_completed_onboarding: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

"""File storage Pydantic schemas."""

from pydantic import BaseModel, Field


class UploadTargetResponse(BaseModel):
    """One-time upload destination handed to the client."""

    upload_url: str = Field(..., description="URL the client POSTs raw bytes to")

"""Upload target endpoint for the two-step file upload protocol."""

from fastapi import APIRouter

from flagpost.api.v1.dependencies import IdentityDep, StorageDep
from flagpost.schemas.storage import UploadTargetResponse

router = APIRouter(prefix="/files", tags=["files"])


@router.post("/upload-url", response_model=UploadTargetResponse)
async def generate_upload_url(identity: IdentityDep, storage: StorageDep) -> UploadTargetResponse:
    """Issue a one-time URL the client uploads raw bytes to."""
    target = await storage.generate_upload_url()
    return UploadTargetResponse(upload_url=target.upload_url)

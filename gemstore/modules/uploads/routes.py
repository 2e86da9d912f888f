from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.uploads.schemas import UploadResponse, DeleteUploadResponse
from gemstore.modules.uploads.service import UploadService
from gemstore.modules.uploads.storage import get_media_storage
from gemstore.core.dependencies import require_admin
from gemstore.core.limiter import limiter
from gemstore.config import settings
from supabase import Client
from typing import Dict, Optional

router = APIRouter(tags=["uploads"])


def get_upload_service(supabase: Client = Depends(get_supabase)) -> UploadService:
    return UploadService(get_media_storage(supabase))


@router.post("/upload", response_model=UploadResponse)
@limiter.limit(settings.upload_rate_limit)
async def upload_file(
    request: Request,
    file: UploadFile = File(...),
    folder: Optional[str] = Form(None),
    admin: Dict = Depends(require_admin),
    service: UploadService = Depends(get_upload_service)
):
    """Upload a product/hero image or video (admin)"""
    content = await file.read()
    return service.upload(
        content=content,
        filename=file.filename or "",
        content_type=file.content_type or "",
        uploader_email=admin["email"],
        folder=folder,
    )


@router.delete("/upload", response_model=DeleteUploadResponse)
async def delete_upload(
    path: Optional[str] = None,
    admin: Dict = Depends(require_admin),
    service: UploadService = Depends(get_upload_service)
):
    """Remove an uploaded file from media storage (admin)"""
    return service.delete(path, admin["email"])

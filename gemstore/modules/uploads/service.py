from gemstore.modules.uploads.schemas import UploadResponse, DeleteUploadResponse
from gemstore.modules.uploads.storage import StorageSizeError, StorageUploadError, StorageDeleteError
from typing import Optional
from fastapi import HTTPException
import random
import re
import string
import time
import logging

logger = logging.getLogger(__name__)

IMAGE_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/webp", "image/gif")
VIDEO_TYPES = ("video/mp4",)
ALLOWED_EXTENSIONS = ("jpg", "jpeg", "png", "webp", "gif", "mp4")
MAX_IMAGE_SIZE = 5 * 1024 * 1024
MAX_VIDEO_SIZE = 100 * 1024 * 1024
MIN_FILE_SIZE = 100
DEFAULT_FOLDER = "hero"
FOLDER_PATTERN = re.compile(r"^[a-z0-9-]+$")
UPLOAD_PATH_PATTERN = re.compile(r"^[a-z0-9-]+/[A-Za-z0-9][A-Za-z0-9._+@-]*$")


def build_upload_path(folder: str, email: str, extension: str, now_ms: Optional[int] = None) -> str:
    """<folder>/<millis>-<10 random>-<email with @ as _at_>.<ext>"""
    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    token = "".join(random.choices(string.ascii_lowercase + string.digits, k=10))
    return f"{folder}/{now_ms}-{token}-{email.replace('@', '_at_')}.{extension}"


class UploadService:
    def __init__(self, storage):
        self.storage = storage

    def validate(self, filename: str, content_type: str, size: int) -> str:
        """Check type, extension and size; returns the lowercased extension"""
        content_type = (content_type or "").lower()
        if content_type not in IMAGE_TYPES + VIDEO_TYPES:
            raise HTTPException(
                status_code=400,
                detail="Only JPG, PNG, WebP, GIF images and MP4 videos are allowed"
            )
        is_video = content_type in VIDEO_TYPES
        if size > (MAX_VIDEO_SIZE if is_video else MAX_IMAGE_SIZE):
            raise HTTPException(
                status_code=400,
                detail=f"File size must be less than {'100MB' if is_video else '5MB'}"
            )
        extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        if extension not in ALLOWED_EXTENSIONS:
            raise HTTPException(status_code=400, detail="Invalid file extension")
        if size < MIN_FILE_SIZE:
            raise HTTPException(status_code=400, detail="File appears to be corrupt or too small")
        return extension

    def upload(
        self,
        content: bytes,
        filename: str,
        content_type: str,
        uploader_email: str,
        folder: Optional[str] = None,
    ) -> UploadResponse:
        started = time.time()
        folder = folder or DEFAULT_FOLDER
        if not FOLDER_PATTERN.match(folder):
            raise HTTPException(status_code=400, detail="Invalid folder")
        extension = self.validate(filename, content_type, len(content))
        is_video = content_type.lower() in VIDEO_TYPES
        path = build_upload_path(folder, uploader_email, extension)

        try:
            url = self.storage.upload_file(
                content, path, content_type.lower(), "86400" if is_video else "3600"
            )
        except StorageSizeError:
            raise HTTPException(status_code=413, detail="File too large for storage")
        except StorageUploadError:
            raise HTTPException(status_code=500, detail="Upload failed")

        upload_time = int((time.time() - started) * 1000)
        logger.info(f"Uploaded {path} ({len(content)} bytes) for {uploader_email} in {upload_time}ms")
        return UploadResponse(url=url, path=path, upload_time=upload_time)

    def delete(self, path: Optional[str], admin_email: str) -> DeleteUploadResponse:
        """Remove a previously uploaded file by its storage path"""
        if not path or not UPLOAD_PATH_PATTERN.match(path):
            raise HTTPException(status_code=400, detail="Invalid file path")
        try:
            self.storage.delete_file(path)
        except StorageDeleteError:
            raise HTTPException(status_code=500, detail="Failed to delete file")
        logger.info(f"Deleted upload {path} for {admin_email}")
        return DeleteUploadResponse(path=path)

import boto3
from botocore.exceptions import ClientError
from supabase import Client
from gemstore.config import settings
import logging

logger = logging.getLogger(__name__)

SIZE_ERROR_MARKERS = ("413", "maximum allowed size", "payload too large", "entitytoolarge")


class StorageUploadError(Exception):
    pass


class StorageSizeError(StorageUploadError):
    """The backend refused the object as too large"""


class StorageDeleteError(Exception):
    pass


def _raise_upload_error(exc: Exception):
    message = str(exc)
    if any(marker in message.lower() for marker in SIZE_ERROR_MARKERS):
        raise StorageSizeError(message) from exc
    raise StorageUploadError(message) from exc


class SupabaseMediaStorage:
    def __init__(self, supabase: Client, bucket: str = None):
        self.supabase = supabase
        self.bucket = bucket or settings.storage_bucket

    def upload_file(self, file_content: bytes, key: str, content_type: str, cache_control: str) -> str:
        """Upload to the storage bucket (never overwriting) and return the public URL"""
        bucket = self.supabase.storage.from_(self.bucket)
        try:
            bucket.upload(key, file_content, {
                "content-type": content_type,
                "cache-control": cache_control,
                "upsert": "false",
            })
        except Exception as e:
            logger.error(f"Failed to upload file to storage bucket {self.bucket}: {e}")
            _raise_upload_error(e)
        return bucket.get_public_url(key)

    def delete_file(self, key: str) -> None:
        try:
            self.supabase.storage.from_(self.bucket).remove([key])
        except Exception as e:
            logger.error(f"Failed to remove {key} from storage bucket {self.bucket}: {e}")
            raise StorageDeleteError(str(e)) from e


class S3MediaStorage:
    def __init__(self):
        if not settings.s3_configured:
            raise ValueError("AWS S3 credentials and bucket name must be configured")

        self.s3_client = boto3.client(
            's3',
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            region_name=settings.aws_region
        )
        self.bucket_name = settings.s3_bucket_name

    def upload_file(self, file_content: bytes, key: str, content_type: str, cache_control: str) -> str:
        """Upload file to S3 and return its public URL"""
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=file_content,
                ContentType=content_type,
                CacheControl=f"max-age={cache_control}"
            )
        except ClientError as e:
            logger.error(f"Failed to upload file to S3: {str(e)}")
            _raise_upload_error(e)
        return f"https://{self.bucket_name}.s3.{settings.aws_region}.amazonaws.com/{key}"

    def delete_file(self, key: str) -> None:
        try:
            self.s3_client.delete_object(Bucket=self.bucket_name, Key=key)
        except ClientError as e:
            logger.error(f"Failed to remove {key} from S3 bucket {self.bucket_name}: {e}")
            raise StorageDeleteError(str(e)) from e


def get_media_storage(supabase: Client):
    """S3 when fully configured, otherwise the Supabase Storage bucket"""
    if settings.s3_configured:
        return S3MediaStorage()
    return SupabaseMediaStorage(supabase)

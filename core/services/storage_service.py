# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Handles file upload and removal with Supabase Storage.
# Every bucket is public; rows store the public URL of each object.
# =============================================================================

import logging

from lib.supabase_client import SupabaseClient
from lib.utils import object_name_from_url
from app.config import settings
from app.exceptions import StorageUploadError, StorageDeleteError

logger = logging.getLogger(__name__)


class StorageService:
    """
    Service for Supabase Storage operations.

    Uploads return the object's public URL, which is what the tables store.
    """

    @staticmethod
    def upload(
        bucket: str,
        name: str,
        content: bytes,
        content_type: str = "image/jpeg",
        upsert: bool = False,
    ) -> str:
        """
        Upload bytes to a bucket and return the public URL.

        Args:
            bucket: Bucket name (e.g. "groom-images")
            name: Object name at the bucket root (e.g. "groom-1700000000000.jpg")
            content: File bytes
            content_type: MIME type stored with the object
            upsert: Overwrite an existing object with the same name

        Returns:
            Public URL of the uploaded object

        Raises:
            StorageUploadError: If upload fails
        """
        client = SupabaseClient.get_client()

        try:
            client.storage.from_(bucket).upload(
                path=name,
                file=content,
                file_options={
                    "content-type": content_type,
                    "cache-control": settings.STORAGE_CACHE_CONTROL,
                    "upsert": "true" if upsert else "false",
                }
            )
            public_url = client.storage.from_(bucket).get_public_url(name)

            logger.info(f"Uploaded file to storage: {bucket}/{name}")
            return public_url

        except Exception as e:
            logger.error(f"Storage upload failed for {bucket}/{name}: {e}")
            raise StorageUploadError(bucket, str(e))

    @staticmethod
    def remove(bucket: str, names: list[str]) -> None:
        """
        Remove objects from a bucket.

        Args:
            bucket: Bucket name
            names: Object names; an empty list is a no-op

        Raises:
            StorageDeleteError: If removal fails
        """
        if not names:
            return

        client = SupabaseClient.get_client()

        try:
            client.storage.from_(bucket).remove(names)
            logger.info(f"Deleted {len(names)} files from storage bucket {bucket}")

        except Exception as e:
            logger.error(f"Failed to delete files from {bucket}: {e}")
            raise StorageDeleteError(bucket, names, str(e))

    @staticmethod
    def remove_urls(bucket: str, urls: list[str | None]) -> list[str]:
        """
        Remove the objects behind a list of public URLs.

        Empty entries are skipped.

        Returns:
            The object names that were removed
        """
        names = [object_name_from_url(url) for url in urls if url]
        StorageService.remove(bucket, names)
        return names

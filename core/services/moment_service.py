# =============================================================================
# core/services/moment_service.py - Moment (Photo Batch) Business Logic
# =============================================================================
# Uploads a batch of photos and stores their URLs as one moments row.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient
from lib.utils import epoch_millis
from core.models.moment import MOMENTS_BUCKET
from core.models.upload import UploadedFile
from core.services.storage_service import StorageService
from app.exceptions import MomentNotFoundError

logger = logging.getLogger(__name__)

MOMENTS_TABLE = "moments"


class MomentService:
    """Service for moment photo batches."""

    @staticmethod
    def add_moments(wedding_id: str, images: list[UploadedFile]) -> dict[str, Any] | None:
        """
        Upload a batch of photos and save them as one moment.

        Photos are uploaded one at a time as moment-<ms>-<index>.jpg. If an
        upload fails, photos uploaded before it stay in storage and no row
        is written.

        Args:
            wedding_id: Owning wedding (must already exist)
            images: Photos picked in one submit

        Returns:
            Created moment row, or None when no photos were given
        """
        if not images:
            return None

        urls = []
        for index, image in enumerate(images):
            name = f"moment-{epoch_millis()}-{index}.jpg"
            urls.append(StorageService.upload(
                MOMENTS_BUCKET,
                name,
                image.content,
                content_type=image.content_type or "image/jpeg",
            ))

        moment = SupabaseClient.insert_row(
            MOMENTS_TABLE,
            {"wedding_id": wedding_id, "moments_img": urls},
        )

        logger.info(f"Saved moment {moment['id']} with {len(urls)} photos for wedding {wedding_id}")
        return moment

    @staticmethod
    def list_moments(wedding_id: str) -> list[dict[str, Any]]:
        """All moments of a wedding."""
        return SupabaseClient.fetch_rows(
            MOMENTS_TABLE,
            columns="id, moments_img",
            filters={"wedding_id": wedding_id},
        )

    @staticmethod
    def delete_moment(wedding_id: str, moment_id: str) -> None:
        """
        Delete a moment: its photos from storage first, then the row.

        Raises:
            MomentNotFoundError: If the moment doesn't exist in this wedding
        """
        moment = SupabaseClient.fetch_one(
            MOMENTS_TABLE,
            {"id": moment_id, "wedding_id": wedding_id},
            columns="id, moments_img",
        )
        if not moment:
            raise MomentNotFoundError(str(moment_id))

        StorageService.remove_urls(MOMENTS_BUCKET, moment.get("moments_img") or [])
        SupabaseClient.delete_rows(MOMENTS_TABLE, {"id": moment_id})

        logger.info(f"Deleted moment {moment_id} of wedding {wedding_id}")

# =============================================================================
# core/services/wedding_service.py - Wedding Business Logic
# =============================================================================
# Handles wedding CRUD and the cascading delete of a wedding with all of
# its content. Images are uploaded first, then the row referencing their
# public URLs is written.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import epoch_millis, normalize_uuid
from core.models.asset import MUSIC_BUCKET
from core.models.moment import MOMENTS_BUCKET
from core.models.upload import UploadedFile
from core.models.wedding import IMAGE_BUCKETS, IMAGE_PREFIXES, WeddingCreate, WeddingUpdate
from core.services.storage_service import StorageService
from app.exceptions import (
    CascadeDeleteError,
    StorageDeleteError,
    WeddingNotFoundError,
)

logger = logging.getLogger(__name__)

WEDDING_TABLE = "wedding"

# Child tables cleared before the wedding row itself, in this order
CHILD_TABLES = ["invites", "moments", "gifts", "assets", "congrats"]


class WeddingService:
    """
    Service for wedding management operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def _upload_images(images: dict[str, UploadedFile | None]) -> dict[str, str]:
        """
        Upload the given images to their buckets.

        Args:
            images: Image column -> file (None entries are skipped)

        Returns:
            Image column -> public URL for each uploaded file
        """
        urls = {}
        for column, image in images.items():
            if image is None:
                continue
            name = f"{IMAGE_PREFIXES[column]}-{epoch_millis()}.jpg"
            urls[column] = StorageService.upload(
                IMAGE_BUCKETS[column],
                name,
                image.content,
                content_type=image.content_type or "image/jpeg",
            )
        return urls

    @staticmethod
    def create_wedding(
        fields: WeddingCreate,
        groom_img: UploadedFile | None = None,
        bride_img: UploadedFile | None = None,
        modal_img: UploadedFile | None = None,
    ) -> dict[str, Any]:
        """
        Create a new wedding.

        Uploads each provided image, then inserts one row with the text
        fields and the images' public URLs (None for missing images).

        Returns:
            Created wedding row

        Raises:
            StorageUploadError: If an image upload fails (no row is written)
            SupabaseClientError: If the insert fails
        """
        urls = WeddingService._upload_images({
            "groom_img": groom_img,
            "bride_img": bride_img,
            "modal_img": modal_img,
        })

        data = fields.to_row()
        for column in IMAGE_BUCKETS:
            data[column] = urls.get(column)

        try:
            wedding = SupabaseClient.insert_row(WEDDING_TABLE, data)
        except SupabaseClientError as e:
            logger.error(f"Failed to create wedding: {e}")
            raise

        logger.info(f"Created wedding: {wedding['id']} ({fields.groom_name} & {fields.bride_name})")
        return wedding

    @staticmethod
    def get_wedding(wedding_id: str) -> dict[str, Any]:
        """
        Get a wedding by ID.

        Raises:
            WeddingNotFoundError: If the wedding doesn't exist
        """
        wedding = SupabaseClient.fetch_one(WEDDING_TABLE, {"id": normalize_uuid(wedding_id)})

        if not wedding:
            raise WeddingNotFoundError(str(wedding_id))

        return wedding

    @staticmethod
    def get_active_wedding() -> dict[str, Any] | None:
        """
        Get the active wedding for single-tenant pages.

        The first wedding row is the active one.

        Returns:
            Wedding row, or None if no wedding exists yet
        """
        return SupabaseClient.fetch_first(WEDDING_TABLE)

    @staticmethod
    def resolve_wedding(wedding_id: str | None = None) -> dict[str, Any]:
        """
        Get the wedding a page is about.

        Uses the id from the query string when given, otherwise falls back
        to the active wedding.

        Raises:
            WeddingNotFoundError: If there is no such wedding
        """
        if wedding_id:
            return WeddingService.get_wedding(wedding_id)

        wedding = WeddingService.get_active_wedding()
        if not wedding:
            raise WeddingNotFoundError()
        return wedding

    @staticmethod
    def list_weddings() -> list[dict[str, Any]]:
        """List weddings for the management page, latest date first."""
        return SupabaseClient.fetch_rows(
            WEDDING_TABLE,
            columns="id, groom_name, bride_name, date",
            order_by="date",
            desc=True,
        )

    @staticmethod
    def update_wedding(
        wedding_id: str,
        fields: WeddingUpdate,
        groom_img: UploadedFile | None = None,
        bride_img: UploadedFile | None = None,
        modal_img: UploadedFile | None = None,
    ) -> dict[str, Any]:
        """
        Update a wedding.

        Only provided text fields are written. An image URL is replaced
        only when a new file is given; otherwise the stored URL is kept.

        Returns:
            Updated wedding row

        Raises:
            WeddingNotFoundError: If the wedding doesn't exist
        """
        wedding = WeddingService.get_wedding(wedding_id)

        update_data = fields.to_row()
        update_data.update(WeddingService._upload_images({
            "groom_img": groom_img,
            "bride_img": bride_img,
            "modal_img": modal_img,
        }))

        if not update_data:
            return wedding  # Nothing to update

        try:
            rows = SupabaseClient.update_rows(WEDDING_TABLE, update_data, {"id": wedding["id"]})
        except SupabaseClientError as e:
            logger.error(f"Failed to update wedding {wedding_id}: {e}")
            raise

        logger.info(f"Updated wedding: {wedding_id} ({', '.join(sorted(update_data))})")
        return rows[0] if rows else {**wedding, **update_data}

    @staticmethod
    def delete_wedding(wedding_id: str) -> list[str]:
        """
        Delete a wedding with all of its content.

        Steps, in order:
        1. fetch the wedding's image URLs
        2. remove the groom, bride and cover images from their buckets
        3. remove every moment photo
        4. remove the music file
        5. delete rows from invites, moments, gifts, assets, congrats
        6. delete the wedding row

        There is no transaction. The first failing step stops the delete
        and whatever earlier steps removed stays removed.

        Returns:
            Names of the completed steps

        Raises:
            WeddingNotFoundError: If the wedding doesn't exist
            CascadeDeleteError: If any later step fails
        """
        wedding = SupabaseClient.fetch_one(
            WEDDING_TABLE,
            {"id": normalize_uuid(wedding_id)},
            columns="id, groom_img, bride_img, modal_img",
        )
        if not wedding:
            raise WeddingNotFoundError(str(wedding_id))

        completed: list[str] = []
        step = "wedding_images"

        try:
            # Each image lives in its own bucket
            for column, bucket in IMAGE_BUCKETS.items():
                StorageService.remove_urls(bucket, [wedding.get(column)])
            completed.append(step)

            step = "moment_images"
            moments = SupabaseClient.fetch_rows(
                "moments", columns="moments_img", filters={"wedding_id": wedding_id}
            )
            moment_urls = [url for moment in moments for url in (moment.get("moments_img") or [])]
            StorageService.remove_urls(MOMENTS_BUCKET, moment_urls)
            completed.append(step)

            step = "music"
            assets = SupabaseClient.fetch_rows(
                "assets", columns="music", filters={"wedding_id": wedding_id}
            )
            StorageService.remove_urls(MUSIC_BUCKET, [asset.get("music") for asset in assets])
            completed.append(step)

            for table in CHILD_TABLES:
                step = table
                SupabaseClient.delete_rows(table, {"wedding_id": wedding_id})
                completed.append(step)

            step = "wedding"
            SupabaseClient.delete_rows(WEDDING_TABLE, {"id": wedding_id})
            completed.append(step)

        except (SupabaseClientError, StorageDeleteError) as e:
            logger.error(f"Failed to delete wedding {wedding_id} at step {step}: {e}")
            raise CascadeDeleteError(str(wedding_id), step, completed, str(e))

        logger.info(f"Deleted wedding {wedding_id} and all related data")
        return completed

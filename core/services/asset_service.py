# =============================================================================
# core/services/asset_service.py - Background Music Business Logic
# =============================================================================
# Each wedding has one music file stored as music-<wedding id>.mp3.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient
from core.models.asset import MUSIC_BUCKET
from core.models.upload import UploadedFile
from core.services.storage_service import StorageService

logger = logging.getLogger(__name__)

ASSETS_TABLE = "assets"


class AssetService:
    """Service for the wedding's background music."""

    @staticmethod
    def get_music(wedding_id: str) -> dict[str, Any] | None:
        """
        Get the music asset of a wedding.

        Returns:
            Asset row (id, music), or None if no music was saved yet
        """
        rows = SupabaseClient.fetch_rows(
            ASSETS_TABLE,
            columns="id, music",
            filters={"wedding_id": wedding_id},
            limit=1,
        )
        return rows[0] if rows else None

    @staticmethod
    def save_music(wedding_id: str, music: UploadedFile | None) -> dict[str, Any] | None:
        """
        Replace the music of a wedding.

        With a new file: the previous file is removed from storage, the
        new one uploaded as music-<wedding id>.mp3 (overwriting), then the
        asset row is updated, or inserted if there is none. Without a file
        the existing asset is returned unchanged.

        Returns:
            Asset row, or None when there is neither a file nor an asset
        """
        asset = AssetService.get_music(wedding_id)
        if music is None:
            return asset

        if asset and asset.get("music"):
            StorageService.remove_urls(MUSIC_BUCKET, [asset["music"]])

        music_url = StorageService.upload(
            MUSIC_BUCKET,
            f"music-{wedding_id}.mp3",
            music.content,
            content_type=music.content_type or "audio/mpeg",
            upsert=True,
        )

        if asset:
            rows = SupabaseClient.update_rows(ASSETS_TABLE, {"music": music_url}, {"id": asset["id"]})
            saved = rows[0] if rows else {**asset, "music": music_url}
        else:
            saved = SupabaseClient.insert_row(ASSETS_TABLE, {"wedding_id": wedding_id, "music": music_url})

        logger.info(f"Saved music for wedding {wedding_id}: {music_url}")
        return saved

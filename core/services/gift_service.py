# =============================================================================
# core/services/gift_service.py - Gift Envelope Business Logic
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient
from core.models.gift import GiftCreate
from app.exceptions import GiftNotFoundError

logger = logging.getLogger(__name__)

GIFTS_TABLE = "gifts"


class GiftService:
    """Service for gift envelopes."""

    @staticmethod
    def add_gift(wedding_id: str, gift: GiftCreate) -> dict[str, Any]:
        """Save a gift envelope for a wedding."""
        row = SupabaseClient.insert_row(GIFTS_TABLE, {
            "wedding_id": wedding_id,
            "envelope_name": gift.envelope_name,
            "envelope_number": gift.envelope_number,
            "rek_name": gift.rek_name,
        })

        logger.info(f"Saved gift {row['id']} for wedding {wedding_id}")
        return row

    @staticmethod
    def list_gifts(wedding_id: str) -> list[dict[str, Any]]:
        """All gift envelopes of a wedding."""
        return SupabaseClient.fetch_rows(
            GIFTS_TABLE,
            columns="id, envelope_name, envelope_number, rek_name",
            filters={"wedding_id": wedding_id},
        )

    @staticmethod
    def delete_gift(wedding_id: str, gift_id: str) -> None:
        """
        Delete a gift envelope.

        Raises:
            GiftNotFoundError: If no envelope with this id belongs to the wedding
        """
        deleted = SupabaseClient.delete_rows(GIFTS_TABLE, {"id": gift_id, "wedding_id": wedding_id})
        if not deleted:
            raise GiftNotFoundError(str(gift_id))

        logger.info(f"Deleted gift {gift_id} of wedding {wedding_id}")

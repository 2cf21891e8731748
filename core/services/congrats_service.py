# =============================================================================
# core/services/congrats_service.py - Guest-Book Business Logic
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient
from core.models.congrats import Attendance, CongratsCreate
from app.exceptions import CongratsNotFoundError

logger = logging.getLogger(__name__)

CONGRATS_TABLE = "congrats"


class CongratsService:
    """Service for guest-book entries."""

    @staticmethod
    def submit_congrats(wedding_id: str, entry: CongratsCreate) -> dict[str, Any]:
        """
        Save a guest-book entry.

        The backend stamps created_at.
        """
        row = SupabaseClient.insert_row(CONGRATS_TABLE, {
            "wedding_id": wedding_id,
            "name": entry.name,
            "message": entry.message,
            "attendance": entry.attendance.value,
        })

        logger.info(f"Saved congrats {row['id']} from {entry.name} for wedding {wedding_id}")
        return row

    @staticmethod
    def list_congrats(wedding_id: str) -> list[dict[str, Any]]:
        """Guest-book entries of a wedding, newest first."""
        return SupabaseClient.fetch_rows(
            CONGRATS_TABLE,
            columns="id, name, message, attendance, created_at",
            filters={"wedding_id": wedding_id},
            order_by="created_at",
            desc=True,
        )

    @staticmethod
    def attendance_summary(entries: list[dict[str, Any]]) -> dict[str, int]:
        """
        Count attendance over guest-book entries.

        Entries with an unknown attendance value count toward the total only.
        """
        present = sum(1 for e in entries if e.get("attendance") == Attendance.PRESENT.value)
        not_present = sum(1 for e in entries if e.get("attendance") == Attendance.NOT_PRESENT.value)
        return {
            "present": present,
            "not_present": not_present,
            "total": len(entries),
        }

    @staticmethod
    def delete_congrats(wedding_id: str, congrats_id: str) -> None:
        """
        Remove a guest-book entry.

        Raises:
            CongratsNotFoundError: If the entry doesn't belong to this wedding
        """
        deleted = SupabaseClient.delete_rows(CONGRATS_TABLE, {"id": congrats_id, "wedding_id": wedding_id})
        if not deleted:
            raise CongratsNotFoundError(str(congrats_id))

        logger.info(f"Deleted congrats {congrats_id} of wedding {wedding_id}")

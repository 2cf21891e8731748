# =============================================================================
# core/services/invite_service.py - Invited Guest Business Logic
# =============================================================================
# Manages the guest list and builds each guest's share link and message.
# =============================================================================

import logging
from typing import Any

from lib.invitation_text import build_share_link, build_share_message
from lib.supabase_client import SupabaseClient
from app.config import settings
from app.exceptions import InviteNotFoundError

logger = logging.getLogger(__name__)

INVITES_TABLE = "invites"


class InviteService:
    """Service for the invite list."""

    @staticmethod
    def add_invite(wedding_id: str, invited_name: str) -> dict[str, Any]:
        """Add a guest to a wedding's invite list."""
        invite = SupabaseClient.insert_row(INVITES_TABLE, {
            "wedding_id": wedding_id,
            "invited_name": invited_name,
        })

        logger.info(f"Added invite {invite['id']} ({invited_name}) to wedding {wedding_id}")
        return invite

    @staticmethod
    def get_invite(wedding_id: str, invite_id: str) -> dict[str, Any]:
        """
        Get one guest of a wedding.

        Raises:
            InviteNotFoundError: If the guest isn't on this wedding's list
        """
        invite = SupabaseClient.fetch_one(
            INVITES_TABLE,
            {"id": invite_id, "wedding_id": wedding_id},
            columns="id, invited_name",
        )
        if not invite:
            raise InviteNotFoundError(str(invite_id))
        return invite

    @staticmethod
    def list_invites(wedding_id: str) -> list[dict[str, Any]]:
        """All guests of a wedding."""
        return SupabaseClient.fetch_rows(
            INVITES_TABLE,
            columns="id, invited_name",
            filters={"wedding_id": wedding_id},
        )

    @staticmethod
    def delete_invite(wedding_id: str, invite_id: str) -> None:
        """
        Remove one guest.

        Raises:
            InviteNotFoundError: If the guest isn't on this wedding's list
        """
        deleted = SupabaseClient.delete_rows(INVITES_TABLE, {"id": invite_id, "wedding_id": wedding_id})
        if not deleted:
            raise InviteNotFoundError(str(invite_id))

        logger.info(f"Deleted invite {invite_id} of wedding {wedding_id}")

    @staticmethod
    def delete_all_invites(wedding_id: str) -> int:
        """
        Clear a wedding's invite list.

        Returns:
            Number of guests removed (0 when the list was already empty)
        """
        count = SupabaseClient.delete_rows(INVITES_TABLE, {"wedding_id": wedding_id})
        logger.info(f"Deleted {count} invites of wedding {wedding_id}")
        return count

    # -------------------------------------------------------------------------
    # Share Links
    # -------------------------------------------------------------------------

    @staticmethod
    def _couple_names(wedding: dict[str, Any]) -> tuple[str, str]:
        return (
            wedding.get("groom_name") or settings.DEFAULT_GROOM_NAME,
            wedding.get("bride_name") or settings.DEFAULT_BRIDE_NAME,
        )

    @staticmethod
    def share_link(wedding: dict[str, Any], invited_name: str) -> str:
        """
        Personalized invitation URL for one guest.

        Missing couple names fall back to the configured defaults.
        """
        groom_name, bride_name = InviteService._couple_names(wedding)
        return build_share_link(
            settings.SHARE_BASE_URL,
            str(wedding["id"]),
            groom_name,
            bride_name,
            invited_name,
        )

    @staticmethod
    def share_message(wedding: dict[str, Any], invited_name: str) -> dict[str, str]:
        """
        The invitation text to send to one guest.

        Returns:
            Dict with invited_name, link, and message (the full text)
        """
        groom_name, bride_name = InviteService._couple_names(wedding)
        link = InviteService.share_link(wedding, invited_name)
        return {
            "invited_name": invited_name,
            "link": link,
            "message": build_share_message(link, groom_name, bride_name, invited_name),
        }

    @staticmethod
    def preview_link(wedding: dict[str, Any]) -> str:
        """Share link with the default guest name, for previewing the invitation."""
        return InviteService.share_link(wedding, settings.PREVIEW_INVITED_NAME)

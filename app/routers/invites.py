# =============================================================================
# app/routers/invites.py - Invited Guest Endpoints
# =============================================================================
# Manage the guest list and get each guest's share link and message.
# User-facing messages are in Indonesian, as on the guest list page.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import ParentWeddingDep, WeddingDep
from core.models.invite import InviteCreate, InviteList, ShareLinkResponse
from core.services.invite_service import InviteService

router = APIRouter()


@router.get("/{wedding_id}/invites", response_model=InviteList)
async def list_invites(wedding: WeddingDep):
    """
    List the wedding's guests.

    Each guest comes with their personal invitation link.
    """
    invites = InviteService.list_invites(str(wedding["id"]))

    return {
        "wedding_id": wedding["id"],
        "groom_name": wedding.get("groom_name"),
        "bride_name": wedding.get("bride_name"),
        "invites": [
            {
                "id": invite["id"],
                "invited_name": invite["invited_name"],
                "share_link": InviteService.share_link(wedding, invite["invited_name"]),
            }
            for invite in invites
        ],
        "total": len(invites),
    }


@router.post("/{wedding_id}/invites", status_code=201)
async def add_invite(wedding: ParentWeddingDep, request: InviteCreate):
    """Add a guest to the invite list."""
    invite = InviteService.add_invite(str(wedding["id"]), request.invited_name)

    return {
        "wedding_id": wedding["id"],
        "invite": {
            **invite,
            "share_link": InviteService.share_link(wedding, invite["invited_name"]),
        },
        "message": "Tamu undangan berhasil ditambahkan!",
    }


@router.delete("/{wedding_id}/invites")
async def delete_all_invites(wedding: ParentWeddingDep):
    """
    Remove every guest from the list.

    This cannot be undone.
    """
    count = InviteService.delete_all_invites(str(wedding["id"]))

    if count == 0:
        message = "Tidak ada tamu undangan untuk dihapus."
    else:
        message = f"Berhasil menghapus {count} tamu undangan!"

    return {
        "wedding_id": wedding["id"],
        "deleted": count,
        "message": message,
    }


@router.delete("/{wedding_id}/invites/{invite_id}")
async def delete_invite(
    wedding: WeddingDep,
    invite_id: Annotated[str, Path(description="Invite id")],
):
    """Remove one guest."""
    InviteService.delete_invite(str(wedding["id"]), invite_id)

    return {
        "invite_id": invite_id,
        "message": "Tamu undangan berhasil dihapus!",
    }


@router.get("/{wedding_id}/invites/{invite_id}/share", response_model=ShareLinkResponse)
async def share_invite(
    wedding: WeddingDep,
    invite_id: Annotated[str, Path(description="Invite id")],
):
    """
    The invitation text to send to one guest.

    `message` is ready to paste into a chat; `link` is the URL inside it.
    """
    invite = InviteService.get_invite(str(wedding["id"]), invite_id)
    return InviteService.share_message(wedding, invite["invited_name"])

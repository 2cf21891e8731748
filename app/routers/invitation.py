# =============================================================================
# app/routers/invitation.py - Public Invitation Endpoints
# =============================================================================
# What guests see: the invitation page, the gift list and the guest-book.
# These endpoints are public and read the wedding from the weddingId query
# parameter carried by every share link; without it the active (first)
# wedding is shown.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from app.config import settings
from core.models.congrats import CongratsCreate
from core.services.asset_service import AssetService
from core.services.congrats_service import CongratsService
from core.services.gift_service import GiftService
from core.services.moment_service import MomentService
from core.services.wedding_service import WeddingService

logger = logging.getLogger(__name__)

router = APIRouter()

WeddingIdQuery = Annotated[
    str | None,
    Query(alias="weddingId", description="Wedding id from the share link"),
]


@router.get("")
async def get_invitation(
    wedding_id: WeddingIdQuery = None,
    invited_name: Annotated[str | None, Query(description="Guest name from the share link")] = None,
):
    """
    Everything the invitation page shows.

    Returns the wedding details, moment photos, gift envelopes, music and
    guest-book, personalized with the guest's name.
    """
    wedding = WeddingService.resolve_wedding(wedding_id)
    wedding_key = str(wedding["id"])

    asset = AssetService.get_music(wedding_key)
    congrats = CongratsService.list_congrats(wedding_key)

    # Photos of all batches, in upload order
    moments = MomentService.list_moments(wedding_key)
    photos = [url for moment in moments for url in (moment.get("moments_img") or [])]

    logger.debug(f"Invitation page for wedding {wedding_key} (guest: {invited_name})")

    return {
        "invited_name": invited_name or settings.PREVIEW_INVITED_NAME,
        "wedding": wedding,
        "moments": photos,
        "gifts": GiftService.list_gifts(wedding_key),
        "music": asset.get("music") if asset else None,
        "congrats": congrats,
        "attendance": CongratsService.attendance_summary(congrats),
    }


@router.get("/gifts")
async def get_gift_list(wedding_id: WeddingIdQuery = None):
    """Gift envelopes guests can send a gift to."""
    wedding = WeddingService.resolve_wedding(wedding_id)

    return {
        "wedding_id": wedding["id"],
        "gifts": GiftService.list_gifts(str(wedding["id"])),
    }


@router.get("/congrats")
async def get_guest_book(wedding_id: WeddingIdQuery = None):
    """Guest-book entries, newest first."""
    wedding = WeddingService.resolve_wedding(wedding_id)
    entries = CongratsService.list_congrats(str(wedding["id"]))

    return {
        "wedding_id": wedding["id"],
        "congrats": entries,
        "attendance": CongratsService.attendance_summary(entries),
    }


@router.post("/congrats", status_code=201)
async def submit_congrats(request: CongratsCreate, wedding_id: WeddingIdQuery = None):
    """Leave a congratulation message and say whether you'll attend."""
    wedding = WeddingService.resolve_wedding(wedding_id)
    entry = CongratsService.submit_congrats(str(wedding["id"]), request)

    return {
        "wedding_id": wedding["id"],
        "congrats": entry,
        "message": "Terima kasih atas ucapan dan doanya!",
    }

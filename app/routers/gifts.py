# =============================================================================
# app/routers/gifts.py - Gift Envelope Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import ParentWeddingDep, WeddingDep
from core.models.gift import GiftCreate, GiftList
from core.services.gift_service import GiftService

router = APIRouter()


@router.get("/{wedding_id}/gifts", response_model=GiftList)
async def list_gifts(wedding: WeddingDep):
    """List the wedding's gift envelopes."""
    gifts = GiftService.list_gifts(str(wedding["id"]))

    return {
        "wedding_id": wedding["id"],
        "gifts": gifts,
        "total": len(gifts),
    }


@router.post("/{wedding_id}/gifts", status_code=201)
async def add_gift(wedding: ParentWeddingDep, request: GiftCreate):
    """Add a gift envelope."""
    gift = GiftService.add_gift(str(wedding["id"]), request)

    return {
        "wedding_id": wedding["id"],
        "gift": gift,
        "message": "Gift saved!",
    }


@router.delete("/{wedding_id}/gifts/{gift_id}")
async def delete_gift(
    wedding: WeddingDep,
    gift_id: Annotated[str, Path(description="Gift id")],
):
    """Delete a gift envelope."""
    GiftService.delete_gift(str(wedding["id"]), gift_id)

    return {
        "gift_id": gift_id,
        "message": "Gift deleted!",
    }

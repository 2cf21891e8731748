# =============================================================================
# app/routers/congrats.py - Guest-Book Moderation Endpoints
# =============================================================================
# CMS view of the guest-book. Guests write entries through the public
# invitation endpoints.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import WeddingDep
from core.models.congrats import CongratsList
from core.services.congrats_service import CongratsService

router = APIRouter()


@router.get("/{wedding_id}/congrats", response_model=CongratsList)
async def list_congrats(wedding: WeddingDep):
    """List guest-book entries (newest first) with attendance counts."""
    entries = CongratsService.list_congrats(str(wedding["id"]))

    return {
        "wedding_id": wedding["id"],
        "congrats": entries,
        "attendance": CongratsService.attendance_summary(entries),
    }


@router.delete("/{wedding_id}/congrats/{congrats_id}")
async def delete_congrats(
    wedding: WeddingDep,
    congrats_id: Annotated[str, Path(description="Guest-book entry id")],
):
    """Remove a guest-book entry."""
    CongratsService.delete_congrats(str(wedding["id"]), congrats_id)

    return {
        "congrats_id": congrats_id,
        "message": "Congratulation message deleted!",
    }

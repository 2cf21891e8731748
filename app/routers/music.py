# =============================================================================
# app/routers/music.py - Background Music Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, File, UploadFile

from app.dependencies import ParentWeddingDep, WeddingDep, read_music
from core.models.asset import MusicResponse
from core.services.asset_service import AssetService

router = APIRouter()


@router.get("/{wedding_id}/music", response_model=MusicResponse)
async def get_music(wedding: WeddingDep):
    """Get the wedding's music asset (music=null if none was uploaded)."""
    asset = AssetService.get_music(str(wedding["id"]))

    return {
        "wedding_id": wedding["id"],
        "asset_id": asset["id"] if asset else None,
        "music": asset.get("music") if asset else None,
    }


@router.put("/{wedding_id}/music")
async def save_music(
    wedding: ParentWeddingDep,
    music: Annotated[UploadFile | None, File(description="Music file")] = None,
):
    """
    Upload or replace the wedding's music.

    The previous file is removed from storage before the new one is saved.
    Without a file the current music is kept.
    """
    upload = await read_music(music)
    asset = AssetService.save_music(str(wedding["id"]), upload)

    return {
        "wedding_id": wedding["id"],
        "asset_id": asset["id"] if asset else None,
        "music": asset.get("music") if asset else None,
        "message": "Music asset updated!" if upload else "No music file to save.",
    }

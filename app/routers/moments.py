# =============================================================================
# app/routers/moments.py - Moment Photo Endpoints
# =============================================================================
# Upload batches of moment photos, list them, and delete a batch.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, File, Path, UploadFile

from app.dependencies import ParentWeddingDep, WeddingDep, read_image
from core.models.moment import MomentList
from core.services.moment_service import MomentService

router = APIRouter()


@router.get("/{wedding_id}/moments", response_model=MomentList)
async def list_moments(wedding: WeddingDep):
    """List the wedding's moment photo batches."""
    moments = MomentService.list_moments(str(wedding["id"]))

    return {
        "wedding_id": wedding["id"],
        "moments": moments,
        "total": len(moments),
    }


@router.post("/{wedding_id}/moments", status_code=201)
async def add_moments(
    wedding: ParentWeddingDep,
    images: Annotated[list[UploadFile] | None, File(description="Photos to add as one batch")] = None,
):
    """
    Add a batch of moment photos.

    All photos are uploaded, then saved together as one moment.
    Returns moment=null when no photo was attached.
    """
    files = [await read_image(image) for image in images or []]
    moment = MomentService.add_moments(str(wedding["id"]), [f for f in files if f is not None])

    return {
        "wedding_id": wedding["id"],
        "moment": moment,
        "message": "Moments saved!" if moment else "No photos to save.",
    }


@router.delete("/{wedding_id}/moments/{moment_id}")
async def delete_moment(
    wedding: WeddingDep,
    moment_id: Annotated[str, Path(description="Moment id")],
):
    """Delete a moment batch and its photos."""
    MomentService.delete_moment(str(wedding["id"]), moment_id)

    return {
        "moment_id": moment_id,
        "message": "Moment deleted!",
    }

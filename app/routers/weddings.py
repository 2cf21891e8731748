# =============================================================================
# app/routers/weddings.py - Wedding CRUD Endpoints
# =============================================================================
# Handles the wedding list, the add/edit wedding forms, previews and the
# cascading delete.
#
# Forms are multipart: text fields plus optional groom/bride/cover images.
# A portrait may carry a crop selection (JSON) that is applied before upload.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from app.dependencies import WeddingDep, read_image, read_portrait
from core.models.wedding import WeddingCreate, WeddingList, WeddingResponse, WeddingUpdate
from core.services.asset_service import AssetService
from core.services.gift_service import GiftService
from core.services.invite_service import InviteService
from core.services.moment_service import MomentService
from core.services.wedding_service import WeddingService

logger = logging.getLogger(__name__)

router = APIRouter()

CropField = Annotated[
    str | None,
    Form(description='Crop selection as JSON, e.g. {"x": 25, "y": 25, "width": 50, "height": 50, "unit": "%"}'),
]


# =============================================================================
# Form Parsing
# =============================================================================

def _build(model: type[BaseModel], values: dict):
    """Validate collected form values, reporting failures as a 422."""
    try:
        return model(**values)
    except ValidationError as e:
        raise RequestValidationError(e.errors())


def wedding_create_form(
    groom: Annotated[str, Form()],
    bride: Annotated[str, Form()],
    groom_name: Annotated[str, Form()],
    bride_name: Annotated[str, Form()],
    place: Annotated[str, Form()],
    date: Annotated[str, Form(description="YYYY-MM-DD")],
    day: Annotated[str, Form()],
    time: Annotated[str, Form(description="HH:MM")],
    contract_time: Annotated[str, Form(description="HH:MM")],
    groom_initial: Annotated[str, Form()] = "",
    bride_initial: Annotated[str, Form()] = "",
    groom_desc: Annotated[str, Form()] = "",
    bride_desc: Annotated[str, Form()] = "",
    description: Annotated[str, Form()] = "",
    invite_desc: Annotated[str, Form()] = "",
) -> WeddingCreate:
    """Text fields of the add-wedding form."""
    return _build(WeddingCreate, dict(locals()))


async def wedding_update_form(
    request: Request,
    groom: Annotated[str | None, Form()] = None,
    bride: Annotated[str | None, Form()] = None,
    groom_name: Annotated[str | None, Form()] = None,
    bride_name: Annotated[str | None, Form()] = None,
    groom_initial: Annotated[str | None, Form()] = None,
    bride_initial: Annotated[str | None, Form()] = None,
    groom_desc: Annotated[str | None, Form()] = None,
    bride_desc: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    place: Annotated[str | None, Form()] = None,
    date: Annotated[str | None, Form(description="YYYY-MM-DD")] = None,
    day: Annotated[str | None, Form()] = None,
    time: Annotated[str | None, Form(description="HH:MM")] = None,
    contract_time: Annotated[str | None, Form(description="HH:MM")] = None,
    invite_desc: Annotated[str | None, Form()] = None,
) -> WeddingUpdate:
    """
    Fields of the edit-wedding form; only those sent are changed.

    Values come from the raw form, since FastAPI reads an empty field as
    None. A field sent empty is written as "" so descriptions can be cleared.
    The parameters above only declare the form for the OpenAPI schema.
    """
    form = await request.form()
    values = {
        name: value
        for name, value in form.multi_items()
        if name in WeddingUpdate.model_fields and isinstance(value, str)
    }
    return _build(WeddingUpdate, values)


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=WeddingList)
async def list_weddings():
    """
    List all weddings.

    Returns id and couple names, latest wedding date first.
    """
    weddings = WeddingService.list_weddings()

    return {
        "weddings": weddings,
        "total": len(weddings),
    }


@router.post("", status_code=201)
async def create_wedding(
    fields: Annotated[WeddingCreate, Depends(wedding_create_form)],
    groom_img: Annotated[UploadFile | None, File(description="Groom photo")] = None,
    bride_img: Annotated[UploadFile | None, File(description="Bride photo")] = None,
    modal_img: Annotated[UploadFile | None, File(description="Cover image")] = None,
    groom_crop: CropField = None,
    bride_crop: CropField = None,
):
    """
    Create a new wedding.

    This endpoint:
    1. Validates the images (extension, size) and applies any crop
    2. Uploads each image to its storage bucket
    3. Inserts the wedding row with the images' public URLs

    Returns the created wedding. Its id is used for all content endpoints.
    """
    groom = await read_portrait(groom_img, groom_crop)
    bride = await read_portrait(bride_img, bride_crop)
    modal = await read_image(modal_img)

    wedding = WeddingService.create_wedding(fields, groom_img=groom, bride_img=bride, modal_img=modal)

    return {
        "wedding_id": wedding["id"],
        "wedding": wedding,
        "message": "Wedding details saved!",
    }


@router.get("/{wedding_id}", response_model=WeddingResponse)
async def get_wedding(wedding: WeddingDep):
    """
    Get wedding details.

    Use "active" as the id to get the first wedding (single-wedding sites).
    """
    return wedding


@router.patch("/{wedding_id}")
async def update_wedding(
    wedding: WeddingDep,
    fields: Annotated[WeddingUpdate, Depends(wedding_update_form)],
    groom_img: Annotated[UploadFile | None, File(description="New groom photo")] = None,
    bride_img: Annotated[UploadFile | None, File(description="New bride photo")] = None,
    modal_img: Annotated[UploadFile | None, File(description="New cover image")] = None,
    groom_crop: CropField = None,
    bride_crop: CropField = None,
):
    """
    Update wedding details.

    Only the fields sent are changed. Images not re-uploaded keep their
    current URL.
    """
    groom = await read_portrait(groom_img, groom_crop)
    bride = await read_portrait(bride_img, bride_crop)
    modal = await read_image(modal_img)

    updated = WeddingService.update_wedding(
        str(wedding["id"]),
        fields,
        groom_img=groom,
        bride_img=bride,
        modal_img=modal,
    )

    return {
        "wedding_id": updated["id"],
        "wedding": updated,
        "message": "Wedding details updated!",
    }


@router.delete("/{wedding_id}")
async def delete_wedding(wedding: WeddingDep):
    """
    Delete a wedding and everything that belongs to it.

    Removes the wedding's images, moment photos and music from storage,
    then its invites, moments, gifts, assets and guest-book entries, then
    the wedding itself. This cannot be undone.
    """
    steps = WeddingService.delete_wedding(str(wedding["id"]))

    return {
        "wedding_id": wedding["id"],
        "completed_steps": steps,
        "message": "Wedding and all related data deleted successfully!",
    }


@router.get("/{wedding_id}/cms")
async def get_cms_data(wedding: WeddingDep):
    """
    Everything the edit page needs in one call.

    Returns the wedding with its moments, gifts and music.
    """
    wedding_id = str(wedding["id"])
    asset = AssetService.get_music(wedding_id)

    return {
        "wedding": wedding,
        "moments": MomentService.list_moments(wedding_id),
        "gifts": GiftService.list_gifts(wedding_id),
        "music": asset,
    }


@router.get("/{wedding_id}/preview")
async def preview_wedding(wedding: WeddingDep):
    """
    Preview link for the invitation page.

    The link is personalized for a placeholder guest.
    """
    return {
        "wedding_id": wedding["id"],
        "groom_name": wedding.get("groom_name"),
        "bride_name": wedding.get("bride_name"),
        "preview_url": InviteService.preview_link(wedding),
    }

# =============================================================================
# app/routers/images.py - Image Cropping Endpoint
# =============================================================================
# Crops an image the way the portrait editor does and returns the JPEG,
# so clients can preview a crop before submitting the wedding form.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from pydantic import ValidationError

from app.config import settings
from app.dependencies import read_upload
from core.models.crop import CropRequest
from core.services.image_service import ImageService

router = APIRouter()


@router.post(
    "/crop",
    response_class=Response,
    responses={200: {"content": {"image/jpeg": {}}, "description": "Cropped JPEG"}},
)
async def crop_image(
    image: Annotated[UploadFile, File(description="Image to crop")],
    width: Annotated[float, Form(gt=0)],
    height: Annotated[float, Form(gt=0)],
    x: Annotated[float, Form(ge=0)] = 0,
    y: Annotated[float, Form(ge=0)] = 0,
    unit: Annotated[str, Form(description='"%" or "px"')] = "%",
    displayed_width: Annotated[float | None, Form(gt=0)] = None,
    displayed_height: Annotated[float | None, Form(gt=0)] = None,
):
    """
    Crop an image to JPEG.

    The crop box is in the coordinates the image was displayed at
    (percent by default). The output size is the crop size scaled by
    natural / displayed image size.
    """
    try:
        crop = CropRequest(
            x=x,
            y=y,
            width=width,
            height=height,
            unit=unit,
            displayed_width=displayed_width,
            displayed_height=displayed_height,
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    upload = await read_upload(image, settings.image_extensions_list, settings.max_image_size_bytes)
    cropped = ImageService.crop(upload, crop.to_crop_box(), crop.displayed_size)

    return Response(
        content=cropped.content,
        media_type="image/jpeg",
        headers={"Content-Disposition": f'inline; filename="{cropped.filename}"'},
    )

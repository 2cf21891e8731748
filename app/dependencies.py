# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources, plus the upload
# validation every form with files goes through.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import Depends, Path, UploadFile
from pydantic import ValidationError

from app.config import settings
from app.exceptions import (
    FileTooLargeError,
    ImageCropError,
    InvalidFileTypeError,
    WeddingNotFoundError,
    WeddingRequiredError,
)
from core.models.crop import CropRequest
from core.models.upload import UploadedFile
from core.services.image_service import ImageService
from core.services.wedding_service import WeddingService
from lib.supabase_client import SupabaseClient
from lib.utils import file_extension

logger = logging.getLogger(__name__)


def get_supabase_client() -> type[SupabaseClient]:
    """
    Get Supabase client instance.

    Returns the singleton client wrapper.
    """
    return SupabaseClient


# Type alias for dependency injection
SupabaseDep = Annotated[type[SupabaseClient], Depends(get_supabase_client)]


# =============================================================================
# Wedding Lookups
# =============================================================================

# Path value that stands for the active (first) wedding in single-tenant use
ACTIVE_WEDDING = "active"


def get_wedding(
    wedding_id: Annotated[str, Path(description='Wedding id, or "active" for the first wedding')],
) -> dict[str, Any]:
    """The wedding named in the path; 404 if it doesn't exist."""
    return WeddingService.resolve_wedding(None if wedding_id == ACTIVE_WEDDING else wedding_id)


def get_parent_wedding(
    wedding_id: Annotated[str, Path(description='Wedding id, or "active" for the first wedding')],
) -> dict[str, Any]:
    """
    The wedding that new content is being added to.

    Content can't be saved before its wedding, so a missing wedding is
    reported as "save wedding details first" rather than a 404.
    """
    try:
        return get_wedding(wedding_id)
    except WeddingNotFoundError:
        raise WeddingRequiredError(wedding_id)


WeddingDep = Annotated[dict[str, Any], Depends(get_wedding)]
ParentWeddingDep = Annotated[dict[str, Any], Depends(get_parent_wedding)]


# =============================================================================
# Upload Validation
# =============================================================================

async def read_upload(
    file: UploadFile,
    allowed: list[str],
    max_bytes: int,
) -> UploadedFile:
    """
    Validate and read an uploaded file.

    Args:
        file: File from the multipart form
        allowed: Allowed extensions (e.g. [".jpg", ".png"])
        max_bytes: Size limit

    Returns:
        UploadedFile with the file's bytes

    Raises:
        InvalidFileTypeError: If the extension isn't allowed
        FileTooLargeError: If the file exceeds max_bytes
    """
    filename = file.filename or ""
    if file_extension(filename) not in allowed:
        raise InvalidFileTypeError(filename, allowed)

    content = await file.read()
    if len(content) > max_bytes:
        raise FileTooLargeError(len(content) / (1024 * 1024), max_bytes // (1024 * 1024))

    logger.debug(f"Read upload {filename} ({len(content)} bytes)")
    return UploadedFile(content=content, filename=filename, content_type=file.content_type)


async def read_image(file: UploadFile | None) -> UploadedFile | None:
    """Read an optional image field (None or an empty file part means no new image)."""
    if file is None or not file.filename:
        return None
    return await read_upload(file, settings.image_extensions_list, settings.max_image_size_bytes)


async def read_music(file: UploadFile | None) -> UploadedFile | None:
    """Read an optional music field."""
    if file is None or not file.filename:
        return None
    return await read_upload(file, settings.music_extensions_list, settings.max_music_size_bytes)


def parse_crop(raw: str | None) -> CropRequest | None:
    """
    Parse a crop selection sent as a JSON form field.

    Raises:
        ImageCropError: If the JSON is malformed or the box is invalid
    """
    if not raw:
        return None
    try:
        return CropRequest.model_validate_json(raw)
    except ValidationError as e:
        raise ImageCropError(f"Invalid crop selection: {e.errors()[0]['msg']}")


async def read_portrait(file: UploadFile | None, crop_json: str | None) -> UploadedFile | None:
    """Read an optional portrait and apply its crop selection, if any."""
    image = await read_image(file)
    crop = parse_crop(crop_json)
    if image is None or crop is None:
        return image
    return ImageService.crop(image, crop.to_crop_box(), crop.displayed_size)

# =============================================================================
# lib/image_crop.py - Portrait Cropping
# =============================================================================
# Turns an uploaded image plus a crop box chosen in the editor into a JPEG
# of just the cropped area.
#
# The editor shows the image scaled to fit the page, so the crop box arrives
# in displayed coordinates (or as percentages of the displayed image). The
# box is scaled by natural/displayed per axis before cutting the source
# pixels, so the output is crop size * (natural / displayed).
#
# Usage:
#   from lib.image_crop import CropBox, crop_image
#   jpeg = crop_image(content, CropBox(x=25, y=25, width=50, height=50))
# =============================================================================

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from enum import Enum

from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)


class CropError(ValueError):
    """Raised when the image can't be decoded or the crop is empty."""


class CropUnit(str, Enum):
    """Unit of a crop box: percent of the displayed image, or displayed pixels."""
    PERCENT = "%"
    PIXEL = "px"


@dataclass(frozen=True)
class CropBox:
    """
    A crop rectangle as selected in the editor.

    With unit "%" all four values are percentages (0-100) of the displayed
    image; with unit "px" they are pixels of the displayed image.
    """
    x: float
    y: float
    width: float
    height: float
    unit: CropUnit = CropUnit.PERCENT

    def __post_init__(self):
        # Accept plain strings ("%" / "px") as well as the enum
        object.__setattr__(self, "unit", CropUnit(self.unit))


def to_pixel_crop(crop: CropBox, displayed_size: tuple[float, float]) -> CropBox:
    """
    Convert a crop box to displayed-pixel units.

    Args:
        crop: Crop box in either unit
        displayed_size: (width, height) of the image as shown in the editor

    Returns:
        Equivalent CropBox with unit "px"
    """
    if crop.unit == CropUnit.PIXEL:
        return crop

    shown_w, shown_h = displayed_size
    return CropBox(
        x=crop.x * shown_w / 100,
        y=crop.y * shown_h / 100,
        width=crop.width * shown_w / 100,
        height=crop.height * shown_h / 100,
        unit=CropUnit.PIXEL,
    )


def source_rect(
    crop: CropBox,
    natural_size: tuple[int, int],
    displayed_size: tuple[float, float] | None = None,
) -> tuple[int, int, int, int]:
    """
    Compute the source pixel rectangle for a crop.

    Args:
        crop: Crop box in displayed coordinates
        natural_size: (width, height) of the decoded image
        displayed_size: (width, height) shown in the editor; defaults to
            natural_size (image displayed unscaled)

    Returns:
        (left, top, right, bottom) in natural pixels, clamped to the image

    Raises:
        CropError: If the displayed size or the resulting rectangle is empty
    """
    natural_w, natural_h = natural_size
    shown_w, shown_h = displayed_size or natural_size
    if shown_w <= 0 or shown_h <= 0:
        raise CropError(f"Displayed size must be positive, got {shown_w}x{shown_h}")

    pixel = to_pixel_crop(crop, (shown_w, shown_h))
    scale_x = natural_w / shown_w
    scale_y = natural_h / shown_h

    left = round(pixel.x * scale_x)
    top = round(pixel.y * scale_y)
    right = left + round(pixel.width * scale_x)
    bottom = top + round(pixel.height * scale_y)

    left, right = max(0, left), min(natural_w, right)
    top, bottom = max(0, top), min(natural_h, bottom)

    if right <= left or bottom <= top:
        raise CropError(
            f"Crop area is empty: ({left}, {top}, {right}, {bottom}) on a {natural_w}x{natural_h} image"
        )
    return left, top, right, bottom


def _flatten(image: Image.Image) -> Image.Image:
    """Convert to RGB, painting transparent areas white (JPEG has no alpha)."""
    if image.mode in ("RGBA", "LA", "P"):
        image = image.convert("RGBA")
        background = Image.new("RGB", image.size, (255, 255, 255))
        background.paste(image, mask=image.split()[3])
        return background
    if image.mode != "RGB":
        return image.convert("RGB")
    return image


def crop_image(
    content: bytes,
    crop: CropBox,
    displayed_size: tuple[float, float] | None = None,
    quality: int = 95,
) -> bytes:
    """
    Crop an encoded image and re-encode it as JPEG.

    EXIF orientation is applied first so the crop matches what the
    browser displayed. Transparent and palette images are flattened onto
    white since JPEG has no alpha channel.

    Args:
        content: Encoded source image (any format Pillow reads)
        crop: Crop box in displayed coordinates
        displayed_size: Size the image was displayed at (default: natural)
        quality: JPEG quality 1-100

    Returns:
        JPEG bytes of the cropped area

    Raises:
        CropError: If the image can't be decoded or the crop is empty
    """
    buffer = io.BytesIO()

    # Decoding is lazy, so pixel errors can surface as late as save()
    try:
        with Image.open(io.BytesIO(content)) as im:
            im = ImageOps.exif_transpose(im)
            box = source_rect(crop, im.size, displayed_size)
            cropped = _flatten(im.crop(box))
            cropped.save(buffer, "JPEG", quality=quality)
    except CropError:
        raise
    except UnidentifiedImageError as e:
        raise CropError(f"Unsupported or corrupt image: {e}") from e
    except Image.DecompressionBombError as e:
        raise CropError(f"Image is too large: {e}") from e
    except (OSError, ValueError) as e:
        # ValueError: malformed EXIF orientation data
        raise CropError(f"Could not read image: {e}") from e

    logger.debug(f"Cropped image to {cropped.size[0]}x{cropped.size[1]} (box={box})")
    return buffer.getvalue()

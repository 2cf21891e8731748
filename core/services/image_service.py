# =============================================================================
# core/services/image_service.py - Portrait Cropping
# =============================================================================
# Applies a crop box to an uploaded image before it is stored.
# =============================================================================

import logging

from lib.image_crop import CropBox, CropError, crop_image
from core.models.upload import UploadedFile
from app.config import settings
from app.exceptions import ImageCropError

logger = logging.getLogger(__name__)


class ImageService:
    """Service for image transforms done before upload."""

    @staticmethod
    def crop(
        image: UploadedFile,
        crop: CropBox,
        displayed_size: tuple[float, float] | None = None,
    ) -> UploadedFile:
        """
        Crop an uploaded image to JPEG.

        Args:
            image: Uploaded source image
            crop: Crop box in displayed coordinates
            displayed_size: Size the image was shown at in the editor

        Returns:
            New UploadedFile holding the JPEG, named <stem>-cropped.jpg

        Raises:
            ImageCropError: If the image can't be decoded or the crop is empty
        """
        try:
            content = crop_image(image.content, crop, displayed_size, quality=settings.JPEG_QUALITY)
        except CropError as e:
            logger.error(f"Failed to crop {image.filename}: {e}")
            raise ImageCropError(str(e))

        stem = image.filename.rsplit(".", 1)[0] if image.filename else "image"
        return UploadedFile(content=content, filename=f"{stem}-cropped.jpg", content_type="image/jpeg")

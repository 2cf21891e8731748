# =============================================================================
# tests/test_image_crop.py - Image Cropping Tests
# =============================================================================
# Tests for crop geometry (percent / pixel boxes, displayed-to-natural
# scaling, clamping) and for the JPEG produced from real in-memory images.
#
# Run with: pytest tests/test_image_crop.py -v
# =============================================================================

import io

import pytest
from PIL import Image

from lib.image_crop import CropBox, CropError, CropUnit, crop_image, source_rect, to_pixel_crop
from tests.conftest import make_image_bytes


def _open(content: bytes) -> Image.Image:
    return Image.open(io.BytesIO(content))


# =============================================================================
# Geometry Tests
# =============================================================================

class TestCropBox:
    """Tests for CropBox."""

    def test_unit_from_string(self):
        assert CropBox(0, 0, 10, 10, unit="px").unit == CropUnit.PIXEL

    def test_default_unit_is_percent(self):
        assert CropBox(0, 0, 10, 10).unit == CropUnit.PERCENT

    def test_invalid_unit(self):
        with pytest.raises(ValueError):
            CropBox(0, 0, 10, 10, unit="cm")


class TestToPixelCrop:
    """Tests for percent -> displayed pixel conversion."""

    def test_percent_to_pixels(self):
        pixel = to_pixel_crop(CropBox(25, 25, 50, 50), (400, 200))

        assert pixel.unit == CropUnit.PIXEL
        assert (pixel.x, pixel.y, pixel.width, pixel.height) == (100, 50, 200, 100)

    def test_pixel_crop_unchanged(self):
        crop = CropBox(5, 5, 20, 20, unit="px")

        assert to_pixel_crop(crop, (400, 200)) is crop


class TestSourceRect:
    """Tests for the natural-pixel source rectangle."""

    def test_centered_percent_crop(self):
        """The editor's default crop: a centered half-size box."""
        assert source_rect(CropBox(25, 25, 50, 50), (200, 100)) == (50, 25, 150, 75)

    def test_scaled_by_natural_over_displayed(self):
        """A box chosen on a half-size preview maps to twice the pixels."""
        crop = CropBox(10, 10, 40, 20, unit="px")

        assert source_rect(crop, (200, 100), displayed_size=(100, 50)) == (20, 20, 100, 60)

    def test_independent_axis_scales(self):
        crop = CropBox(0, 0, 50, 50, unit="px")

        assert source_rect(crop, (400, 100), displayed_size=(100, 100)) == (0, 0, 200, 50)

    def test_clamped_to_image(self):
        """A box running past the edge is cut at the edge."""
        crop = CropBox(150, 0, 100, 100, unit="px")

        assert source_rect(crop, (200, 100)) == (150, 0, 200, 100)

    def test_box_outside_image(self):
        crop = CropBox(250, 0, 100, 100, unit="px")

        with pytest.raises(CropError):
            source_rect(crop, (200, 100))

    def test_zero_displayed_size(self):
        with pytest.raises(CropError):
            source_rect(CropBox(0, 0, 10, 10), (200, 100), displayed_size=(0, 100))

    def test_empty_box(self):
        """A box that rounds to zero pixels is rejected."""
        crop = CropBox(0, 0, 0.1, 10, unit="px")

        with pytest.raises(CropError):
            source_rect(crop, (200, 100))


# =============================================================================
# Encoding Tests
# =============================================================================

class TestCropImage:
    """Tests for crop_image on real images."""

    def test_output_is_jpeg_of_crop_size(self, png_bytes):
        result = crop_image(png_bytes, CropBox(25, 25, 50, 50))

        image = _open(result)
        assert image.format == "JPEG"
        assert image.size == (100, 50)

    def test_output_size_scales_with_displayed_size(self, jpeg_bytes):
        """Output = crop size * natural / displayed."""
        crop = CropBox(0, 0, 50, 25, unit="px")

        result = crop_image(jpeg_bytes, crop, displayed_size=(100, 50))

        assert _open(result).size == (100, 50)

    def test_keeps_colors(self, png_bytes):
        result = crop_image(png_bytes, CropBox(0, 0, 100, 100))

        r, g, b = _open(result).getpixel((50, 50))
        assert r > 180 and g < 60 and b < 60

    def test_transparent_flattened_on_white(self):
        content = make_image_bytes(size=(40, 40), color=(0, 0, 0, 0), mode="RGBA")

        result = crop_image(content, CropBox(0, 0, 100, 100))

        image = _open(result)
        assert image.mode == "RGB"
        assert all(channel > 240 for channel in image.getpixel((20, 20)))

    def test_grayscale_converted_to_rgb(self):
        content = make_image_bytes(size=(40, 40), color=128, mode="L")

        result = crop_image(content, CropBox(0, 0, 50, 50))

        assert _open(result).mode == "RGB"

    def test_exif_orientation_applied(self):
        """A rotated phone photo is cropped as displayed (upright)."""
        image = Image.new("RGB", (200, 100), (10, 120, 10))
        exif = image.getexif()
        exif[0x0112] = 6  # Rotated 90 degrees clockwise
        buffer = io.BytesIO()
        image.save(buffer, "JPEG", exif=exif)

        result = crop_image(buffer.getvalue(), CropBox(0, 0, 100, 100))

        assert _open(result).size == (100, 200)

    def test_corrupt_image(self):
        with pytest.raises(CropError):
            crop_image(b"definitely not an image", CropBox(0, 0, 50, 50))

    def test_empty_crop(self, png_bytes):
        with pytest.raises(CropError):
            crop_image(png_bytes, CropBox(300, 0, 10, 10, unit="px"))

    def test_oversized_image(self, png_bytes, monkeypatch):
        """Images past Pillow's pixel limit are rejected, not decoded."""
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

        with pytest.raises(CropError, match="too large"):
            crop_image(png_bytes, CropBox(0, 0, 50, 50))

    def test_truncated_image(self, png_bytes):
        """Header is readable but the pixel data is cut off."""
        with pytest.raises(CropError):
            crop_image(png_bytes[:45], CropBox(0, 0, 50, 50))

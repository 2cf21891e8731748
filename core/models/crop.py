# =============================================================================
# core/models/crop.py - Crop Request Schema
# =============================================================================
# The crop box selected in the image editor, plus the size the image was
# displayed at. Sent with portrait uploads and to POST /images/crop.
# =============================================================================

from pydantic import BaseModel, Field, model_validator

from lib.image_crop import CropBox, CropUnit


class CropRequest(BaseModel):
    """
    A crop selection from the editor.

    Example (the editor's default, a centered half-size square):
        {
            "x": 25, "y": 25, "width": 50, "height": 50, "unit": "%"
        }

    With unit "px", displayed_width/displayed_height should be the size
    the image was rendered at, so the box can be scaled to the original.
    """

    x: float = Field(default=0, ge=0)
    y: float = Field(default=0, ge=0)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    unit: CropUnit = Field(default=CropUnit.PERCENT, description='"%" or "px"')

    displayed_width: float | None = Field(default=None, gt=0)
    displayed_height: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "CropRequest":
        if self.unit == CropUnit.PERCENT and (self.x + self.width > 100 or self.y + self.height > 100):
            raise ValueError("Percent crop must stay within 0-100")
        if (self.displayed_width is None) != (self.displayed_height is None):
            raise ValueError("displayed_width and displayed_height must be given together")
        return self

    def to_crop_box(self) -> CropBox:
        return CropBox(x=self.x, y=self.y, width=self.width, height=self.height, unit=self.unit)

    @property
    def displayed_size(self) -> tuple[float, float] | None:
        if self.displayed_width is None or self.displayed_height is None:
            return None
        return self.displayed_width, self.displayed_height

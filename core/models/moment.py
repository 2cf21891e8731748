# =============================================================================
# core/models/moment.py - Moment Schemas
# =============================================================================
# A moment is one batch of uploaded photographs. All images picked in a
# single submit are stored as one row holding a list of public URLs.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field

# Storage bucket for moment photos
MOMENTS_BUCKET = "moments-images"


class MomentResponse(BaseModel):
    """
    A stored batch of moment photos.

    Example:
        {
            "id": "a1b2...",
            "moments_img": [
                "https://x.supabase.co/storage/v1/object/public/moments-images/moment-1700000000000-0.jpg"
            ]
        }
    """

    model_config = ConfigDict(extra="ignore")

    id: str | int
    wedding_id: str | int | None = None
    moments_img: list[str] | None = Field(
        default_factory=list,
        description="Public URLs of the photos in this batch"
    )


class MomentList(BaseModel):
    """All moment batches of a wedding."""

    wedding_id: str | int
    moments: list[MomentResponse] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)

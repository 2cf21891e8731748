# =============================================================================
# core/models/wedding.py - Wedding Schemas
# =============================================================================
# These models define the API contract for wedding operations:
# - WeddingCreate: Text fields of the "Add New Wedding" form
# - WeddingUpdate: Partial update from the CMS form
# - WeddingSummary: One line of the wedding list
# - WeddingResponse: A full wedding row
# - WeddingList: The wedding list with its count
#
# A wedding is the root entity: moments, gifts, invites, assets and
# congrats all point to it through wedding_id.
# =============================================================================

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# "HH:MM" from <input type="time">, seconds optional
TIME_PATTERN = r"^\d{2}:\d{2}(:\d{2})?$"

# Columns holding public image URLs, with the bucket each one lives in
IMAGE_BUCKETS: dict[str, str] = {
    "groom_img": "groom-images",
    "bride_img": "bride-images",
    "modal_img": "images",
}

# Object name prefix per image column (groom-<ms>.jpg, ...)
IMAGE_PREFIXES: dict[str, str] = {
    "groom_img": "groom",
    "bride_img": "bride",
    "modal_img": "modal",
}


class WeddingCreate(BaseModel):
    """
    Text fields for creating a wedding.

    Images are uploaded alongside as files, not part of this model.

    Example:
        {
            "groom": "Budi",
            "bride": "Ani",
            "groom_name": "Budi Santoso",
            "bride_name": "Ani Lestari",
            "place": "Gedung Serbaguna, Bandung",
            "date": "2025-06-14",
            "day": "Saturday",
            "time": "10:00",
            "contract_time": "08:00"
        }
    """

    # Short display names used in headings
    groom: str = Field(..., min_length=1, description="Groom's display name")
    bride: str = Field(..., min_length=1, description="Bride's display name")

    # Full names used in share links and the invitation message
    groom_name: str = Field(..., min_length=1, description="Groom's full name")
    bride_name: str = Field(..., min_length=1, description="Bride's full name")

    groom_initial: str = Field(default="", max_length=8, description="Groom's initial")
    bride_initial: str = Field(default="", max_length=8, description="Bride's initial")
    groom_desc: str = Field(default="", description="Text shown under the groom's photo")
    bride_desc: str = Field(default="", description="Text shown under the bride's photo")

    description: str = Field(default="", description="General wedding description")

    # Event details
    place: str = Field(..., min_length=1, description="Venue")
    date: dt.date = Field(..., description="Event date")
    day: str = Field(..., min_length=1, description="Day name, e.g. Saturday")
    time: str = Field(..., pattern=TIME_PATTERN, description="Reception time (HH:MM)")
    contract_time: str = Field(..., pattern=TIME_PATTERN, description="Marriage contract (akad) time (HH:MM)")

    invite_desc: str = Field(default="", description="Invitation text shown on the public page")

    def to_row(self) -> dict[str, Any]:
        """Column values for the wedding table (dates as ISO strings)."""
        return self.model_dump(mode="json")


class WeddingUpdate(BaseModel):
    """
    Partial update of a wedding.

    Only fields that are set are written; image URLs are kept unless
    a new file accompanies the update.
    """

    groom: str | None = Field(default=None, min_length=1)
    bride: str | None = Field(default=None, min_length=1)
    groom_name: str | None = Field(default=None, min_length=1)
    bride_name: str | None = Field(default=None, min_length=1)
    groom_initial: str | None = Field(default=None, max_length=8)
    bride_initial: str | None = Field(default=None, max_length=8)
    groom_desc: str | None = None
    bride_desc: str | None = None
    description: str | None = None
    place: str | None = Field(default=None, min_length=1)
    date: dt.date | None = None
    day: str | None = Field(default=None, min_length=1)
    time: str | None = Field(default=None, pattern=TIME_PATTERN)
    contract_time: str | None = Field(default=None, pattern=TIME_PATTERN)
    invite_desc: str | None = None

    def to_row(self) -> dict[str, Any]:
        """Only the fields that were provided (an empty string clears a field)."""
        return self.model_dump(mode="json", exclude_unset=True)


class WeddingSummary(BaseModel):
    """One entry of the wedding list, newest date first."""

    model_config = ConfigDict(extra="ignore")

    id: str | int
    groom_name: str | None = None
    bride_name: str | None = None
    date: str | None = None


class WeddingResponse(BaseModel):
    """A full wedding row as stored in the backend."""

    model_config = ConfigDict(extra="ignore")

    id: str | int
    groom: str | None = None
    bride: str | None = None
    groom_name: str | None = None
    bride_name: str | None = None
    groom_initial: str | None = None
    bride_initial: str | None = None
    groom_desc: str | None = None
    bride_desc: str | None = None
    groom_img: str | None = Field(default=None, description="Public URL of the groom's photo")
    bride_img: str | None = Field(default=None, description="Public URL of the bride's photo")
    modal_img: str | None = Field(default=None, description="Public URL of the cover image")
    description: str | None = None
    place: str | None = None
    date: str | None = None
    day: str | None = None
    time: str | None = None
    contract_time: str | None = None
    invite_desc: str | None = None


class WeddingList(BaseModel):
    """
    Schema for the wedding list.

    Returned by GET /weddings.
    """

    weddings: list[WeddingSummary] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)

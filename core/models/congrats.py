# =============================================================================
# core/models/congrats.py - Guest-Book Schemas
# =============================================================================
# Guests leave a congratulation message on the public page and say
# whether they will attend.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Attendance(str, Enum):
    """
    Whether a guest will attend.

    - present: the guest will come
    - not_present: the guest can't make it
    """
    PRESENT = "present"
    NOT_PRESENT = "not_present"


class CongratsCreate(BaseModel):
    """
    Schema for a guest-book entry.

    Example:
        {
            "name": "Rina",
            "message": "Selamat menempuh hidup baru!",
            "attendance": "present"
        }
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Guest name"
    )

    message: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="Congratulation message"
    )

    attendance: Attendance = Field(
        ...,
        description="Whether the guest will attend"
    )


class CongratsResponse(BaseModel):
    """A stored guest-book entry."""

    model_config = ConfigDict(extra="ignore")

    id: str | int
    name: str
    message: str
    # Stored as text; present / not_present for entries written through the API
    attendance: str
    created_at: datetime | None = None


class AttendanceSummary(BaseModel):
    """Attendance counts over all guest-book entries of a wedding."""

    present: int = Field(default=0, ge=0)
    not_present: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)


class CongratsList(BaseModel):
    """Guest-book entries of a wedding with attendance counts."""

    wedding_id: str | int
    congrats: list[CongratsResponse] = Field(default_factory=list)
    attendance: AttendanceSummary = Field(default_factory=AttendanceSummary)

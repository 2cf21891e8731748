# =============================================================================
# core/models/gift.py - Gift Envelope Schemas
# =============================================================================
# A gift envelope is an account (bank or e-wallet) guests can send a
# wedding gift to.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class GiftCreate(BaseModel):
    """
    Schema for adding a gift envelope.

    Example:
        {
            "envelope_name": "Budi Santoso",
            "envelope_number": "1234567890",
            "rek_name": "BCA"
        }
    """

    envelope_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Name of the account holder"
    )

    envelope_number: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Account / envelope number"
    )

    # Bank name is optional (e-wallets have none)
    rek_name: str | None = Field(
        default=None,
        max_length=255,
        description="Bank name"
    )


class GiftResponse(BaseModel):
    """A stored gift envelope."""

    model_config = ConfigDict(extra="ignore")

    id: str | int | None = None
    envelope_name: str
    envelope_number: str
    rek_name: str | None = None


class GiftList(BaseModel):
    """Gift envelopes of a wedding."""

    wedding_id: str | int
    gifts: list[GiftResponse] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)

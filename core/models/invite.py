# =============================================================================
# core/models/invite.py - Invited Guest Schemas
# =============================================================================
# An invite is one guest on the couple's list. Each guest gets a personal
# share link that opens the public invitation page with their name.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class InviteCreate(BaseModel):
    """Schema for adding a guest to the invite list."""

    invited_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Guest name as it should appear on the invitation"
    )


class InviteResponse(BaseModel):
    """A guest on the invite list, with the link to send them."""

    model_config = ConfigDict(extra="ignore")

    id: str | int
    invited_name: str
    share_link: str | None = Field(
        default=None,
        description="Personalized invitation URL"
    )


class ShareLinkResponse(BaseModel):
    """
    Share text for one guest.

    `message` is the full invitation text (the clipboard content);
    `link` is the URL embedded in it.
    """

    invited_name: str
    link: str
    message: str


class InviteList(BaseModel):
    """
    The guest list of a wedding.

    Returned by GET /weddings/{id}/invites, each guest with their link.
    """

    wedding_id: str | int
    groom_name: str | None = None
    bride_name: str | None = None
    invites: list[InviteResponse] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)

# =============================================================================
# core/models/asset.py - Music Asset Schemas
# =============================================================================
# Each wedding has at most one background music track.
# =============================================================================

from pydantic import BaseModel, Field

# Storage bucket for background music
MUSIC_BUCKET = "music-assets"


class MusicResponse(BaseModel):
    """
    The music asset of a wedding.

    asset_id and music are null until a track is uploaded.
    """

    wedding_id: str | int
    asset_id: str | int | None = None
    music: str | None = Field(
        default=None,
        description="Public URL of the music file"
    )

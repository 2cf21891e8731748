# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - wedding.py: Wedding create/update/list schemas
# - moment.py: Photo batches
# - gift.py: Gift envelopes
# - invite.py: Invited guests and share links
# - asset.py: Background music
# - congrats.py: Guest-book entries and attendance
# - upload.py: Uploaded file container
# - crop.py: Crop selection from the image editor
#
# These models define the "contract" between API and clients.
# =============================================================================

from .wedding import (
    IMAGE_BUCKETS,
    IMAGE_PREFIXES,
    WeddingCreate,
    WeddingResponse,
    WeddingSummary,
    WeddingList,
    WeddingUpdate,
)
from .moment import MOMENTS_BUCKET, MomentList, MomentResponse
from .gift import GiftCreate, GiftList, GiftResponse
from .invite import InviteCreate, InviteList, InviteResponse, ShareLinkResponse
from .asset import MUSIC_BUCKET, MusicResponse
from .congrats import Attendance, AttendanceSummary, CongratsCreate, CongratsList, CongratsResponse
from .upload import UploadedFile
from .crop import CropRequest

__all__ = [
    # Wedding
    "IMAGE_BUCKETS",
    "IMAGE_PREFIXES",
    "WeddingCreate",
    "WeddingResponse",
    "WeddingSummary",
    "WeddingList",
    "WeddingUpdate",
    # Moment
    "MOMENTS_BUCKET",
    "MomentList",
    "MomentResponse",
    # Gift
    "GiftCreate",
    "GiftList",
    "GiftResponse",
    # Invite
    "InviteCreate",
    "InviteList",
    "InviteResponse",
    "ShareLinkResponse",
    # Asset
    "MUSIC_BUCKET",
    "MusicResponse",
    # Congrats
    "Attendance",
    "AttendanceSummary",
    "CongratsCreate",
    "CongratsList",
    "CongratsResponse",
    # Upload
    "UploadedFile",
    # Crop
    "CropRequest",
]

# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .storage_service import StorageService
from .wedding_service import WeddingService
from .moment_service import MomentService
from .gift_service import GiftService
from .invite_service import InviteService
from .asset_service import AssetService
from .congrats_service import CongratsService
from .image_service import ImageService

__all__ = [
    "StorageService",
    "WeddingService",
    "MomentService",
    "GiftService",
    "InviteService",
    "AssetService",
    "CongratsService",
    "ImageService",
]

# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for table operations
# - image_crop.py: Crop-box geometry and JPEG encoding (Pillow)
# - invitation_text.py: Share links and the invitation message for guests
# - utils.py: Shared utilities (UUID normalization, storage object names)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.image_crop import CropBox, CropUnit, crop_image, source_rect, to_pixel_crop
from lib.invitation_text import build_share_link, build_share_message
from lib.utils import epoch_millis, file_extension, normalize_uuid, object_name_from_url

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Image cropping
    "CropBox",
    "CropUnit",
    "crop_image",
    "source_rect",
    "to_pixel_crop",
    # Invitation text
    "build_share_link",
    "build_share_message",
    # Utils
    "epoch_millis",
    "file_extension",
    "normalize_uuid",
    "object_name_from_url",
]

# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import time
from urllib.parse import unquote, urlsplit
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        wedding_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        wedding_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Storage Naming
# =============================================================================

def epoch_millis() -> int:
    """Current time in milliseconds, used to make object names unique."""
    return int(time.time() * 1000)


def object_name_from_url(url: str) -> str:
    """
    Extract the storage object name from a public URL.

    Objects are stored at the bucket root, so the name is the last path
    segment. Query strings and fragments are ignored.

    Example:
        object_name_from_url(
            "https://x.supabase.co/storage/v1/object/public/groom-images/groom-1700000000000.jpg"
        )  # "groom-1700000000000.jpg"
    """
    path = urlsplit(url).path
    return unquote(path.rstrip("/").split("/")[-1])


def file_extension(filename: str | None) -> str:
    """Lower-cased extension including the dot, or "" when there is none."""
    if not filename or "." not in filename:
        return ""
    return "." + filename.rsplit(".", 1)[-1].lower()

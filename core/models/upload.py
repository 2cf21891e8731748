# =============================================================================
# core/models/upload.py - Uploaded File
# =============================================================================
# Framework-neutral view of a file received in a form, so services don't
# depend on FastAPI's UploadFile.
# =============================================================================

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:
    """Bytes of an uploaded file plus what the client told us about it."""

    content: bytes
    filename: str
    content_type: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)

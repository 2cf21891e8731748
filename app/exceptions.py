# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error carries a machine-readable code and a suggestion for the user.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from lib.supabase_client import SupabaseClientError

logger = logging.getLogger(__name__)


class WeddingInvitationException(Exception):
    """
    Base exception for the Wedding Invitation API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "WEDDING_INVITATION_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Wedding Exceptions
# =============================================================================

class WeddingNotFoundError(WeddingInvitationException):
    """Raised when a wedding ID doesn't exist (or no wedding exists at all)."""

    def __init__(self, wedding_id: str | None = None):
        super().__init__(
            message=f"Wedding not found: {wedding_id}" if wedding_id else "No wedding has been created yet",
            code="WEDDING_NOT_FOUND",
            status_code=404,
            suggestion="Check the weddingId, or create a wedding with POST /api/v1/weddings",
            details={"wedding_id": wedding_id} if wedding_id else None,
        )


class WeddingRequiredError(WeddingInvitationException):
    """Raised when child content is saved before the wedding itself."""

    def __init__(self, wedding_id: str | None = None):
        super().__init__(
            message="Please save wedding details first.",
            code="WEDDING_REQUIRED",
            status_code=400,
            suggestion="Create the wedding with POST /api/v1/weddings, then add moments, gifts, guests or music",
            details={"wedding_id": wedding_id} if wedding_id else None,
        )


class CascadeDeleteError(WeddingInvitationException):
    """
    Raised when deleting a wedding fails part way through.

    There is no transaction: rows and files removed by the completed steps
    stay removed.
    """

    def __init__(self, wedding_id: str, step: str, completed: list[str], error: str):
        super().__init__(
            message=f"Failed to delete wedding at step '{step}': {error}",
            code="CASCADE_DELETE_FAILED",
            status_code=500,
            suggestion="Retry the delete; steps already completed will find nothing left to remove",
            details={
                "wedding_id": wedding_id,
                "failed_step": step,
                "completed_steps": completed,
                "error": error,
            },
        )


# =============================================================================
# Child Entity Exceptions
# =============================================================================

class EntityNotFoundError(WeddingInvitationException):
    """Raised when a child row (moment, gift, invite, congrats) doesn't exist."""

    entity = "Entity"

    def __init__(self, entity_id: str):
        name = self.entity.lower()
        super().__init__(
            message=f"{self.entity} not found: {entity_id}",
            code=f"{name.upper()}_NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {name} id is correct and belongs to this wedding",
            details={f"{name}_id": entity_id},
        )


class MomentNotFoundError(EntityNotFoundError):
    entity = "Moment"


class GiftNotFoundError(EntityNotFoundError):
    entity = "Gift"


class InviteNotFoundError(EntityNotFoundError):
    entity = "Invite"


class CongratsNotFoundError(EntityNotFoundError):
    entity = "Congrats"


# =============================================================================
# Upload Exceptions
# =============================================================================

class InvalidFileTypeError(WeddingInvitationException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            message=f"Invalid file type: {filename}",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed}
        )


class FileTooLargeError(WeddingInvitationException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class ImageCropError(WeddingInvitationException):
    """Raised when an image cannot be decoded or the crop box is empty."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to crop image: {error}",
            code="IMAGE_CROP_FAILED",
            status_code=400,
            suggestion="Upload a valid image and select a crop area with non-zero width and height",
            details={"error": error}
        )


class StorageUploadError(WeddingInvitationException):
    """Raised when file upload to storage fails."""

    def __init__(self, bucket: str, error: str):
        super().__init__(
            message=f"Failed to upload file to storage: {error}",
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"bucket": bucket, "error": error}
        )


class StorageDeleteError(WeddingInvitationException):
    """Raised when removing files from storage fails."""

    def __init__(self, bucket: str, names: list[str], error: str):
        super().__init__(
            message=f"Failed to delete files from storage: {error}",
            code="STORAGE_DELETE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"bucket": bucket, "names": names, "error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def wedding_invitation_exception_handler(
    request: Request,
    exc: WeddingInvitationException
) -> JSONResponse:
    """
    Convert WeddingInvitationException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def supabase_exception_handler(
    request: Request,
    exc: SupabaseClientError
) -> JSONResponse:
    """
    Convert backend (database) failures to a 502 Bad Gateway.
    """
    logger.error(f"Backend error on {request.method} {request.url.path}: {exc}")
    content = {
        "detail": exc.message,
        "code": "BACKEND_ERROR",
        "backend_code": exc.code,
    }
    if exc.suggestion:
        content["suggestion"] = exc.suggestion
    return JSONResponse(status_code=502, content=content)


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )

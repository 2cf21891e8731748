# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# Readiness means the wedding table answers and every storage bucket the
# forms upload into exists.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app import __version__
from app.config import settings
from app.dependencies import SupabaseDep
from core.models.asset import MUSIC_BUCKET
from core.models.moment import MOMENTS_BUCKET
from core.models.wedding import IMAGE_BUCKETS
from core.services.wedding_service import WEDDING_TABLE

router = APIRouter()

# Buckets written by the wedding, moments and music forms
REQUIRED_BUCKETS = [*IMAGE_BUCKETS.values(), MOMENTS_BUCKET, MUSIC_BUCKET]


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Result of each backend probe: "healthy" or "unhealthy: <reason>"."""
    wedding_table: str = "unknown"
    storage_buckets: str = "unknown"
    missing_buckets: list[str] = Field(default_factory=list)


class ReadinessResponse(BaseModel):
    """Readiness check response ("ready" or "degraded")."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=__version__,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(supabase: SupabaseDep):
    """
    Readiness check endpoint.

    Reads one row of the wedding table and lists the storage buckets.
    groom-images, bride-images, images, moments-images and music-assets
    must all exist; any that don't are listed in missing_buckets.
    """
    checks = ChecksResponse()

    try:
        client = supabase.get_client()
        client.table(WEDDING_TABLE).select("id").limit(1).execute()
        checks.wedding_table = "healthy"
    except Exception as e:
        checks.wedding_table = f"unhealthy: {str(e)[:50]}"

    try:
        client = supabase.get_client()
        existing = {bucket.name for bucket in client.storage.list_buckets()}
        checks.missing_buckets = [name for name in REQUIRED_BUCKETS if name not in existing]
        checks.storage_buckets = (
            "healthy" if not checks.missing_buckets
            else f"unhealthy: {len(checks.missing_buckets)} bucket(s) missing"
        )
    except Exception as e:
        checks.storage_buckets = f"unhealthy: {str(e)[:50]}"

    all_healthy = checks.wedding_table == "healthy" and checks.storage_buckets == "healthy"

    return ReadinessResponse(
        status="ready" if all_healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """Whether the process is up; no backend calls."""
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )

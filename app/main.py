# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Wedding Invitation API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.exceptions import (
    WeddingInvitationException,
    supabase_exception_handler,
    validation_exception_handler,
    wedding_invitation_exception_handler,
)
from app.routers import (
    congrats,
    gifts,
    health,
    images,
    invitation,
    invites,
    moments,
    music,
    weddings,
)
from lib.supabase_client import SupabaseClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on first use, so startup only
    reports the configuration.
    """
    # Startup
    logger.info(f"Starting Wedding Invitation API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Share links point to {settings.SHARE_BASE_URL}")

    yield

    # Shutdown
    logger.info("Shutting down Wedding Invitation API")


# Create FastAPI application
app = FastAPI(
    title="Wedding Invitation API",
    description="""
## Digital Wedding Invitation API

Manage a wedding's invitation content and serve the public invitation pages.
Data lives in Supabase tables; photos and music live in Supabase Storage.

### How It Works

1. **Save Wedding Details** - Couple, venue, date and portraits
2. **Add Content** - Moment photos, gift envelopes and background music
3. **Invite Guests** - Each guest gets a personalized share link
4. **Share** - Guests open the invitation, see the gift list and leave wishes

### Quick Start

```bash
# 1. Create the wedding
curl -X POST http://localhost:8000/api/v1/weddings \\
  -F groom=Budi -F bride=Ani -F groom_name="Budi Santoso" -F bride_name="Ani Lestari" \\
  -F place="Bandung" -F date=2025-06-14 -F day=Saturday -F time=10:00 -F contract_time=08:00 \\
  -F groom_img=@groom.jpg

# 2. Invite a guest
curl -X POST http://localhost:8000/api/v1/weddings/{id}/invites \\
  -H "Content-Type: application/json" \\
  -d '{"invited_name": "Pak Rahmat"}'

# 3. Get the guest's share link
curl http://localhost:8000/api/v1/weddings/{id}/invites/{invite_id}/share
```

Use `active` in place of a wedding id to address the first wedding.
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Weddings",
            "description": "Create, edit, preview and delete weddings",
        },
        {
            "name": "Moments",
            "description": "Moment photo galleries",
        },
        {
            "name": "Gifts",
            "description": "Gift envelopes (bank accounts and e-wallets)",
        },
        {
            "name": "Invites",
            "description": "Invited guests and their share links",
        },
        {
            "name": "Music",
            "description": "Background music for the invitation page",
        },
        {
            "name": "Congrats",
            "description": "Guest-book moderation",
        },
        {
            "name": "Invitation",
            "description": "Public invitation page, gift list and guest-book",
        },
        {
            "name": "Images",
            "description": "Image cropping",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(WeddingInvitationException)
async def handle_wedding_invitation_exception(request: Request, exc: WeddingInvitationException):
    """Handle custom Wedding Invitation exceptions."""
    return await wedding_invitation_exception_handler(request, exc)


@app.exception_handler(SupabaseClientError)
async def handle_supabase_exception(request: Request, exc: SupabaseClientError):
    """Handle database failures."""
    return await supabase_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle invalid request bodies and form fields."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Wedding management endpoints
app.include_router(
    weddings.router,
    prefix="/api/v1/weddings",
    tags=["Weddings"]
)

# Moment photo endpoints
app.include_router(
    moments.router,
    prefix="/api/v1/weddings",
    tags=["Moments"]
)

# Gift envelope endpoints
app.include_router(
    gifts.router,
    prefix="/api/v1/weddings",
    tags=["Gifts"]
)

# Guest list endpoints
app.include_router(
    invites.router,
    prefix="/api/v1/weddings",
    tags=["Invites"]
)

# Music endpoints
app.include_router(
    music.router,
    prefix="/api/v1/weddings",
    tags=["Music"]
)

# Guest-book moderation endpoints
app.include_router(
    congrats.router,
    prefix="/api/v1/weddings",
    tags=["Congrats"]
)

# Public invitation endpoints
app.include_router(
    invitation.router,
    prefix="/api/v1/invitation",
    tags=["Invitation"]
)

# Image cropping endpoints
app.include_router(
    images.router,
    prefix="/api/v1/images",
    tags=["Images"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Wedding Invitation API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }

# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - weddings.py: Wedding list, add/edit forms, preview and delete
# - moments.py: Moment photo batches
# - gifts.py: Gift envelopes
# - invites.py: Guest list and share links
# - music.py: Background music
# - congrats.py: Guest-book moderation
# - invitation.py: Public invitation page, gift list and guest-book
# - images.py: Image cropping
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import weddings
from . import moments
from . import gifts
from . import invites
from . import music
from . import congrats
from . import invitation
from . import images

__all__ = [
    "health",
    "weddings",
    "moments",
    "gifts",
    "invites",
    "music",
    "congrats",
    "invitation",
    "images",
]

# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides sample rows as the backend returns them
# - Provides in-memory images for upload and crop tests
# =============================================================================

import io
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SHARE_BASE_URL", "https://invite.example.com")

import pytest
from PIL import Image

STORAGE_URL = "https://test-project.supabase.co/storage/v1/object/public"


# =============================================================================
# Row Fixtures
# =============================================================================

@pytest.fixture
def sample_wedding():
    """A wedding row as stored in the backend."""
    return {
        "id": "wedding-123",
        "groom": "Budi",
        "bride": "Ani",
        "groom_name": "Budi Santoso",
        "bride_name": "Ani Lestari",
        "groom_initial": "B",
        "bride_initial": "A",
        "groom_desc": "Putra pertama Bapak Santoso",
        "bride_desc": "Putri kedua Bapak Lestari",
        "groom_img": f"{STORAGE_URL}/groom-images/groom-1700000000000.jpg",
        "bride_img": f"{STORAGE_URL}/bride-images/bride-1700000000001.jpg",
        "modal_img": f"{STORAGE_URL}/images/modal-1700000000002.jpg",
        "description": "Dengan memohon rahmat Allah SWT",
        "place": "Gedung Serbaguna, Bandung",
        "date": "2025-06-14",
        "day": "Sabtu",
        "time": "10:00",
        "contract_time": "08:00",
        "invite_desc": "Kami mengundang Anda",
    }


@pytest.fixture
def sample_wedding_form():
    """Text fields of the add-wedding form."""
    return {
        "groom": "Budi",
        "bride": "Ani",
        "groom_name": "Budi Santoso",
        "bride_name": "Ani Lestari",
        "place": "Gedung Serbaguna, Bandung",
        "date": "2025-06-14",
        "day": "Sabtu",
        "time": "10:00",
        "contract_time": "08:00",
    }


@pytest.fixture
def sample_moments():
    """Two moment batches."""
    return [
        {
            "id": "moment-1",
            "moments_img": [
                f"{STORAGE_URL}/moments-images/moment-1700000000000-0.jpg",
                f"{STORAGE_URL}/moments-images/moment-1700000000000-1.jpg",
            ],
        },
        {
            "id": "moment-2",
            "moments_img": [f"{STORAGE_URL}/moments-images/moment-1700000005000-0.jpg"],
        },
    ]


@pytest.fixture
def sample_gifts():
    """Gift envelopes: one bank account, one e-wallet."""
    return [
        {"id": "gift-1", "envelope_name": "Budi Santoso", "envelope_number": "1234567890", "rek_name": "BCA"},
        {"id": "gift-2", "envelope_name": "Ani Lestari", "envelope_number": "08123456789", "rek_name": None},
    ]


@pytest.fixture
def sample_congrats():
    """Guest-book entries, newest first."""
    return [
        {
            "id": "congrats-3",
            "name": "Rina",
            "message": "Selamat menempuh hidup baru!",
            "attendance": "present",
            "created_at": "2025-06-01T10:00:00+00:00",
        },
        {
            "id": "congrats-2",
            "name": "Dedi",
            "message": "Semoga sakinah mawaddah warahmah",
            "attendance": "not_present",
            "created_at": "2025-05-30T08:00:00+00:00",
        },
        {
            "id": "congrats-1",
            "name": "Sari",
            "message": "Barakallah!",
            "attendance": "present",
            "created_at": "2025-05-29T12:00:00+00:00",
        },
    ]


# =============================================================================
# Image Fixtures
# =============================================================================

def make_image_bytes(size=(200, 100), color=(200, 30, 30), fmt="PNG", mode="RGB") -> bytes:
    """Encode a solid-color image in memory."""
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    """A 200x100 red PNG."""
    return make_image_bytes()


@pytest.fixture
def jpeg_bytes():
    """A 200x100 red JPEG."""
    return make_image_bytes(fmt="JPEG")

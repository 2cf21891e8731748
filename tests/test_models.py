# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for all Pydantic models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Models serialize to row dicts properly
# - Default values work as expected
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

from datetime import date

import pytest
from pydantic import ValidationError

from core.models import (
    Attendance,
    AttendanceSummary,
    CongratsCreate,
    CongratsResponse,
    CropRequest,
    GiftCreate,
    GiftResponse,
    InviteCreate,
    CongratsList,
    MomentList,
    MusicResponse,
    UploadedFile,
    WeddingCreate,
    WeddingList,
    WeddingResponse,
    WeddingUpdate,
)
from lib.image_crop import CropUnit


# =============================================================================
# Wedding Model Tests
# =============================================================================

class TestWeddingCreate:
    """Tests for WeddingCreate model."""

    def test_valid_wedding(self, sample_wedding_form):
        """Test creating a valid wedding from form fields."""
        wedding = WeddingCreate(**sample_wedding_form)

        assert wedding.groom_name == "Budi Santoso"
        assert wedding.date == date(2025, 6, 14)
        assert wedding.time == "10:00"

    def test_optional_fields_default_to_empty(self, sample_wedding_form):
        """Descriptions and initials are optional."""
        wedding = WeddingCreate(**sample_wedding_form)

        assert wedding.groom_initial == ""
        assert wedding.bride_desc == ""
        assert wedding.invite_desc == ""

    def test_to_row_serializes_date(self, sample_wedding_form):
        """The row carries the date as an ISO string."""
        row = WeddingCreate(**sample_wedding_form).to_row()

        assert row["date"] == "2025-06-14"
        assert row["groom"] == "Budi"
        assert "groom_img" not in row

    def test_missing_required_field(self, sample_wedding_form):
        """Test that the venue is required."""
        del sample_wedding_form["place"]

        with pytest.raises(ValidationError) as exc_info:
            WeddingCreate(**sample_wedding_form)

        assert "place" in str(exc_info.value)

    def test_invalid_time(self, sample_wedding_form):
        """Times must look like HH:MM."""
        sample_wedding_form["time"] = "ten o'clock"

        with pytest.raises(ValidationError):
            WeddingCreate(**sample_wedding_form)

    def test_time_with_seconds(self, sample_wedding_form):
        """HH:MM:SS is accepted too."""
        sample_wedding_form["contract_time"] = "08:00:00"

        assert WeddingCreate(**sample_wedding_form).contract_time == "08:00:00"

    def test_invalid_date(self, sample_wedding_form):
        sample_wedding_form["date"] = "14/06/2025"

        with pytest.raises(ValidationError):
            WeddingCreate(**sample_wedding_form)


class TestWeddingUpdate:
    """Tests for WeddingUpdate model."""

    def test_empty_update(self):
        """An update with nothing set writes nothing."""
        assert WeddingUpdate().to_row() == {}

    def test_partial_update(self):
        """Only the provided fields end up in the row."""
        row = WeddingUpdate(place="Hotel Savoy", date="2025-07-01").to_row()

        assert row == {"place": "Hotel Savoy", "date": "2025-07-01"}

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            WeddingUpdate(groom_name="")

    def test_empty_description_kept(self):
        """An empty string clears the field instead of being dropped."""
        row = WeddingUpdate(groom_desc="", invite_desc="").to_row()

        assert row == {"groom_desc": "", "invite_desc": ""}


class TestWeddingResponse:
    """Tests for WeddingResponse model."""

    def test_from_row(self, sample_wedding):
        """Rows parse with all columns."""
        wedding = WeddingResponse(**sample_wedding)

        assert wedding.id == "wedding-123"
        assert wedding.groom_img.endswith("groom-1700000000000.jpg")

    def test_extra_columns_ignored(self, sample_wedding):
        sample_wedding["created_at"] = "2025-01-01T00:00:00+00:00"

        wedding = WeddingResponse(**sample_wedding)

        assert not hasattr(wedding, "created_at")

    def test_missing_images(self):
        """Weddings saved without photos have null image URLs."""
        wedding = WeddingResponse(id=1, groom_name="Budi")

        assert wedding.groom_img is None
        assert wedding.modal_img is None


class TestWeddingList:

    def test_summary_rows(self):
        weddings = WeddingList(
            weddings=[{"id": "w-1", "groom_name": "Budi", "bride_name": "Ani", "date": "2025-06-14"}],
            total=1,
        )

        assert weddings.weddings[0].bride_name == "Ani"

    def test_empty(self):
        assert WeddingList().total == 0


# =============================================================================
# Gift Model Tests
# =============================================================================

class TestGiftCreate:
    """Tests for GiftCreate model."""

    def test_valid_gift(self):
        gift = GiftCreate(envelope_name="Budi Santoso", envelope_number="1234567890", rek_name="BCA")

        assert gift.rek_name == "BCA"

    def test_bank_name_optional(self):
        """E-wallet envelopes have no bank name."""
        gift = GiftCreate(envelope_name="Ani", envelope_number="08123456789")

        assert gift.rek_name is None

    def test_envelope_number_required(self):
        with pytest.raises(ValidationError):
            GiftCreate(envelope_name="Ani", envelope_number="")

    def test_response_ignores_wedding_id(self):
        gift = GiftResponse(id="gift-1", envelope_name="Ani", envelope_number="1", wedding_id="w")

        assert gift.id == "gift-1"


# =============================================================================
# Invite Model Tests
# =============================================================================

class TestInviteCreate:
    """Tests for InviteCreate model."""

    def test_valid_invite(self):
        assert InviteCreate(invited_name="Pak Rahmat").invited_name == "Pak Rahmat"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            InviteCreate(invited_name="")


# =============================================================================
# Congrats Model Tests
# =============================================================================

class TestCongratsCreate:
    """Tests for CongratsCreate model."""

    def test_valid_entry(self):
        entry = CongratsCreate(name="Rina", message="Selamat!", attendance="present")

        assert entry.attendance == Attendance.PRESENT

    def test_not_present(self):
        entry = CongratsCreate(name="Dedi", message="Maaf tidak bisa hadir", attendance="not_present")

        assert entry.attendance == Attendance.NOT_PRESENT
        assert entry.attendance.value == "not_present"

    def test_invalid_attendance(self):
        """Only present / not_present are accepted."""
        with pytest.raises(ValidationError):
            CongratsCreate(name="Rina", message="Selamat!", attendance="maybe")

    def test_message_required(self):
        with pytest.raises(ValidationError):
            CongratsCreate(name="Rina", message="", attendance="present")

    def test_name_too_long(self):
        with pytest.raises(ValidationError):
            CongratsCreate(name="x" * 101, message="Selamat!", attendance="present")

    def test_response_parses_timestamp(self, sample_congrats):
        entry = CongratsResponse(**sample_congrats[0])

        assert entry.created_at.year == 2025
        assert entry.attendance == Attendance.PRESENT


class TestAttendanceSummary:
    """Tests for AttendanceSummary model."""

    def test_defaults(self):
        summary = AttendanceSummary()

        assert summary.present == 0
        assert summary.total == 0


# =============================================================================
# Crop Model Tests
# =============================================================================

class TestCropRequest:
    """Tests for CropRequest model."""

    def test_default_unit_is_percent(self):
        crop = CropRequest(x=25, y=25, width=50, height=50)

        assert crop.unit == CropUnit.PERCENT
        assert crop.displayed_size is None

    def test_pixel_crop_with_displayed_size(self):
        crop = CropRequest(
            x=10, y=10, width=100, height=80, unit="px",
            displayed_width=400, displayed_height=300,
        )

        assert crop.displayed_size == (400, 300)
        box = crop.to_crop_box()
        assert box.unit == CropUnit.PIXEL
        assert box.width == 100

    def test_percent_crop_out_of_bounds(self):
        """A percent box can't extend past 100%."""
        with pytest.raises(ValidationError):
            CropRequest(x=60, y=0, width=50, height=50)

    def test_zero_width_rejected(self):
        with pytest.raises(ValidationError):
            CropRequest(x=0, y=0, width=0, height=50)

    def test_displayed_size_needs_both_dimensions(self):
        with pytest.raises(ValidationError):
            CropRequest(x=0, y=0, width=10, height=10, unit="px", displayed_width=400)

    def test_parse_json(self):
        """Portrait forms send the crop as a JSON string."""
        crop = CropRequest.model_validate_json('{"x": 25, "y": 25, "width": 50, "height": 50, "unit": "%"}')

        assert crop.x == 25

    def test_unknown_unit(self):
        with pytest.raises(ValidationError):
            CropRequest(x=0, y=0, width=10, height=10, unit="cm")


# =============================================================================
# Upload Model Tests
# =============================================================================

class TestUploadedFile:
    """Tests for UploadedFile."""

    def test_size(self):
        upload = UploadedFile(content=b"12345", filename="a.jpg")

        assert upload.size == 5
        assert upload.content_type is None


# =============================================================================
# List Model Tests
# =============================================================================

class TestListModels:
    """Tests for per-wedding list responses."""

    def test_moment_list(self, sample_moments):
        moments = MomentList(wedding_id="w-1", moments=sample_moments, total=2)

        assert len(moments.moments[0].moments_img) == 2

    def test_moment_without_photos(self):
        moments = MomentList(wedding_id="w-1", moments=[{"id": "m-1", "moments_img": None}], total=1)

        assert moments.moments[0].moments_img is None

    def test_music_defaults(self):
        music = MusicResponse(wedding_id="w-1")

        assert music.asset_id is None
        assert music.music is None

    def test_congrats_list(self, sample_congrats):
        congrats = CongratsList(
            wedding_id="w-1",
            congrats=sample_congrats,
            attendance={"present": 2, "not_present": 1, "total": 3},
        )

        assert congrats.attendance.present == 2
        assert congrats.congrats[1].attendance == "not_present"

# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Wedding Invitation API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_image_crop.py: Tests for crop geometry and JPEG output
# - test_invitation_text.py: Tests for share links and the invitation message
# - test_utils.py: Tests for storage naming helpers
# - test_supabase_client.py: Tests for the Supabase wrapper (mocked client)
# - test_services.py: Tests for business logic (mocked backend)
# - test_api.py: Endpoint tests with FastAPI's TestClient
#
# Run tests with: pytest
# =============================================================================

# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for data validation
# - services/: One service per entity, each a sequence of Supabase calls
#
# Services raise the exceptions defined in app/exceptions.py; routers
# stay thin and only translate HTTP input into service calls.
# =============================================================================

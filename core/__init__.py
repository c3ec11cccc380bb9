# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the domain pieces behind the HTTP layer:
# - models/: Pydantic schemas for data validation
# - services/: Record persistence logic
# - readiness.py: Process-wide readiness flag
# =============================================================================

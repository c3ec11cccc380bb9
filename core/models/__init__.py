# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - record.py: Record schema (the {id, name} pair persisted by POST /data)
#
# These models define the "contract" between API and clients.
# =============================================================================

from .record import Record

__all__ = [
    "Record",
]

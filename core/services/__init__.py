# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .record_service import RecordService

__all__ = [
    "RecordService",
]

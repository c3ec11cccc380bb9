# =============================================================================
# core/readiness.py - Readiness Flag
# =============================================================================
# Process-wide "ready to serve" signal consulted by GET /health/ready.
#
# Lifecycle: False at process start, True once the database has answered
# its first ping. Nothing sets it back to False; a database outage after
# startup is reported by the readiness probe's own ping instead.
# =============================================================================

import threading


class ReadinessFlag:
    """
    Boolean flag with atomic reads and writes.

    There are no waiters and no notifications: callers poll is_ready().
    One instance is created per application and stored on app.state.
    """

    def __init__(self, ready: bool = False):
        self._lock = threading.Lock()
        self._ready = ready

    def set_ready(self, ready: bool) -> None:
        with self._lock:
            self._ready = ready

    def is_ready(self) -> bool:
        with self._lock:
            return self._ready

    def __repr__(self) -> str:
        return f"ReadinessFlag(ready={self.is_ready()})"

"""
Sheet Counter — Page state
Single container for everything the page renders: load status, rows, pending writes.
"""

import threading
from collections import Counter
from datetime import datetime, timezone

from sheet import Row, parse_int

LOADING = "loading"
READY = "ready"
ERROR = "error"


class StateError(Exception):
    """Operation not allowed in the current load status."""


class RowState:
    """Rows as last loaded, plus optimistic edits made since."""

    def __init__(self):
        self._lock = threading.Lock()
        self.status = LOADING
        self.rows = []
        self.pending = Counter()  # row index → writes in flight
        self.error = None
        self.loaded_at = None

    # ─── Load cycle ───

    def begin_load(self):
        """Show the loading state, unless rows are already on screen (reconciling fetch)."""
        with self._lock:
            if self.status != READY:
                self.status = LOADING
                self.error = None

    def finish_load(self, rows):
        with self._lock:
            self.rows = list(rows)
            self.status = READY
            self.error = None
            self.loaded_at = datetime.now(timezone.utc)

    def fail_load(self, message):
        with self._lock:
            self.rows = []
            self.status = ERROR
            self.error = message

    # ─── Edits ───

    def apply_delta(self, index, delta):
        """Optimistically add `delta` to a row's value. Returns the new value text."""
        with self._lock:
            if self.status != READY:
                raise StateError(f"Cannot adjust rows while {self.status}")
            if not 0 <= index < len(self.rows):
                raise IndexError(f"Row {index} out of range (0-{len(self.rows) - 1})")
            row = self.rows[index]
            new_value = str(parse_int(row.value) + delta)
            self.rows[index] = Row(name=row.name, value=new_value)
            return new_value

    def mark_pending(self, index):
        with self._lock:
            self.pending[index] += 1

    def clear_pending(self, index):
        with self._lock:
            self.pending[index] -= 1
            if self.pending[index] <= 0:
                del self.pending[index]

    # ─── Rendering ───

    def snapshot(self):
        """JSON-ready view of the state."""
        with self._lock:
            return {
                "status": self.status,
                "rows": [r.to_dict() for r in self.rows],
                "count": len(self.rows),
                "pending": sorted(self.pending),
                "error": self.error,
                "loadedAt": self.loaded_at.isoformat() if self.loaded_at else None,
            }

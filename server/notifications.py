"""
Sheet Counter — Toast notifications
Transient messages shown on the page; they expire on their own.
"""

import itertools
import threading
import time
from datetime import datetime, timezone

from cachetools import TTLCache

import config

SUCCESS = "success"
FAILURE = "error"


class NotificationCenter:
    def __init__(self, ttl=None, maxsize=None, timer=time.monotonic):
        self._cache = TTLCache(
            maxsize=maxsize or config.NOTIFICATION_MAX,
            ttl=ttl if ttl is not None else config.NOTIFICATION_TTL_SECONDS,
            timer=timer,
        )
        self._ids = itertools.count(1)
        # TTLCache is not thread-safe; writer threads and request threads both touch it
        self._lock = threading.Lock()

    def notify(self, kind, title, description=""):
        with self._lock:
            note = {
                "id": next(self._ids),
                "kind": kind,
                "title": title,
                "description": description,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
            self._cache[note["id"]] = note
            return note

    def success(self, title, description=""):
        return self.notify(SUCCESS, title, description)

    def failure(self, title, description=""):
        return self.notify(FAILURE, title, description)

    def recent(self):
        """Unexpired notifications, oldest first."""
        with self._lock:
            return sorted(self._cache.values(), key=lambda n: n["id"])

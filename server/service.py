"""
Sheet Counter — Service
Wires the page state, the toast feed and the row editor to the Google Sheet.
"""

import threading

from editor import RowEditor
from notifications import NotificationCenter
from sheet import LoadError, load_rows
from state import RowState


class SheetService:
    def __init__(self, executor=None):
        self._load_lock = threading.Lock()
        self._load_started = False
        self.state = RowState()
        self.notifications = NotificationCenter()
        self.editor = RowEditor(
            self.state, self.notifications, reconcile=self.refresh, executor=executor,
        )

    def refresh(self):
        """One fetch cycle. Never raises; a failed load leaves the state in `error`."""
        self._load_started = True
        self.state.begin_load()
        try:
            rows = load_rows()
        except LoadError as e:
            self.state.fail_load(str(e))
            self.notifications.failure("Unable to load data", "Please try again later")
            return False

        self.state.finish_load(rows)
        return True

    def ensure_loaded(self):
        """Run the first load on demand, once. Returns None when a load already started."""
        with self._load_lock:
            if self._load_started:
                return None
            self._load_started = True
        return self.refresh()

    def adjust(self, index, delta):
        return self.editor.adjust(index, delta)

    def snapshot(self):
        return self.state.snapshot()

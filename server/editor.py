"""
Sheet Counter — Row editor
Applies +/- adjustments locally, then saves them to the sheet in the background.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import config
from sheet import WriteError, write_value

log = logging.getLogger("sheet-counter")


class DeltaError(ValueError):
    """Adjustment amount is not an integer."""


class RowEditor:
    """Optimistic edit → background write → reconciling fetch.

    `reconcile` is called exactly once after every write, whether it succeeded or not.
    """

    def __init__(self, state, notifications, reconcile, executor=None):
        self.state = state
        self.notifications = notifications
        self.reconcile = reconcile
        self.executor = executor or ThreadPoolExecutor(
            max_workers=config.WRITE_MAX_WORKERS,
            thread_name_prefix="sheet-write",
        )

    def adjust(self, index, delta):
        """Change a row's value by `delta` and queue the write. Returns the write's Future.

        Raises DeltaError / IndexError / StateError before anything is written.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise DeltaError(f"delta must be an integer, got {delta!r}")

        new_value = self.state.apply_delta(index, delta)
        self.state.mark_pending(index)
        log.info(f"Row {index} adjusted by {delta:+d} → {new_value} (saving in background)")

        future = self.executor.submit(self._save, index, new_value)
        future.add_done_callback(_log_crash)
        return future

    def _save(self, index, value):
        try:
            write_value(index, value)
        except WriteError as e:
            self.notifications.failure(
                "Update failed",
                "The change could not be saved. Reloading the latest values.",
            )
            log.warning(f"Row {index} not saved, reloading: {e}")
            saved = False
        else:
            self.notifications.success(
                "Value updated",
                "The change was saved to the spreadsheet.",
            )
            saved = True
        finally:
            self.state.clear_pending(index)

        self.reconcile()
        return saved


def _log_crash(future):
    e = future.exception()
    if e is not None:
        log.error(f"Background write crashed: {e!r}")

"""
Sheet Counter — Flask Server
Serves the Data Manager page and the JSON API behind it.

Rows come from a published Google Sheet (CSV export); +/- edits are shown
immediately, saved through an Apps Script web app, then re-read from the sheet.
"""

import logging
import os
import threading
from datetime import datetime, timezone
from pathlib import Path

from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS

import config
from editor import DeltaError
from service import SheetService
from state import StateError

# ─── Setup ───
PROJECT_ROOT = Path(__file__).resolve().parent.parent  # sheet-counter/

# static_folder=None keeps Flask from registering a catch-all static route over /api/
app = Flask(__name__, static_folder=None)
CORS(app)
logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
log = logging.getLogger("sheet-counter")

service = SheetService()


# ═══════════════════════════════════════
# PAGE
# ═══════════════════════════════════════

@app.route("/")
def serve_index():
    """Serve the Data Manager page."""
    return send_from_directory(PROJECT_ROOT, "index.html")


# ═══════════════════════════════════════
# ROWS API
# ═══════════════════════════════════════

@app.route("/api/rows")
def api_rows():
    """Return the current rows and load status."""
    # First hit loads the sheet when nothing started a load yet (WSGI servers skip __main__)
    service.ensure_loaded()
    return jsonify(service.snapshot())


@app.route("/api/refresh", methods=["POST"])
def api_refresh():
    """Reload rows from the sheet (Retry button)."""
    service.refresh()
    return jsonify(service.snapshot())


@app.route("/api/rows/<int:index>/adjust", methods=["POST"])
def api_adjust(index):
    """Apply a +/- edit. Responds with the optimistic state; the save runs in the background."""
    payload = request.get_json(silent=True) or {}
    delta = payload.get("delta")

    try:
        service.adjust(index, delta)
    except DeltaError as e:
        return jsonify({"error": str(e)}), 400
    except IndexError as e:
        return jsonify({"error": str(e)}), 404
    except StateError as e:
        return jsonify({"error": str(e)}), 409

    return jsonify(service.snapshot())


@app.route("/api/notifications")
def api_notifications():
    """Return toasts that haven't expired yet."""
    notes = service.notifications.recent()
    return jsonify({"notifications": notes, "count": len(notes)})


@app.route("/api/status")
def api_status():
    """Health check — endpoints and current load status."""
    snap = service.snapshot()
    return jsonify({
        "ok": snap["status"] != "error",
        "sources": {
            "sheet": {
                "url": config.CSV_URL,
                "status": snap["status"],
                "last_count": snap["count"],
                "loaded_at": snap["loadedAt"],
            },
            "writer": {
                "url": config.WRITE_URL,
                "method": config.WRITE_METHOD,
                "pending": len(snap["pending"]),
            },
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })


# ═══════════════════════════════════════
# INITIAL LOAD
# ═══════════════════════════════════════

def _initial_load():
    """Load rows in background so the page opens straight into its loading state."""
    log.info("Loading rows (background)...")
    loaded = service.ensure_loaded()
    if loaded is None:
        log.info("Initial load already handled by a request")
    elif loaded:
        log.info("Initial load complete")
    else:
        log.warning("Initial load failed — page will offer a retry")


# ═══════════════════════════════════════
# STARTUP
# ═══════════════════════════════════════

if __name__ == "__main__":
    log.info("=" * 50)
    log.info("Sheet Counter — Starting server")
    log.info(f"Sheet source: {config.CSV_URL}")
    log.info(f"Write endpoint: {config.WRITE_URL} ({config.WRITE_METHOD})")
    log.info(f"Server: http://localhost:{config.SERVER_PORT}")
    log.info("=" * 50)

    # Only in the actual server process, not the reloader
    if os.environ.get("WERKZEUG_RUN_MAIN") == "true" or not config.DEBUG:
        threading.Thread(target=_initial_load, daemon=True).start()

    app.run(
        host=config.SERVER_HOST,
        port=config.SERVER_PORT,
        debug=config.DEBUG,
        threaded=True,
    )

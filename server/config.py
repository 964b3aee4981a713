"""
Sheet Counter — Configuration
Edit this file to point the page at your spreadsheet.
"""

# ═══════════════════════════════════════
# GOOGLE SHEET (read)
# ═══════════════════════════════════════

# Published CSV export (File → Share → Publish to web → CSV)
CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vRzhT3ACLoKbVHzGpaslY_l4cBCUqNf5kUh6QRlACgIFsQtBTHiiQya7eAt28DGselPyGxBd7NWY85G"
    "/pub?output=csv"
)
FETCH_TIMEOUT_SECONDS = 15


# ═══════════════════════════════════════
# APPS SCRIPT (write)
# ═══════════════════════════════════════

# Deployed web app URL — doPost(e) / doGet(e) reads e.parameter.index and e.parameter.value
WRITE_URL = "https://script.google.com/macros/s/DEPLOYMENT_ID/exec"
WRITE_METHOD = "POST"                # "POST" = form body, "GET" = query string
WRITE_TIMEOUT_SECONDS = 20

# Sheet rows are 1-based, list positions are 0-based.
# Every CSV line (header included) is a row, so position i is sheet row i + 1.
WRITE_ROW_OFFSET = 1

WRITE_MAX_WORKERS = 4                # concurrent writes in flight


# ═══════════════════════════════════════
# NOTIFICATIONS (toasts)
# ═══════════════════════════════════════

NOTIFICATION_TTL_SECONDS = 8         # How long a toast stays visible
NOTIFICATION_MAX = 20                # Max toasts kept at once


# ═══════════════════════════════════════
# HTTP
# ═══════════════════════════════════════

HTTP_HEADERS = {"User-Agent": "SheetCounter/1.0"}


# ═══════════════════════════════════════
# SERVER
# ═══════════════════════════════════════

SERVER_HOST = "0.0.0.0"
SERVER_PORT = 5000
DEBUG = True

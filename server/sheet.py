"""
Sheet Counter — Google Sheet I/O
Reads rows from the published CSV export and writes single values back
through the Apps Script web app.
"""

import logging
import re
from dataclasses import dataclass

import requests

import config

log = logging.getLogger("sheet-counter")


class SheetError(Exception):
    """Base class for spreadsheet I/O failures."""


class LoadError(SheetError):
    """CSV endpoint unreachable or returned a non-2xx status."""


class WriteError(SheetError):
    """Write endpoint unreachable or returned a non-2xx status."""


@dataclass
class Row:
    name: str
    value: str

    def to_dict(self):
        return {"name": self.name, "value": self.value}


# ═══════════════════════════════════════
# PARSING
# ═══════════════════════════════════════

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(text):
    """Read the leading integer of a value cell ("12", "-3", "7 boxes"); 0 if there is none."""
    match = _LEADING_INT.match(text or "")
    if not match:
        return 0
    return int(match.group(1))


def parse_rows(text):
    """Split a CSV body into rows.

    Field 0 is the name, field 1 (trimmed) is the value, "0" when missing.
    No quoting support: a comma inside a cell splits it.
    """
    lines = text.split("\n")
    # A trailing newline ends the last line, it doesn't start a new one
    if lines and lines[-1] == "":
        lines.pop()

    rows = []
    for line in lines:
        fields = line.rstrip("\r").split(",")
        value = fields[1].strip() if len(fields) > 1 else ""
        rows.append(Row(name=fields[0], value=value or "0"))
    return rows


# ═══════════════════════════════════════
# READ
# ═══════════════════════════════════════

def load_rows():
    """Fetch the CSV export and parse it. Raises LoadError."""
    log.info(f"Fetching rows from Google Sheet: {config.CSV_URL}")

    try:
        resp = requests.get(
            config.CSV_URL,
            headers=config.HTTP_HEADERS,
            timeout=config.FETCH_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
        resp.encoding = "utf-8"
    except requests.RequestException as e:
        log.warning(f"Google Sheet fetch failed: {e}")
        raise LoadError(f"Could not load {config.CSV_URL}: {e}") from e

    rows = parse_rows(resp.text)
    log.info(f"Loaded {len(rows)} rows from Google Sheet")
    return rows


# ═══════════════════════════════════════
# WRITE
# ═══════════════════════════════════════

def write_value(index, value):
    """Send one cell update to the Apps Script endpoint. Raises WriteError.

    `index` is the list position; the endpoint receives the sheet row number.
    """
    params = {"index": str(index + config.WRITE_ROW_OFFSET), "value": str(value)}
    method = config.WRITE_METHOD.upper()
    log.info(f"Writing row {params['index']} = {params['value']} ({method})")

    kwargs = {"data": params} if method == "POST" else {"params": params}
    try:
        resp = requests.request(
            method,
            config.WRITE_URL,
            headers=config.HTTP_HEADERS,
            timeout=config.WRITE_TIMEOUT_SECONDS,
            **kwargs,
        )
        resp.raise_for_status()
    except requests.RequestException as e:
        log.warning(f"Apps Script write failed for row {params['index']}: {e}")
        raise WriteError(f"Could not save row {params['index']}: {e}") from e

    return params

import sys

import config
import sheet

# Quick look at what the page will show: fetch the published CSV and print the parsed rows
try:
    rows = sheet.load_rows()
except sheet.LoadError as e:
    print(f"LOAD FAILED: {e}")
    sys.exit(1)

print(f"Source: {config.CSV_URL}")
print(f"Rows: {len(rows)}")
print()

for i, row in enumerate(rows):
    print(f"  [{i}] sheet row {i + config.WRITE_ROW_OFFSET}: {row.name!r} = {row.value}")

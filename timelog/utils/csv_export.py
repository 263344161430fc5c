"""CSV export of timeline views

Two layouts: the standard one (feed, sector and well views) and the legacy
table layout. Every field is quoted.
"""

import csv
import io
from typing import Dict, Iterable

from .helpers import duration_hours, duration_minutes, safe_filename

CSV_DATETIME_FORMAT = "%Y-%m-%d %H:%M"

STANDARD_HEADERS = ["Well ID", "Operation Type", "Party", "Stage", "Start Time", "End Time", "Duration (hours)"]

LEGACY_HEADERS = [
    "Engineer",
    "Pump Operator",
    "Supervisor",
    "Customer Rep",
    "Type",
    "Sector",
    "Well",
    "Stage",
    "Party",
    "Main Event",
    "Complete",
    "Date/Time",
    "Minutes",
    "EndDate/Time",
    "Notes",
]


def _fmt(dt, missing=""):
    return dt.strftime(CSV_DATETIME_FORMAT) if dt else missing


def _text(value):
    return "" if value is None else str(value)


def _newest_first(operations):
    return sorted(operations, key=lambda op: (op.start_time, op.id), reverse=True)


def _write(headers, rows) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return buffer.getvalue()


def operations_to_csv(operations: Iterable) -> str:
    """Standard export, newest first; "Ongoing" for a missing end"""
    rows = [
        [
            op.well_id,
            op.type,
            _text(op.party),
            _text(op.stage),
            _fmt(op.start_time),
            _fmt(op.end_time, "Ongoing"),
            duration_hours(op.start_time, op.end_time),
        ]
        for op in _newest_first(operations)
    ]
    return _write(STANDARD_HEADERS, rows)


def operations_to_legacy_csv(operations: Iterable, well_names: Dict[str, str]) -> str:
    """Legacy table export with personnel, whole minutes and notes"""
    rows = []
    for op in _newest_first(operations):
        minutes = duration_minutes(op.start_time, op.end_time)
        rows.append([
            _text(op.engineer),
            _text(op.pump_operator),
            _text(op.supervisor),
            _text(op.customer_rep),
            op.type,
            _text(op.sector),
            well_names.get(op.well_id, op.well_id),
            _text(op.stage),
            _text(op.party),
            _text(op.main_event),
            "Yes" if op.completed else "No",
            _fmt(op.start_time),
            _text(minutes),
            _fmt(op.end_time),
            _text(op.comments),
        ])
    return _write(LEGACY_HEADERS, rows)


def export_filename(view: str, name: str = "") -> str:
    """Download file name of a view: feed, sector, well or table"""
    if view == "feed":
        return "sacred-timeline.csv"
    if view == "table":
        return "old-timeline.csv"
    return f"{safe_filename(name)}-timeline.csv"
